from __future__ import annotations

import logging
from typing import Mapping

from twilio.request_validator import RequestValidator


logger = logging.getLogger(__name__)


def verify_twilio_signature(
    url: str,
    params: Mapping[str, str],
    signature_header: str | None,
    auth_token: str | None,
    env: str,
) -> bool:
    if not signature_header:
        if env.lower() in {"dev", "local"}:
            logger.warning("Missing signature header; accepting in dev mode")
            return True
        return False

    if not auth_token:
        logger.error("Missing Twilio auth token for signature verification")
        return False

    return RequestValidator(auth_token).validate(url, dict(params), signature_header)
