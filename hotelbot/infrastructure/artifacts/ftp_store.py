from __future__ import annotations

import ftplib
import io
import logging

from hotelbot.application.ports.artifact_store import ArtifactStorePort


class FtpArtifactStore(ArtifactStorePort):
    """Uploads artifacts to an FTP directory served over HTTP at base_url."""

    def __init__(
        self,
        host: str,
        user: str,
        password: str,
        base_url: str,
        directory: str = "/qr",
        timeout: float = 10.0,
    ) -> None:
        if not host:
            raise ValueError("FTP_HOST is required for the FTP artifact store")
        self._host = host
        self._user = user
        self._password = password
        self._base_url = base_url.rstrip("/")
        self._directory = directory
        self._timeout = timeout
        self._logger = logging.getLogger(__name__)

    def put(self, name: str, content: bytes) -> str:
        # One connection per upload; the pipeline uploads twice per booking.
        with ftplib.FTP(self._host, timeout=self._timeout) as ftp:
            ftp.login(self._user, self._password)
            self._ensure_dir(ftp)
            ftp.storbinary(f"STOR {name}", io.BytesIO(content))
        self._logger.info("Artifact uploaded", extra={"reason": f"{self._directory}/{name}"})
        return f"{self._base_url}/{name}"

    def _ensure_dir(self, ftp: ftplib.FTP) -> None:
        path = ""
        for part in [p for p in self._directory.split("/") if p]:
            path = f"{path}/{part}"
            try:
                ftp.cwd(path)
            except ftplib.error_perm:
                ftp.mkd(path)
                ftp.cwd(path)
