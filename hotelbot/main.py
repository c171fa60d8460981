import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from hotelbot.api.webhooks import router as webhooks_router
from hotelbot.core.config import settings
from hotelbot.infrastructure.artifacts.local_store import LocalArtifactStore
from hotelbot.wiring.dependencies import get_artifact_store

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("message_id", "identity", "step", "booking_id", "reply_text", "reason", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Hotel WhatsApp Booking Bot", version="1.0.0")

app.include_router(webhooks_router, tags=["webhooks"])

artifact_store = get_artifact_store()
if isinstance(artifact_store, LocalArtifactStore):
    app.mount("/artifacts", StaticFiles(directory=artifact_store.directory), name="artifacts")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
