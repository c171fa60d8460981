from __future__ import annotations

import logging
from pathlib import Path

from hotelbot.application.ports.artifact_store import ArtifactStorePort


class LocalArtifactStore(ArtifactStorePort):
    def __init__(self, directory: str, base_url: str) -> None:
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)
        self._base_url = base_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    @property
    def directory(self) -> Path:
        return self._directory

    def put(self, name: str, content: bytes) -> str:
        path = self._directory / Path(name).name
        temp_path = path.with_name(path.name + ".tmp")
        temp_path.write_bytes(content)
        temp_path.replace(path)
        self._logger.info("Artifact stored", extra={"reason": str(path)})
        return f"{self._base_url}/{path.name}"
