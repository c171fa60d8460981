from abc import ABC, abstractmethod


class ArtifactStorePort(ABC):
    @abstractmethod
    def put(self, name: str, content: bytes) -> str:
        """Store content under name, overwriting silently. Returns its public URL."""
        raise NotImplementedError
