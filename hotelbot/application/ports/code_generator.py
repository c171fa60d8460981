from abc import ABC, abstractmethod


class CodeGeneratorPort(ABC):
    @abstractmethod
    def encode(self, payload: str) -> bytes:
        """Encode payload as a scannable code. Returns PNG bytes."""
        raise NotImplementedError
