from abc import ABC, abstractmethod

from hotelbot.domain.entities.booking import BookingFacts


class DocumentRendererPort(ABC):
    @abstractmethod
    def render(self, facts: BookingFacts, code_image: bytes) -> bytes:
        """Render the confirmation document. Returns PDF bytes."""
        raise NotImplementedError
