from abc import ABC, abstractmethod


class FreeTextResponderPort(ABC):
    @abstractmethod
    def reply(self, user_text: str) -> str:
        """Answer free text the menu does not recognize. May raise."""
        raise NotImplementedError
