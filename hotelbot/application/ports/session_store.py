from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager

from hotelbot.domain.entities.session import Session


class SessionStorePort(ABC):
    @abstractmethod
    def get(self, identity: str) -> Session | None:
        """Return the live session for identity, or None (implicit IDLE)."""
        raise NotImplementedError

    @abstractmethod
    def put(self, identity: str, session: Session) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, identity: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def lock(self, identity: str) -> ContextManager[None]:
        """
        Context manager serializing turns of one identity.
        Callers hold it for the whole turn, including any booking confirmation.
        """
        raise NotImplementedError

    @abstractmethod
    def claim(self, message_id: str) -> bool:
        """
        Atomically record message_id as seen.
        Returns False if it was already claimed (a redelivery).
        """
        raise NotImplementedError
