from __future__ import annotations

from abc import ABC, abstractmethod


class MessagingSenderPort(ABC):
    @abstractmethod
    def send(self, to: str, body: str, media_url: str | None = None) -> str:
        """Send a message to a channel identity. Returns the provider message id."""
        raise NotImplementedError
