"""Base notification interface and common types."""

from abc import ABC, abstractmethod
from enum import Enum


class NotificationType(Enum):
    """Supported notification channels."""
    EMAIL = "email"
    SMS = "sms"


class Notification(ABC):
    """Abstract base class for notification senders.

    Every channel sends a single text message and returns the line it
    emitted, so callers can show or inspect it.
    """

    channel: NotificationType

    @abstractmethod
    def send(self, message: str) -> str:
        """Send a message.

        Args:
            message: Text to send

        Returns:
            The line describing what was sent
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(channel={self.channel.value})"
