"""Notification factory."""

from pattern_catalog.domain.exceptions import UnsupportedTypeError
from pattern_catalog.infrastructure.notifications.base import Notification, NotificationType
from pattern_catalog.infrastructure.notifications.providers import (
    EmailNotification,
    SMSNotification,
)


class NotificationFactory:
    """Factory for creating notification senders.

    Maps a channel tag to a sender class and builds a fresh instance on
    every call. Instances are never cached.
    """

    _notifications: dict[NotificationType, type[Notification]] = {
        NotificationType.EMAIL: EmailNotification,
        NotificationType.SMS: SMSNotification,
    }

    @classmethod
    def create(cls, notification_type: NotificationType | str) -> Notification:
        """Create a notification sender for a channel.

        Args:
            notification_type: Channel enum value or its string tag
                (case-insensitive)

        Returns:
            New notification sender instance

        Raises:
            UnsupportedTypeError: If the channel is not registered
        """
        key = cls._resolve(notification_type)
        notification_class = cls._notifications.get(key) if key else None
        if not notification_class:
            raise UnsupportedTypeError(
                "Notification", notification_type, cls.get_supported_types()
            )
        return notification_class()

    @classmethod
    def register(
        cls,
        notification_type: NotificationType,
        notification_class: type[Notification]
    ) -> None:
        """Register or replace a channel.

        Args:
            notification_type: Channel enum value
            notification_class: Sender class to build for that channel
        """
        cls._notifications[notification_type] = notification_class

    @classmethod
    def get_supported_types(cls) -> list[str]:
        """Get list of supported channel tags."""
        return [t.value for t in cls._notifications.keys()]

    @staticmethod
    def _resolve(notification_type: NotificationType | str) -> NotificationType | None:
        if isinstance(notification_type, NotificationType):
            return notification_type
        if not isinstance(notification_type, str):
            return None
        try:
            return NotificationType(notification_type.strip().lower())
        except ValueError:
            return None
