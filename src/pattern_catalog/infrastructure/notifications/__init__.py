"""Notification channels and their factory."""

from pattern_catalog.infrastructure.notifications.base import Notification, NotificationType
from pattern_catalog.infrastructure.notifications.factory import NotificationFactory
from pattern_catalog.infrastructure.notifications.providers import (
    EmailNotification,
    SMSNotification,
)

__all__ = [
    "Notification",
    "NotificationType",
    "EmailNotification",
    "SMSNotification",
    "NotificationFactory",
]
