"""Concrete notification channels."""

from pattern_catalog.infrastructure.notifications.base import Notification, NotificationType
from pattern_catalog.shared.logging import get_logger

logger = get_logger("notifications")


class EmailNotification(Notification):
    """Sends notifications by email."""

    channel = NotificationType.EMAIL

    def send(self, message: str) -> str:
        line = f"Sending Email: {message}"
        logger.info(line)
        return line


class SMSNotification(Notification):
    """Sends notifications by SMS."""

    channel = NotificationType.SMS

    def send(self, message: str) -> str:
        line = f"Sending SMS: {message}"
        logger.info(line)
        return line
