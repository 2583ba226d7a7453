"""Tests for the notification factory."""

import pytest

from pattern_catalog.domain.exceptions import UnsupportedTypeError
from pattern_catalog.infrastructure.notifications import (
    EmailNotification,
    Notification,
    NotificationFactory,
    NotificationType,
    SMSNotification,
)


@pytest.mark.parametrize(
    ("tag", "expected_class", "expected_line"),
    [
        ("email", EmailNotification, "Sending Email: hi"),
        ("sms", SMSNotification, "Sending SMS: hi"),
        (NotificationType.EMAIL, EmailNotification, "Sending Email: hi"),
        ("  SMS ", SMSNotification, "Sending SMS: hi"),
    ],
)
def test_create_dispatches_on_tag(tag, expected_class, expected_line):
    notification = NotificationFactory.create(tag)

    assert type(notification) is expected_class
    assert notification.send("hi") == expected_line


def test_create_returns_new_instance_each_call():
    first = NotificationFactory.create("email")
    second = NotificationFactory.create("email")
    assert first is not second


@pytest.mark.parametrize("tag", ["shas", "", "push", None, 42])
def test_unsupported_tag_raises(tag):
    with pytest.raises(UnsupportedTypeError, match="Notification type not supported") as exc_info:
        NotificationFactory.create(tag)

    assert exc_info.value.requested == tag
    assert exc_info.value.supported == ["email", "sms"]


def test_unsupported_error_is_value_error():
    with pytest.raises(ValueError):
        NotificationFactory.create("fax")


def test_send_is_logged(catalog_logs):
    NotificationFactory.create("sms").send("Hello via sms!")
    assert "Sending SMS: Hello via sms!" in catalog_logs.messages


def test_register_replaces_channel(monkeypatch):
    monkeypatch.setattr(
        NotificationFactory, "_notifications", dict(NotificationFactory._notifications)
    )

    class LoudEmail(Notification):
        channel = NotificationType.EMAIL

        def send(self, message: str) -> str:
            return message.upper()

    NotificationFactory.register(NotificationType.EMAIL, LoudEmail)

    assert NotificationFactory.create("email").send("hi") == "HI"
    assert NotificationFactory.get_supported_types() == ["email", "sms"]
