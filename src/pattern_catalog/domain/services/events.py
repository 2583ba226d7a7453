"""Event subject and observers."""

from abc import ABC, abstractmethod

from pattern_catalog.shared.logging import get_logger

logger = get_logger("events")


class Observer(ABC):
    """Interface for objects notified by an Event."""

    @abstractmethod
    def handle(self, data: str) -> None:
        """Handle a notification payload.

        Args:
            data: Payload passed to Event.notify
        """
        pass


class EmailNotifier(Observer):
    """Observer that would email the payload."""

    def __init__(self):
        self.received: list[str] = []

    def handle(self, data: str) -> None:
        line = f"Email Notifier received data: {data}"
        self.received.append(line)
        logger.info(line)


class LogWriter(Observer):
    """Observer that records the payload."""

    def __init__(self):
        self.received: list[str] = []

    def handle(self, data: str) -> None:
        line = f"Log Writer recorded: {data}"
        self.received.append(line)
        logger.info(line)


class Event:
    """Observable subject holding an ordered, append-only list of observers.

    ``notify`` calls each observer once per registration, in the order they
    were attached, in the calling thread. An exception raised by an observer
    propagates to the caller and later observers are not notified.
    """

    def __init__(self):
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        """Register an observer. Duplicates are kept."""
        if not isinstance(observer, Observer):
            raise TypeError(f"Expected an Observer, got {type(observer).__name__}")
        self._observers.append(observer)
        logger.debug(f"Attached {observer.__class__.__name__} ({len(self._observers)} total)")

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Get registered observers in registration order."""
        return tuple(self._observers)

    def notify(self, data: str) -> None:
        """Send a payload to every registered observer."""
        logger.debug(f"Notifying {len(self._observers)} observers")
        for observer in self._observers:
            observer.handle(data)

    def __len__(self) -> int:
        return len(self._observers)
