"""Legacy payment system and the adapter exposing it as a modern processor."""

from abc import ABC, abstractmethod

from pattern_catalog.shared.logging import get_logger

logger = get_logger("payments.legacy")


class PaymentProcessorPort(ABC):
    """Target interface clients expect."""

    @abstractmethod
    def process_payment(self, amount: int | float) -> str:
        """Process a payment and return a confirmation line."""
        pass


class LegacyPaymentSystem:
    """Existing payment system with an incompatible method name."""

    def make_payment(self, value: int | float) -> str:
        line = f"Payment of {value} processed using Legacy Payment System."
        logger.info(line)
        return line


class PaymentAdapter(PaymentProcessorPort):
    """Exposes a LegacyPaymentSystem through PaymentProcessorPort."""

    def __init__(self, legacy_payment: LegacyPaymentSystem):
        self.legacy_payment = legacy_payment

    def process_payment(self, amount: int | float) -> str:
        return self.legacy_payment.make_payment(amount)


def process_client_payment(processor: PaymentProcessorPort, amount: int | float) -> str:
    """Client code that only knows the target interface."""
    return processor.process_payment(amount)
