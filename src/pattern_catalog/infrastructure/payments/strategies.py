"""Concrete payment strategies."""

from pattern_catalog.infrastructure.payments.base import PaymentReceipt, PaymentStrategy
from pattern_catalog.shared.logging import get_logger

logger = get_logger("payments")


class PayPalPayment(PaymentStrategy):
    """Pays through PayPal."""

    def pay(self, amount: int | float) -> PaymentReceipt:
        message = f"Paid {amount} using PayPal."
        logger.info(message)
        return PaymentReceipt(method=self.method_name, amount=amount, message=message)


class StripePayment(PaymentStrategy):
    """Pays through Stripe."""

    def pay(self, amount: int | float) -> PaymentReceipt:
        message = f"Paid {amount} using Stripe."
        logger.info(message)
        return PaymentReceipt(method=self.method_name, amount=amount, message=message)
