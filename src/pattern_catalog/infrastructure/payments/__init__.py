"""Payment strategies, processor and legacy adapter."""

from pattern_catalog.infrastructure.payments.base import (
    PaymentMethod,
    PaymentReceipt,
    PaymentStrategy,
)
from pattern_catalog.infrastructure.payments.legacy import (
    LegacyPaymentSystem,
    PaymentAdapter,
    PaymentProcessorPort,
    process_client_payment,
)
from pattern_catalog.infrastructure.payments.processor import PaymentProcessor
from pattern_catalog.infrastructure.payments.strategies import PayPalPayment, StripePayment

__all__ = [
    "PaymentMethod",
    "PaymentReceipt",
    "PaymentStrategy",
    "PayPalPayment",
    "StripePayment",
    "PaymentProcessor",
    "PaymentProcessorPort",
    "LegacyPaymentSystem",
    "PaymentAdapter",
    "process_client_payment",
]
