"""Base payment strategy interface and common types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class PaymentMethod(Enum):
    """Supported payment methods."""
    PAYPAL = "paypal"
    STRIPE = "stripe"


@dataclass(frozen=True)
class PaymentReceipt:
    """Outcome of a payment made through a strategy."""
    method: str
    amount: int | float
    message: str


class PaymentStrategy(ABC):
    """Abstract base class for interchangeable payment methods."""

    @abstractmethod
    def pay(self, amount: int | float) -> PaymentReceipt:
        """Pay an amount.

        Args:
            amount: Amount to charge

        Returns:
            PaymentReceipt describing the payment
        """
        pass

    @property
    def method_name(self) -> str:
        """Get the payment method name."""
        return self.__class__.__name__.removesuffix("Payment")
