"""Payment processor - the context that runs a payment strategy."""

from pattern_catalog.domain.exceptions import PatternCatalogError, UnsupportedTypeError
from pattern_catalog.infrastructure.payments.base import (
    PaymentMethod,
    PaymentReceipt,
    PaymentStrategy,
)
from pattern_catalog.infrastructure.payments.strategies import PayPalPayment, StripePayment
from pattern_catalog.shared.logging import get_logger

logger = get_logger("payments")


class PaymentProcessor:
    """Processes payments with a swappable strategy.

    The processor can also build strategies from a method tag, so callers
    only need to know the tag they want to pay with.
    """

    _strategies: dict[PaymentMethod, type[PaymentStrategy]] = {
        PaymentMethod.PAYPAL: PayPalPayment,
        PaymentMethod.STRIPE: StripePayment,
    }

    def __init__(self, strategy: PaymentStrategy | None = None):
        self._strategy: PaymentStrategy | None = None
        if strategy is not None:
            self.set_strategy(strategy)

    @property
    def strategy(self) -> PaymentStrategy | None:
        """Get the current strategy."""
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        """Swap in a new strategy.

        Raises:
            TypeError: If strategy is not a PaymentStrategy
        """
        if not isinstance(strategy, PaymentStrategy):
            raise TypeError(f"Expected a PaymentStrategy, got {type(strategy).__name__}")
        logger.debug(f"Payment strategy set to {strategy.method_name}")
        self._strategy = strategy

    def create_strategy(self, method: PaymentMethod | str) -> PaymentStrategy:
        """Create a new strategy for a payment method.

        Args:
            method: Payment method enum value or its string tag
                (case-insensitive)

        Returns:
            New strategy instance

        Raises:
            UnsupportedTypeError: If the method is not registered
        """
        key = self._resolve(method)
        strategy_class = self._strategies.get(key) if key else None
        if not strategy_class:
            raise UnsupportedTypeError(
                "Payment Methods", method, self.get_supported_methods()
            )
        return strategy_class()

    def process(self, amount: int | float) -> PaymentReceipt:
        """Pay an amount with the current strategy.

        Raises:
            PatternCatalogError: If no strategy has been set
        """
        if self._strategy is None:
            raise PatternCatalogError("No payment strategy set")
        return self._strategy.pay(amount)

    @classmethod
    def register_strategy(
        cls,
        method: PaymentMethod,
        strategy_class: type[PaymentStrategy]
    ) -> None:
        """Register or replace a payment method."""
        cls._strategies[method] = strategy_class

    @classmethod
    def get_supported_methods(cls) -> list[str]:
        """Get list of supported payment method tags."""
        return [m.value for m in cls._strategies.keys()]

    @staticmethod
    def _resolve(method: PaymentMethod | str) -> PaymentMethod | None:
        if isinstance(method, PaymentMethod):
            return method
        if not isinstance(method, str):
            return None
        try:
            return PaymentMethod(method.strip().lower())
        except ValueError:
            return None
