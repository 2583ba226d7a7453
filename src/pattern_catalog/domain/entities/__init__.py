"""Domain entities."""

from pattern_catalog.domain.entities.car import Car
from pattern_catalog.domain.entities.order import OrderResult, OrderStatus, OrderStep

__all__ = [
    "Car",
    "OrderResult",
    "OrderStatus",
    "OrderStep",
]
