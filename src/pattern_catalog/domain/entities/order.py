"""Order outcome returned by the ordering facade."""

from dataclasses import dataclass, field
from enum import Enum


class OrderStatus(Enum):
    """Final status of an order placement."""
    PLACED = "placed"
    OUT_OF_STOCK = "out_of_stock"
    PAYMENT_FAILED = "payment_failed"
    SHIPPING_FAILED = "shipping_failed"


class OrderStep(Enum):
    """Subsystem calls made while placing an order."""
    CHECK_STOCK = "check_stock"
    PROCESS_PAYMENT = "process_payment"
    SHIP_ITEM = "ship_item"


@dataclass
class OrderResult:
    """Result of placing an order through the facade."""
    item_id: int
    amount: int
    status: OrderStatus
    message: str = ""
    steps: list[OrderStep] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if the order was placed."""
        return self.status == OrderStatus.PLACED

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary format."""
        return {
            "item_id": self.item_id,
            "amount": self.amount,
            "status": self.status.value,
            "message": self.message,
            "steps": [step.value for step in self.steps],
        }
