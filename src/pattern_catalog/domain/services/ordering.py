"""Order facade - coordinates inventory, payment and shipping."""

from collections.abc import Iterable

from pattern_catalog.domain.entities.order import OrderResult, OrderStatus, OrderStep
from pattern_catalog.shared.logging import get_logger

logger = get_logger("ordering")


class Inventory:
    """Stock checking subsystem.

    Every item is in stock unless it was listed as out of stock.
    """

    def __init__(self, out_of_stock: Iterable[int] | None = None):
        self.out_of_stock = set(out_of_stock or ())

    def check_stock(self, item_id: int) -> bool:
        logger.info(f"Checked stock for item {item_id}.")
        return item_id not in self.out_of_stock


class PaymentGateway:
    """Payment subsystem. Declines amounts above ``limit`` when one is set."""

    def __init__(self, limit: int | None = None):
        self.limit = limit

    def process_payment(self, amount: int) -> bool:
        if self.limit is not None and amount > self.limit:
            logger.info(f"Declined payment of {amount}.")
            return False
        logger.info(f"Processed payment of {amount}.")
        return True


class Shipping:
    """Shipping subsystem."""

    def ship_item(self, item_id: int) -> bool:
        logger.info(f"Item {item_id} has been shipped.")
        return True


class OrderFacade:
    """Single entry point for placing orders.

    The facade runs stock check, payment and shipping in that order and
    stops at the first subsystem that reports failure:
    1. Inventory - out of stock skips payment and shipping
    2. PaymentGateway - a declined payment skips shipping
    3. Shipping - ships the item
    """

    def __init__(
        self,
        inventory: Inventory | None = None,
        payment_gateway: PaymentGateway | None = None,
        shipping: Shipping | None = None
    ):
        self.inventory = inventory or Inventory()
        self.payment_gateway = payment_gateway or PaymentGateway()
        self.shipping = shipping or Shipping()

    def place_order(self, item_id: int, amount: int) -> OrderResult:
        """Place an order for an item.

        Args:
            item_id: Item to order
            amount: Amount to charge

        Returns:
            OrderResult describing how far the order got
        """
        result = OrderResult(item_id=item_id, amount=amount, status=OrderStatus.OUT_OF_STOCK)

        result.steps.append(OrderStep.CHECK_STOCK)
        if not self.inventory.check_stock(item_id):
            result.message = f"Item {item_id} is out of stock."
            return self._finish(result)

        result.steps.append(OrderStep.PROCESS_PAYMENT)
        if not self.payment_gateway.process_payment(amount):
            result.status = OrderStatus.PAYMENT_FAILED
            result.message = "Payment failed. Order not placed."
            return self._finish(result)

        result.steps.append(OrderStep.SHIP_ITEM)
        if not self.shipping.ship_item(item_id):
            result.status = OrderStatus.SHIPPING_FAILED
            result.message = f"Shipping failed for item {item_id}. Order not placed."
            return self._finish(result)

        result.status = OrderStatus.PLACED
        result.message = f"Order placed successfully for item {item_id}."
        return self._finish(result)

    def _finish(self, result: OrderResult) -> OrderResult:
        if result.success:
            logger.info(result.message)
        else:
            logger.warning(result.message)
        return result
