"""Usage demos for every pattern in the catalog.

Each demo builds its pattern with the sample data from CatalogSettings and
returns the lines it produced instead of printing them, so the CLI decides
how to render them.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from pattern_catalog.domain.exceptions import UnsupportedTypeError
from pattern_catalog.domain.services.builder import CarDirector, SportsCarBuilder
from pattern_catalog.domain.services.coffee import (
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
    summarize,
)
from pattern_catalog.domain.services.events import EmailNotifier, Event, LogWriter
from pattern_catalog.domain.services.ordering import OrderFacade
from pattern_catalog.infrastructure.database.connection import DatabaseConnection
from pattern_catalog.infrastructure.notifications.factory import NotificationFactory
from pattern_catalog.infrastructure.payments.legacy import (
    LegacyPaymentSystem,
    PaymentAdapter,
    process_client_payment,
)
from pattern_catalog.infrastructure.payments.processor import PaymentProcessor
from pattern_catalog.shared.config.settings import Settings, get_settings


@dataclass
class DemoResult:
    """Output of one pattern demo."""
    pattern: str
    lines: list[str] = field(default_factory=list)


def singleton_demo(settings: Settings) -> DemoResult:
    """One lazily created database connection shared by every caller."""
    result = DemoResult("singleton")
    db1 = DatabaseConnection.get_instance(settings.database)
    db2 = DatabaseConnection.get_instance(settings.database)
    result.lines.append(f"Connection: {db1.get_connection().url.render_as_string()}")
    result.lines.append(f"Same instance: {db1 is db2}")
    return result


def factory_demo(settings: Settings) -> DemoResult:
    """Notification sender picked by channel tag."""
    result = DemoResult("factory")
    notification = NotificationFactory.create("sms")
    result.lines.append(notification.send(settings.catalog.notification_message))
    return result


def facade_demo(settings: Settings) -> DemoResult:
    """Order placement through one facade over three subsystems."""
    result = DemoResult("facade")
    order = OrderFacade().place_order(
        settings.catalog.default_item_id, settings.catalog.default_amount
    )
    result.lines.append(f"Steps: {', '.join(step.value for step in order.steps)}")
    result.lines.append(order.message)
    return result


def strategy_demo(settings: Settings) -> DemoResult:
    """Payment processor switching between PayPal and Stripe."""
    result = DemoResult("strategy")
    processor = PaymentProcessor()
    for method, amount in (("paypal", 100), ("stripe", 200)):
        processor.set_strategy(processor.create_strategy(method))
        result.lines.append(processor.process(amount).message)
    return result


def observer_demo(settings: Settings) -> DemoResult:
    """Event broadcasting a payload to its observers."""
    result = DemoResult("observer")
    email, log = EmailNotifier(), LogWriter()
    event = Event()
    event.attach(email)
    event.attach(log)
    event.notify(settings.catalog.event_payload)
    result.lines.extend(email.received + log.received)
    return result


def builder_demo(settings: Settings) -> DemoResult:
    """Director building a sports car step by step."""
    car = CarDirector().build(SportsCarBuilder())
    return DemoResult("builder", [car.show()])


def adapter_demo(settings: Settings) -> DemoResult:
    """Legacy payment system behind the modern processor interface."""
    adapter = PaymentAdapter(LegacyPaymentSystem())
    line = process_client_payment(adapter, settings.catalog.legacy_payment_amount)
    return DemoResult("adapter", [line])


def decorator_demo(settings: Settings) -> DemoResult:
    """Coffee wrapped with milk and sugar."""
    coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))
    return DemoResult("decorator", [summarize(coffee)])


DEMOS: dict[str, Callable[[Settings], DemoResult]] = {
    "singleton": singleton_demo,
    "factory": factory_demo,
    "facade": facade_demo,
    "strategy": strategy_demo,
    "observer": observer_demo,
    "builder": builder_demo,
    "adapter": adapter_demo,
    "decorator": decorator_demo,
}


def run_demo(name: str, settings: Settings | None = None) -> DemoResult:
    """Run a single demo by pattern name.

    Raises:
        UnsupportedTypeError: If no demo exists for the name
    """
    demo = DEMOS.get(name.strip().lower())
    if demo is None:
        raise UnsupportedTypeError("Demo", name, DEMOS.keys())
    return demo(settings or get_settings())


def run_all(settings: Settings | None = None) -> list[DemoResult]:
    """Run every demo in catalog order."""
    settings = settings or get_settings()
    return [demo(settings) for demo in DEMOS.values()]
