"""
Pattern-Catalog - Classic Object-Oriented Design Patterns in Python

Small, self-contained implementations of the Gang of Four patterns most
often met in application code, each with a runnable usage demo.

This package provides:
- Singleton: process-wide database connection
- Factory Method: notification senders picked by channel tag
- Facade: order placement over inventory, payment and shipping
- Strategy: interchangeable payment methods
- Observer: events broadcast to registered observers
- Builder: cars assembled step by step under a director
- Adapter: a legacy payment system behind a modern interface
- Decorator: coffee priced and described through wrapper chains
"""

__version__ = "1.0.0"
__license__ = "MIT"

from pattern_catalog.domain.entities.car import Car
from pattern_catalog.domain.entities.order import OrderResult, OrderStatus
from pattern_catalog.domain.exceptions import PatternCatalogError, UnsupportedTypeError
from pattern_catalog.domain.services.builder import CarDirector, SportsCarBuilder
from pattern_catalog.domain.services.coffee import (
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
)
from pattern_catalog.domain.services.events import EmailNotifier, Event, LogWriter
from pattern_catalog.domain.services.ordering import OrderFacade
from pattern_catalog.infrastructure.database.connection import DatabaseConnection
from pattern_catalog.infrastructure.notifications.factory import NotificationFactory
from pattern_catalog.infrastructure.payments.legacy import PaymentAdapter
from pattern_catalog.infrastructure.payments.processor import PaymentProcessor

__all__ = [
    "PatternCatalogError",
    "UnsupportedTypeError",
    "DatabaseConnection",
    "NotificationFactory",
    "OrderFacade",
    "OrderResult",
    "OrderStatus",
    "PaymentProcessor",
    "Event",
    "EmailNotifier",
    "LogWriter",
    "Car",
    "SportsCarBuilder",
    "CarDirector",
    "PaymentAdapter",
    "SimpleCoffee",
    "MilkDecorator",
    "SugarDecorator",
]
