"""Domain services for the decorator, observer, builder and facade patterns."""

from pattern_catalog.domain.services.builder import CarBuilder, CarDirector, SportsCarBuilder
from pattern_catalog.domain.services.coffee import (
    Coffee,
    CoffeeDecorator,
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
)
from pattern_catalog.domain.services.events import EmailNotifier, Event, LogWriter, Observer
from pattern_catalog.domain.services.ordering import (
    Inventory,
    OrderFacade,
    PaymentGateway,
    Shipping,
)

__all__ = [
    "CarBuilder",
    "SportsCarBuilder",
    "CarDirector",
    "Coffee",
    "SimpleCoffee",
    "CoffeeDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "Observer",
    "Event",
    "EmailNotifier",
    "LogWriter",
    "Inventory",
    "PaymentGateway",
    "Shipping",
    "OrderFacade",
]
