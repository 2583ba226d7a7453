"""Coffee decorators - composable cost and description wrappers."""

from abc import ABC, abstractmethod


class Coffee(ABC):
    """Component interface for anything that can be sold as a coffee."""

    @abstractmethod
    def cost(self) -> int:
        """Get the price of the coffee."""
        pass

    @abstractmethod
    def description(self) -> str:
        """Get a human readable description."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cost={self.cost()})"


class SimpleCoffee(Coffee):
    """Plain coffee with nothing added."""

    def cost(self) -> int:
        return 5

    def description(self) -> str:
        return "Simple Coffee"


class CoffeeDecorator(Coffee):
    """Base wrapper holding exactly one inner coffee.

    The base wrapper forwards both operations unchanged. Subclasses compute
    the inner result first and then apply their own increment, so the
    outermost wrapper contributes last.
    """

    def __init__(self, coffee: Coffee):
        if not isinstance(coffee, Coffee):
            raise TypeError(
                f"{self.__class__.__name__} wraps a Coffee, got {type(coffee).__name__}"
            )
        self._coffee = coffee

    @property
    def inner(self) -> Coffee:
        """Get the wrapped coffee."""
        return self._coffee

    def cost(self) -> int:
        return self._coffee.cost()

    def description(self) -> str:
        return self._coffee.description()


class MilkDecorator(CoffeeDecorator):
    """Adds milk."""

    def cost(self) -> int:
        return self._coffee.cost() + 2

    def description(self) -> str:
        return self._coffee.description() + ", Milk"


class SugarDecorator(CoffeeDecorator):
    """Adds sugar."""

    def cost(self) -> int:
        return self._coffee.cost() + 1

    def description(self) -> str:
        return self._coffee.description() + ", Sugar"


def layers(coffee: Coffee) -> list[Coffee]:
    """List every layer of a decorated coffee, outermost first."""
    chain = [coffee]
    while isinstance(chain[-1], CoffeeDecorator):
        chain.append(chain[-1].inner)
    return chain


def summarize(coffee: Coffee) -> str:
    """Describe a coffee together with its price."""
    return f"{coffee.description()} costs ${coffee.cost()}"
