"""Car builders and the director that drives them."""

from abc import ABC, abstractmethod
from typing import Self

from pattern_catalog.domain.entities.car import Car


class CarBuilder(ABC):
    """Builder interface exposing one setter per car part."""

    @abstractmethod
    def set_engine(self, engine: str) -> Self:
        """Set the engine."""
        pass

    @abstractmethod
    def set_wheels(self, wheels: int) -> Self:
        """Set the number of wheels."""
        pass

    @abstractmethod
    def set_color(self, color: str) -> Self:
        """Set the paint color."""
        pass

    @abstractmethod
    def get_car(self) -> Car:
        """Return the assembled car."""
        pass


class SportsCarBuilder(CarBuilder):
    """Builder assembling a car one part at a time."""

    def __init__(self):
        self._car = Car()

    def reset(self) -> None:
        """Start over with an empty car."""
        self._car = Car()

    def set_engine(self, engine: str) -> Self:
        self._car.engine = engine
        return self

    def set_wheels(self, wheels: int) -> Self:
        self._car.wheels = wheels
        return self

    def set_color(self, color: str) -> Self:
        self._car.color = color
        return self

    def get_car(self) -> Car:
        return self._car


class CarDirector:
    """Encodes the fixed build sequence for a sports car."""

    ENGINE = "V8"
    WHEELS = 4
    COLOR = "Red"

    def build(self, builder: CarBuilder) -> Car:
        """Drive the builder through engine, wheels and color.

        Args:
            builder: Builder to configure

        Returns:
            The car produced by the builder
        """
        builder.set_engine(self.ENGINE)
        builder.set_wheels(self.WHEELS)
        builder.set_color(self.COLOR)
        return builder.get_car()
