"""Tests for the car builder and director."""

import pytest

from pattern_catalog.domain.entities.car import Car
from pattern_catalog.domain.services.builder import CarBuilder, CarDirector, SportsCarBuilder


class CallLogBuilder(SportsCarBuilder):
    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    def set_engine(self, engine):
        self.calls.append("engine")
        return super().set_engine(engine)

    def set_wheels(self, wheels):
        self.calls.append("wheels")
        return super().set_wheels(wheels)

    def set_color(self, color):
        self.calls.append("color")
        return super().set_color(color)


def test_director_builds_sports_car():
    car = CarDirector().build(SportsCarBuilder())

    assert car.engine == "V8"
    assert car.wheels == 4
    assert car.color == "Red"
    assert car.is_complete
    assert car.show() == "Car with engine: V8, wheels: 4, color: Red."


def test_director_call_sequence():
    builder = CallLogBuilder()
    CarDirector().build(builder)
    assert builder.calls == ["engine", "wheels", "color"]


def test_new_car_is_empty():
    car = Car()
    assert not car.is_complete
    assert car.show() == "Car with engine: None, wheels: None, color: None."


def test_setters_can_be_chained():
    car = SportsCarBuilder().set_color("Blue").set_wheels(3).set_engine("I4").get_car()
    assert (car.engine, car.wheels, car.color) == ("I4", 3, "Blue")


def test_reset_starts_a_new_car():
    builder = SportsCarBuilder()
    first = CarDirector().build(builder)
    builder.reset()
    second = builder.get_car()

    assert second is not first
    assert not second.is_complete
    assert first.engine == "V8"


def test_builder_interface_is_abstract():
    with pytest.raises(TypeError):
        CarBuilder()
