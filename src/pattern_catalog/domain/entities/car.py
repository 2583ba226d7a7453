"""Car entity assembled by builders."""

from dataclasses import dataclass


@dataclass
class Car:
    """Product assembled step by step by a CarBuilder.

    Fields stay unset until the builder fills them in. Treat the car as
    read-only once it has been handed out by ``get_car``.
    """

    engine: str | None = None
    wheels: int | None = None
    color: str | None = None

    @property
    def is_complete(self) -> bool:
        """Check if every part has been set."""
        return None not in (self.engine, self.wheels, self.color)

    def show(self) -> str:
        """Describe the car."""
        return f"Car with engine: {self.engine}, wheels: {self.wheels}, color: {self.color}."
