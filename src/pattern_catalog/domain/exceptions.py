"""Domain exceptions."""

from collections.abc import Iterable


class PatternCatalogError(Exception):
    """Base class for all catalog errors."""


class UnsupportedTypeError(PatternCatalogError, ValueError):
    """Raised when a factory receives a tag it does not recognize."""

    def __init__(self, kind: str, requested: object, supported: Iterable[str]):
        self.kind = kind
        self.requested = requested
        self.supported = list(supported)
        super().__init__(
            f"{kind} type not supported: {requested!r}. "
            f"Supported types: {self.supported}"
        )
