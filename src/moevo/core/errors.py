"""Exceptions raised by the encoding model and the variation operators."""

from __future__ import annotations

__all__ = [
    "VariationError",
    "InvalidBoundsError",
    "UnsupportedEncodingError",
    "MissingConfigurationError",
    "OutOfBoundsValueError",
]


class VariationError(ValueError):
    """Base class for configuration and encoding errors."""

    pass


class InvalidBoundsError(VariationError):
    """Raised when a real-coded position has an empty or inverted interval."""

    def __init__(self, position: int, lower: float, upper: float) -> None:
        super().__init__(
            f"invalid bounds for position {position}: lower={lower!r}, upper={upper!r}"
        )
        self.position = position
        self.lower = lower
        self.upper = upper


class UnsupportedEncodingError(VariationError):
    """Raised when an operator receives a solution encoding it cannot handle."""

    pass


class MissingConfigurationError(VariationError):
    """Raised when an option required by the solution being mutated was never set."""

    pass


class OutOfBoundsValueError(VariationError):
    """Raised when a real-coded value lies outside its position's bounds."""

    def __init__(self, position: int, value: float, lower: float, upper: float) -> None:
        super().__init__(
            f"value {value!r} at position {position} is outside [{lower!r}, {upper!r}]"
        )
        self.position = position
        self.value = value
        self.lower = lower
        self.upper = upper
