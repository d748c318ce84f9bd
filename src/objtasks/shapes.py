"""Rectangle value and factory."""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from objtasks.errors import InvalidDimensionError


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with the given width and height."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area


def rectangle(width: float, height: float) -> Rectangle:
    """Build a :class:`Rectangle`, rejecting non-numeric or non-positive sides."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidDimensionError(
                f"{name} must be a number, got {type(value).__name__}"
            )
        if not value > 0:
            raise InvalidDimensionError(f"{name} must be positive, got {value!r}")
    return Rectangle(width=width, height=height)
