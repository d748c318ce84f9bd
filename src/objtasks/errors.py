"""Error hierarchy for objtasks."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import PartKind


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjtasksError):
    """A selector part could not be appended."""

    def __init__(self, message: str, *, kind: PartKind) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateSelectorPart(SelectorError):
    """Element, id or pseudo-element was added to a selector twice."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            kind=kind,
        )


class OrderViolation(SelectorError):
    """A part was added after a part of a later kind."""

    def __init__(self, kind: PartKind, conflicting: PartKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )
        self.conflicting = conflicting


# ---------------------------------------------------------------------------
# Value errors
# ---------------------------------------------------------------------------


class InvalidDimensionError(ObjtasksError, ValueError):
    """A rectangle dimension is not a positive number."""


class DecodeError(ObjtasksError, ValueError):
    """JSON text could not be turned into the requested value."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
