"""Selector model: part kinds, precedence order, and the Selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from objtasks.errors import DuplicateSelectorPart, OrderViolation

logger = logging.getLogger(__name__)


class PartKind(Enum):
    """Category of a compound selector part."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"


# Parts must appear in this order within one compound selector.
PRECEDENCE: tuple[PartKind, ...] = (
    PartKind.ELEMENT,
    PartKind.ID,
    PartKind.CLASS,
    PartKind.ATTR,
    PartKind.PSEUDO_CLASS,
    PartKind.PSEUDO_ELEMENT,
)


def find_out_of_order(kind: PartKind, kinds: tuple[PartKind, ...]) -> PartKind | None:
    """Return the first kind in *kinds* that must not precede *kind*, if any."""
    later = PRECEDENCE[PRECEDENCE.index(kind) + 1 :]
    for existing in kinds:
        if existing in later:
            return existing
    return None


def is_out_of_order(kind: PartKind, kinds: tuple[PartKind, ...]) -> bool:
    """True if appending *kind* after *kinds* breaks the precedence order."""
    return find_out_of_order(kind, kinds) is not None


@dataclass(frozen=True)
class Selector:
    """An immutable CSS selector under construction.

    Attributes:
        fragments: Pre-formatted text pieces, rendered by plain concatenation.
        kinds: Kind of every part added by an append (combinators excluded).
        used_element: True once an element part has been added.
        used_pseudo_element: True once a pseudo-element part has been added.
    """

    fragments: tuple[str, ...] = ()
    kinds: tuple[PartKind, ...] = ()
    used_element: bool = False
    used_pseudo_element: bool = False

    # --- appends --------------------------------------------------------------

    def element(self, name: str) -> Selector:
        """Append a type selector, e.g. ``div``."""
        if self.used_element:
            self._reject_duplicate(PartKind.ELEMENT)
        return self._append(PartKind.ELEMENT, name, used_element=True)

    def id(self, name: str) -> Selector:
        """Append an id selector, e.g. ``#main``."""
        if PartKind.ID in self.kinds:
            self._reject_duplicate(PartKind.ID)
        return self._append(PartKind.ID, f"#{name}")

    def class_(self, name: str) -> Selector:
        """Append a class selector, e.g. ``.container``."""
        return self._append(PartKind.CLASS, f".{name}")

    def attr(self, spec: str) -> Selector:
        """Append an attribute selector; *spec* is used verbatim inside brackets."""
        return self._append(PartKind.ATTR, f"[{spec}]")

    def pseudo_class(self, name: str) -> Selector:
        return self._append(PartKind.PSEUDO_CLASS, f":{name}")

    def pseudo_element(self, name: str) -> Selector:
        if self.used_pseudo_element:
            self._reject_duplicate(PartKind.PSEUDO_ELEMENT)
        return self._append(
            PartKind.PSEUDO_ELEMENT, f"::{name}", used_pseudo_element=True
        )

    # --- combination / rendering ----------------------------------------------

    def combine(self, combinator: str, other: Selector) -> Selector:
        """Join this selector and *other* with *combinator* (``' '``, ``+``, ``~``, ``>``).

        The result carries over the kinds and flags of *other*; it is meant
        to be rendered rather than appended to.
        """
        return Selector(
            fragments=self.fragments + (f" {combinator} ",) + other.fragments,
            kinds=other.kinds,
            used_element=other.used_element,
            used_pseudo_element=other.used_pseudo_element,
        )

    def stringify(self) -> str:
        """Render the selector text."""
        return "".join(self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ------------------------------------------------------------

    def _append(self, kind: PartKind, fragment: str, **flags: bool) -> Selector:
        conflicting = find_out_of_order(kind, self.kinds)
        if conflicting is not None:
            logger.debug(
                "Rejected %s %r after %s", kind.value, fragment, conflicting.value
            )
            raise OrderViolation(kind, conflicting)
        return replace(
            self,
            fragments=self.fragments + (fragment,),
            kinds=self.kinds + (kind,),
            **flags,
        )

    def _reject_duplicate(self, kind: PartKind) -> None:
        logger.debug("Rejected second %s in %r", kind.value, self.stringify())
        raise DuplicateSelectorPart(kind)
