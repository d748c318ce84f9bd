"""CSS selector builder facade.

Every method starts from an empty :class:`Selector`, so chains read like
the selector they produce::

    css_selector_builder.id("main").class_("container").stringify()
    # '#main.container'
"""

from __future__ import annotations

from objtasks.selector.model import Selector

__all__ = ["CssSelectorBuilder", "combine", "css_selector_builder"]

_EMPTY = Selector()


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two selectors with a combinator, wrapped in single spaces."""
    return left.combine(combinator, right)


class CssSelectorBuilder:
    """Entry points for building selectors from scratch."""

    def element(self, name: str) -> Selector:
        return _EMPTY.element(name)

    def id(self, name: str) -> Selector:
        return _EMPTY.id(name)

    def class_(self, name: str) -> Selector:
        return _EMPTY.class_(name)

    def attr(self, spec: str) -> Selector:
        return _EMPTY.attr(spec)

    def pseudo_class(self, name: str) -> Selector:
        return _EMPTY.pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return _EMPTY.pseudo_element(name)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
