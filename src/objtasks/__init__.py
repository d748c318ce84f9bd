"""objtasks: rectangle values, JSON helpers and a CSS selector builder."""
from __future__ import annotations

from objtasks.config import ObjtasksConfig
from objtasks.errors import (
    DecodeError,
    DuplicateSelectorPart,
    InvalidDimensionError,
    ObjtasksError,
    OrderViolation,
    SelectorError,
)
from objtasks.selector import (
    CssSelectorBuilder,
    PartKind,
    Selector,
    combine,
    css_selector_builder,
)
from objtasks.serialization import from_json, to_json
from objtasks.shapes import Rectangle, rectangle

__version__ = "0.1.0"

__all__ = [
    # config
    "ObjtasksConfig",
    # errors
    "ObjtasksError",
    "SelectorError",
    "DuplicateSelectorPart",
    "OrderViolation",
    "InvalidDimensionError",
    "DecodeError",
    # selector
    "CssSelectorBuilder",
    "PartKind",
    "Selector",
    "combine",
    "css_selector_builder",
    # serialization
    "to_json",
    "from_json",
    # shapes
    "Rectangle",
    "rectangle",
]
