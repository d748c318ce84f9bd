from objtasks.selector.builder import CssSelectorBuilder, combine, css_selector_builder
from objtasks.selector.model import PRECEDENCE, PartKind, Selector, is_out_of_order

__all__ = [
    "CssSelectorBuilder",
    "PRECEDENCE",
    "PartKind",
    "Selector",
    "combine",
    "css_selector_builder",
    "is_out_of_order",
]
