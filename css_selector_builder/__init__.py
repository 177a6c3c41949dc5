# css_selector_builder/__init__.py
from .builder import (
    SelectorBuilder,
    CssSelectorBuilder,
    css_selector_builder,
    PartCategory,
    PartRule,
    Combinator,
    PART_RULES
)
from .models import Rectangle
from .exceptions import ValidationError, ParseError, DuplicateCategoryError, OrderViolationError
from .utils import serialize, deserialize

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    "PartCategory",
    "PartRule",
    "Combinator",
    "PART_RULES",
    "Rectangle",

    # Exceptions
    "ValidationError",
    "ParseError",
    "DuplicateCategoryError",
    "OrderViolationError",

    # Utility functions
    "serialize",
    "deserialize"
]
