from enum import Enum
from typing import Any, Dict, Optional, Set, Type, Union
from dataclasses import dataclass
import logging

from .exceptions import DuplicateCategoryError, OrderViolationError

logger = logging.getLogger(__name__)

class PartCategory(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

class Combinator(Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

@dataclass(frozen=True)
class PartRule:
    rank: int
    prefix: str = ""
    suffix: str = ""
    unique: bool = False

    def render(self, value: Any) -> str:
        return f"{self.prefix}{value}{self.suffix}"

# element#id.class[attr]:pseudo-class::pseudo-element
PART_RULES: Dict[PartCategory, PartRule] = {
    PartCategory.ELEMENT: PartRule(rank=1, unique=True),
    PartCategory.ID: PartRule(rank=2, prefix="#", unique=True),
    PartCategory.CLASS: PartRule(rank=3, prefix="."),
    PartCategory.ATTRIBUTE: PartRule(rank=4, prefix="[", suffix="]"),
    PartCategory.PSEUDO_CLASS: PartRule(rank=5, prefix=":"),
    PartCategory.PSEUDO_ELEMENT: PartRule(rank=6, prefix="::", unique=True),
}

class SelectorBuilder:
    """
    Accumulates a single CSS selector part by part.

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may be
    added once; the others may repeat. Every method returns the builder
    itself so calls can be chained.
    """

    INITIAL_RANK = 0

    def __init__(self):
        self._buffer = ""
        self._used: Set[PartCategory] = set()
        self._last_rank = self.INITIAL_RANK

    @property
    def buffer(self) -> str:
        """Text built so far, without draining it."""
        return self._buffer

    @property
    def last_rank(self) -> int:
        return self._last_rank

    def element(self, value: str) -> "SelectorBuilder":
        """Append an element part. Allowed once, before any other part."""
        return self._append(PartCategory.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        """Append #value. Allowed once."""
        return self._append(PartCategory.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._append(PartCategory.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        return self._append(PartCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._append(PartCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        """Append ::value. Allowed once, after every other part."""
        return self._append(PartCategory.PSEUDO_ELEMENT, value)

    def combine(
        self,
        first: "SelectorBuilder",
        combinator: Union[Combinator, str],
        second: "SelectorBuilder"
    ) -> "SelectorBuilder":
        """
        Join the current text of two builders with a combinator.

        The operands are only read: their text, rank and flags stay as they
        were, so each can still be stringified on its own.

        Args:
            first: Builder on the left of the combinator
            combinator: A Combinator member or one of ' ', '>', '+', '~'
            second: Builder on the right of the combinator

        Returns:
            This builder
        """
        if isinstance(combinator, Combinator):
            combinator = combinator.value
        self._buffer += f"{first.buffer} {combinator} {second.buffer}"
        return self

    def stringify(self) -> str:
        """Return the built selector and empty the buffer."""
        result = self._buffer
        self._buffer = ""
        return result

    def _append(self, category: PartCategory, value: Any) -> "SelectorBuilder":
        rule = PART_RULES[category]

        # Both checks run before any state changes
        if rule.unique and category in self._used:
            logger.debug(f"Rejected duplicate {category.value} {value!r} after {self._buffer!r}")
            raise DuplicateCategoryError(category.value)
        if rule.rank < self._last_rank:
            logger.debug(f"Rejected {category.value} {value!r} out of order after {self._buffer!r}")
            raise OrderViolationError(category.value, self._last_rank)

        self._buffer += rule.render(value)
        self._last_rank = rule.rank
        if rule.unique:
            self._used.add(category)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._buffer!r})"

class CssSelectorBuilder:
    """Entry point for building selectors; every call starts a fresh builder."""

    def __init__(self, builder_class: Optional[Type[SelectorBuilder]] = None):
        self.builder_class = builder_class or SelectorBuilder

    def element(self, value: str) -> SelectorBuilder:
        """Start a selector with an element (type) part."""
        return self.builder_class().element(value)

    def id(self, value: str) -> SelectorBuilder:
        """Start a selector with an #id part."""
        return self.builder_class().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        """Start a selector with a .class part."""
        return self.builder_class().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        """Start a selector with an [attribute] part."""
        return self.builder_class().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Start a selector with a :pseudo-class part."""
        return self.builder_class().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Start a selector with a ::pseudo-element part."""
        return self.builder_class().pseudo_element(value)

    def combine(
        self,
        first: SelectorBuilder,
        combinator: Union[Combinator, str],
        second: SelectorBuilder
    ) -> SelectorBuilder:
        """Start a selector by joining two builders with a combinator."""
        return self.builder_class().combine(first, combinator, second)

css_selector_builder = CssSelectorBuilder()
