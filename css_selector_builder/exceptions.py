class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class DuplicateCategoryError(ValidationError):
    """Element, id or pseudo-element used twice in one selector."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more than "
            "one time inside the selector"
        )

class OrderViolationError(ValidationError):
    """Selector part added out of order."""

    def __init__(self, category: str, last_rank: int):
        self.category = category
        self.last_rank = last_rank
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
