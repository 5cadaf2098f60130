"""Selector builder exception hierarchy.

All builder errors inherit from SelectorBuildError, which is a ValueError so
callers that already guard against bad input keep working. Each subclass
carries a fixed human-readable message and an error_code for the HTTP layer.
"""


class SelectorBuildError(ValueError):
    """Base exception for selector assembly failures."""

    message: str = "invalid selector"
    error_code: str = "selector_build_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class DuplicateCategoryError(SelectorBuildError):
    """A singleton part (element, id, pseudo-element) was appended twice."""

    message = (
        "element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )
    error_code = "duplicate_category"


class OrderViolationError(SelectorBuildError):
    """A part was appended after a part that must follow it."""

    message = (
        "selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )
    error_code = "order_violation"
