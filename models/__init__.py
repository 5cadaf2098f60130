"""Public re-exports of all model types."""

from models.errors import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorBuildError,
)
from models.rectangle import Rectangle, create_rectangle
from models.request import (
    CompoundSelector,
    RectangleRequest,
    SelectorPart,
    SelectorRequest,
)
from models.response import RectangleResponse, SelectorResponse
from models.selectors import (
    Category,
    Selector,
    SelectorBuilder,
    css_selector_builder,
)

__all__ = [
    # Selectors
    "Category",
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    # Errors
    "SelectorBuildError",
    "DuplicateCategoryError",
    "OrderViolationError",
    # Rectangle
    "Rectangle",
    "create_rectangle",
    # Request/Response
    "SelectorPart",
    "CompoundSelector",
    "SelectorRequest",
    "RectangleRequest",
    "SelectorResponse",
    "RectangleResponse",
]
