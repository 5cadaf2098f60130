"""CSS selector value type and fluent builder.

A compound selector is assembled from parts in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class parts may repeat; element, id and
pseudo-element occur at most once. Every append returns a new Selector,
so a partially built chain can be reused as a prefix.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from models.errors import DuplicateCategoryError, OrderViolationError

logger = logging.getLogger("workshop")


class Category(IntEnum):
    """Selector part categories, numbered in the order they must appear."""

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


# Singleton categories and the Selector flag that records them.
_SINGLETON_FLAGS: dict[Category, str] = {
    Category.ELEMENT: "has_element",
    Category.ID: "has_id",
    Category.PSEUDO_ELEMENT: "has_pseudo_element",
}


class Selector(BaseModel):
    """A (possibly combined) CSS selector under construction.

    ``last_category`` and the ``has_*`` flags decide which parts may still
    be appended. A combined selector starts over with neither.
    """

    model_config = ConfigDict(extra="forbid")

    rendered: str = ""
    last_category: Category = Category.NONE
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False

    # ------------------------------------------------------------------
    # Part appends
    # ------------------------------------------------------------------

    def element(self, value: str) -> Selector:
        """Append a type selector, e.g. ``div``."""
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append ``#value``."""
        return self._append(Category.ID, f"#{value}")

    def class_(self, value: str) -> Selector:
        """Append ``.value``."""
        return self._append(Category.CLASS, f".{value}")

    def attr(self, value: str) -> Selector:
        """Append ``[value]``; the attribute expression is used verbatim."""
        return self._append(Category.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> Selector:
        """Append ``:value``."""
        return self._append(Category.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> Selector:
        """Append ``::value``."""
        return self._append(Category.PSEUDO_ELEMENT, f"::{value}")

    def _append(self, category: Category, token: str) -> Selector:
        """Return a copy of this selector with *token* appended.

        Raises:
            DuplicateCategoryError: *category* is a singleton already present.
            OrderViolationError: *category* sorts before the last part.
        """
        flag = _SINGLETON_FLAGS.get(category)
        if flag is not None and getattr(self, flag):
            logger.debug("duplicate %s part rejected: %r", category.name, token)
            raise DuplicateCategoryError()
        if self.last_category > category:
            logger.debug(
                "%s part rejected after %s: %r",
                category.name,
                self.last_category.name,
                token,
            )
            raise OrderViolationError()

        update: dict = {
            "rendered": self.rendered + token,
            "last_category": category,
        }
        if flag is not None:
            update[flag] = True
        return self.model_copy(update=update)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def stringify(self) -> str:
        """Return the rendered selector and reset it to an empty string.

        Reading is destructive: an immediate second call on the same
        instance returns ``""``. Selectors derived earlier are unaffected.
        """
        rendered, self.rendered = self.rendered, ""
        return rendered


class SelectorBuilder:
    """Entry points that start a new selector chain from any part category.

    The builder holds no state; every call starts from an empty Selector.
    """

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with a combinator such as ``" "``, ``"+"``, ``"~"`` or ``">"``.

        The combinator is used verbatim and padded with single spaces.
        Both operands are rendered, which consumes them. The result is a
        new Selector with no ordering state: any part may follow it and
        is appended to the joined text as is.
        """
        rendered = f"{first.stringify()} {combinator} {second.stringify()}"
        return Selector(rendered=rendered)


css_selector_builder = SelectorBuilder()
