"""Declarative selector assembly from request part lists.

Compounds are right-folded with ``combine``, so

    [div#main, (+) table#data, (~) tr]

renders the same as ``combine(div#main, "+", combine(table#data, "~", tr))``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from models.request import CompoundSelector, SelectorPart
from models.selectors import Selector, css_selector_builder

logger = logging.getLogger("workshop")

# Request category name -> Selector method name
_PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo_class": "pseudo_class",
    "pseudo_element": "pseudo_element",
}


def build_compound(parts: Sequence[SelectorPart]) -> Selector:
    """Append *parts* in order to an empty Selector.

    Builder errors (duplicate or out-of-order parts) propagate unchanged.
    """
    selector = Selector()
    for part in parts:
        append = getattr(selector, _PART_METHODS[part.category])
        selector = append(part.value)
    logger.debug("compound built: %s", selector.rendered)
    return selector


def build_selector(compounds: Sequence[CompoundSelector]) -> Selector:
    """Build every compound and join them with their combinators.

    Raises:
        ValueError: If *compounds* is empty.
    """
    if not compounds:
        raise ValueError("at least one compound selector is required")

    built = [build_compound(c.parts) for c in compounds]
    result = built[-1]
    for i in range(len(built) - 2, -1, -1):
        result = css_selector_builder.combine(
            built[i], compounds[i + 1].combinator, result
        )
    return result
