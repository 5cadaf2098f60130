"""Request bodies for the HTTP endpoints (extra=forbid)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PartCategory = Literal[
    "element", "id", "class", "attr", "pseudo_class", "pseudo_element"
]


class SelectorPart(BaseModel):
    """One selector part, e.g. ``{"category": "class", "value": "editable"}``."""

    model_config = ConfigDict(extra="forbid")

    category: PartCategory
    value: str


class CompoundSelector(BaseModel):
    """An ordered list of parts, joined to the previous compound by ``combinator``.

    The combinator of the first compound in a request is ignored.
    """

    model_config = ConfigDict(extra="forbid")

    combinator: str = " "
    parts: list[SelectorPart] = []


class SelectorRequest(BaseModel):
    """Incoming request body for the POST /selector endpoint."""

    model_config = ConfigDict(extra="forbid")

    compounds: list[CompoundSelector] = Field(min_length=1)


class RectangleRequest(BaseModel):
    """Incoming request body for the POST /rectangle endpoint."""

    model_config = ConfigDict(extra="forbid")

    width: int | float
    height: int | float
