"""Response bodies for the HTTP endpoints."""

from pydantic import BaseModel


class SelectorResponse(BaseModel):
    """Rendered selector string for the POST /selector endpoint."""

    selector: str


class RectangleResponse(BaseModel):
    width: int | float
    height: int | float
    area: int | float
