"""Rectangle record with an area computation."""

from pydantic import BaseModel


class Rectangle(BaseModel):
    """Axis-aligned rectangle described by its width and height.

    Integer dimensions stay integers, so encoded rectangles read
    ``{"width":10,"height":20}``.
    """

    width: int | float
    height: int | float

    def area(self) -> int | float:
        return self.width * self.height


def create_rectangle(width: int | float, height: int | float) -> Rectangle:
    """Create a Rectangle, e.g. ``create_rectangle(10, 20).area() == 200``."""
    return Rectangle(width=width, height=height)
