"""JSON encoding and class-bound decoding.

``encode`` produces compact JSON in insertion order. ``decode_as`` parses
JSON text and binds the resulting object to a class, so the returned value
carries the parsed data as its own fields and the class's methods.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _own_fields(value: Any) -> Any:
    """``json.dumps`` fallback: serialize an object through its own fields."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    ``[1, 2, 3]`` encodes as ``'[1,2,3]'`` and ``{"width": 10, "height": 20}``
    as ``'{"width":10,"height":20}'``. Pydantic models and plain objects
    encode as their own fields.
    """
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_own_fields
    )


def decode_as(prototype: type[T], json_text: str) -> T:
    """Parse *json_text* and bind the result to *prototype*.

    Pydantic model classes are populated through ``model_validate``. Any
    other class gets an instance created without calling ``__init__``, with
    each parsed key assigned as an attribute.

    Raises:
        json.JSONDecodeError: If *json_text* is not valid JSON.
        pydantic.ValidationError: If the data does not fit a model class.
        TypeError: If the JSON value is not an object, or one of its keys
            is a dunder name such as ``__class__``.
    """
    data = json.loads(json_text)

    if issubclass(prototype, BaseModel):
        return prototype.model_validate(data)

    if not isinstance(data, dict):
        raise TypeError(
            f"cannot bind JSON {type(data).__name__} to {prototype.__name__}"
        )
    reserved = [k for k in data if k.startswith("__") and k.endswith("__")]
    if reserved:
        raise TypeError(f"cannot bind reserved keys {reserved} to {prototype.__name__}")

    obj = prototype.__new__(prototype)
    for key, val in data.items():
        setattr(obj, key, val)
    return obj
