"""JSON value model shared by the validators.

Decoded JSON is plain Python data. ``JsonKind`` closes the set of kinds a
value can take and ``kind_of`` classifies a value into exactly one of them,
so every validator branches on the same six cases.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Number
from typing import Any, TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
JsonArray: TypeAlias = list[JsonValue]


class JsonKind(str, Enum):
    """The kinds of value a decoded JSON document can contain."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    """Classify a decoded JSON value.

    Args:
        value: Value produced by a JSON decoder

    Returns:
        The JsonKind of the value

    Raises:
        TypeError: If the value cannot come out of a JSON decoder
    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, Number):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return JsonKind.ARRAY
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def is_object(value: Any) -> bool:
    return kind_of(value) is JsonKind.OBJECT


def is_array(value: Any) -> bool:
    return kind_of(value) is JsonKind.ARRAY


def is_string(value: Any) -> bool:
    return kind_of(value) is JsonKind.STRING
