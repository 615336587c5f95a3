"""Scalar JSON values: the shared base class, singletons, strings and numbers."""

from __future__ import annotations

import enum
import math
import operator
from typing import Any

from jsonvalue import utf8

INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


class JsonType(enum.IntEnum):
    """The kinds of JSON value."""

    OBJECT = 0
    ARRAY = 1
    STRING = 2
    INTEGER = 3
    REAL = 4
    TRUE = 5
    FALSE = 6
    NULL = 7


class JsonError(ValueError):
    """Raised when a JSON value cannot be created, changed or copied."""


class JsonValue:
    """Base class of every JSON value."""

    type: JsonType

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> JsonValue:
        """Return a shallow copy of the value."""
        duplicate = object.__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        return duplicate

    def deep_copy(self) -> JsonValue:
        """Return a copy that shares no mutable parts with the original.

        Raises JsonError if the value contains a circular reference.
        """
        return self._deep_copy(set())

    def _deep_copy(self, parents: set[int]) -> JsonValue:
        # Scalars have nothing nested, so a deep copy is a shallow one.
        return self.copy()

    def _equal(self, other: JsonValue) -> bool:
        return vars(self) == vars(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self.type != other.type:
            return False
        if self is other:
            return True
        return self._equal(other)


class JsonSingleton(JsonValue):
    """The unique true, false and null values."""

    _instances: dict[JsonType, JsonSingleton] = {}
    _VALUES = {JsonType.TRUE: True, JsonType.FALSE: False, JsonType.NULL: None}

    def __new__(cls, json_type: JsonType) -> JsonSingleton:
        json_type = JsonType(json_type)
        if json_type not in cls._VALUES:
            raise JsonError(f"{json_type.name} is not a singleton type")
        instance = cls._instances.get(json_type)
        if instance is None:
            instance = super().__new__(cls)
            instance.type = json_type
            cls._instances[json_type] = instance
        return instance

    def __init__(self, json_type: JsonType) -> None:
        # All state is set once in __new__.
        pass

    @property
    def value(self) -> bool | None:
        """The Python counterpart: True, False or None."""
        return self._VALUES[self.type]

    def copy(self) -> JsonSingleton:
        return self

    def _deep_copy(self, parents: set[int]) -> JsonSingleton:
        return self

    def _equal(self, other: JsonValue) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self.type)

    def __repr__(self) -> str:
        return f"JsonSingleton(JsonType.{self.type.name})"


TRUE = JsonSingleton(JsonType.TRUE)
FALSE = JsonSingleton(JsonType.FALSE)
NULL = JsonSingleton(JsonType.NULL)


def _string_bytes(value: str | bytes | bytearray | memoryview, check: bool) -> bytes:
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError as exc:
            if check:
                raise JsonError("string is not valid Unicode") from exc
            return value.encode("utf-8", "surrogatepass")
    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
        if check and not utf8.check_string(data):
            raise JsonError("string is not valid UTF-8")
        return data
    raise TypeError(f"expected str or bytes, not {type(value).__name__}")


class JsonString(JsonValue):
    """A JSON string, held as bytes that may contain NUL characters."""

    def __init__(self, value: str | bytes, check: bool = True) -> None:
        self.type = JsonType.STRING
        self.data = _string_bytes(value, check)

    @property
    def value(self) -> str:
        """The string decoded from UTF-8; invalid bytes are surrogate-escaped."""
        return self.data.decode("utf-8", "surrogateescape")

    def set(self, value: str | bytes, check: bool = True) -> None:
        """Replace the contents, validating UTF-8 unless check is false."""
        self.data = _string_bytes(value, check)

    def __len__(self) -> int:
        return len(self.data)

    def _equal(self, other: JsonValue) -> bool:
        return isinstance(other, JsonString) and self.data == other.data

    def __repr__(self) -> str:
        return f"JsonString({self.data!r})"


def _checked_integer(value: int) -> int:
    if isinstance(value, bool):
        raise TypeError("a bool is not a JSON integer")
    number = operator.index(value)
    if not INTEGER_MIN <= number <= INTEGER_MAX:
        raise JsonError(f"integer out of range: {number}")
    return number


class JsonInteger(JsonValue):
    """A JSON integer, limited to the signed 64-bit range."""

    def __init__(self, value: int) -> None:
        self.type = JsonType.INTEGER
        self.value = _checked_integer(value)

    def set(self, value: int) -> None:
        """Replace the value."""
        self.value = _checked_integer(value)

    def _equal(self, other: JsonValue) -> bool:
        return isinstance(other, JsonInteger) and self.value == other.value

    def __repr__(self) -> str:
        return f"JsonInteger({self.value})"


def _checked_real(value: float) -> float:
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise JsonError(f"real must be finite: {number!r}")
    return number


class JsonReal(JsonValue):
    """A JSON real number; NaN and infinities are refused."""

    def __init__(self, value: float) -> None:
        self.type = JsonType.REAL
        self.value = _checked_real(value)

    def set(self, value: float) -> None:
        """Replace the value."""
        self.value = _checked_real(value)

    def _equal(self, other: JsonValue) -> bool:
        return isinstance(other, JsonReal) and self.value == other.value

    def __repr__(self) -> str:
        return f"JsonReal({self.value!r})"


def number_value(value: JsonValue | None) -> float:
    """Return an integer or real value as a float, and 0.0 for anything else."""
    if isinstance(value, (JsonInteger, JsonReal)):
        return float(value.value)
    return 0.0


def sprintf(fmt: str, *args: Any) -> JsonString:
    """Build a string value with printf-style formatting."""
    return JsonString(fmt % args if args else fmt % ())