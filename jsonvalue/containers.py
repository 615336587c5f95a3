"""JSON objects and arrays, with equality and copying of any value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from jsonvalue import utf8
from jsonvalue.base import JsonError, JsonType, JsonValue

Key = str | bytes | bytearray | memoryview


def _key_bytes(key: Key, check: bool = False) -> bytes:
    """Turn a key into the bytes it is stored under."""
    if isinstance(key, str):
        try:
            return key.encode("utf-8")
        except UnicodeEncodeError as exc:
            if check:
                raise JsonError("key is not valid Unicode") from exc
            try:
                return key.encode("utf-8", "surrogateescape")
            except UnicodeEncodeError:
                return key.encode("utf-8", "surrogatepass")
    if isinstance(key, (bytes, bytearray, memoryview)):
        data = bytes(key)
        if check and not utf8.check_string(data):
            raise JsonError("key is not valid UTF-8")
        return data
    raise TypeError(f"key must be str or bytes, not {type(key).__name__}")


def _checked_value(container: JsonValue, value: JsonValue) -> JsonValue:
    if not isinstance(value, JsonValue):
        raise TypeError(f"expected a JSON value, not {type(value).__name__}")
    if value is container:
        raise JsonError("a container cannot hold itself")
    return value


def _enter(parents: set[int], value: JsonValue) -> int:
    marker = id(value)
    if marker in parents:
        raise JsonError("circular reference")
    parents.add(marker)
    return marker


class JsonObject(JsonValue):
    """A JSON object: an insertion-ordered mapping of byte keys to values."""

    def __init__(self) -> None:
        self.type = JsonType.OBJECT
        self._items: dict[bytes, JsonValue] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray, memoryview)):
            return False
        return _key_bytes(key) in self._items

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._items)

    def get(self, key: Key) -> JsonValue | None:
        """Return the value stored under key, or None if there is none."""
        return self._items.get(_key_bytes(key))

    def set(self, key: Key, value: JsonValue, check: bool = True) -> None:
        """Store value under key; the key is checked for UTF-8 unless check is false."""
        self._store(_key_bytes(key, check), value)

    def _store(self, key: bytes, value: JsonValue) -> None:
        self._items[key] = _checked_value(self, value)

    def delete(self, key: Key) -> None:
        """Remove key; raises KeyError if it is not present."""
        data = _key_bytes(key)
        try:
            del self._items[data]
        except KeyError:
            raise KeyError(key) from None

    def clear(self) -> None:
        """Remove every key."""
        self._items.clear()

    @staticmethod
    def _require_object(other: object) -> JsonObject:
        if not isinstance(other, JsonObject):
            raise TypeError(f"expected a JSON object, not {type(other).__name__}")
        return other

    def update(self, other: JsonObject) -> None:
        """Copy every item of other into this object."""
        for key, value in list(self._require_object(other)._items.items()):
            self._store(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Copy the items of other whose keys are already present."""
        for key, value in list(self._require_object(other)._items.items()):
            if key in self._items:
                self._store(key, value)

    def update_missing(self, other: JsonObject) -> None:
        """Copy the items of other whose keys are not yet present."""
        for key, value in list(self._require_object(other)._items.items()):
            if key not in self._items:
                self._store(key, value)

    def update_recursive(self, other: JsonObject) -> None:
        """Update with other, merging nested objects instead of replacing them.

        Raises JsonError if other contains a circular reference.
        """
        self._update_recursive(other, set())

    def _update_recursive(self, other: JsonObject, parents: set[int]) -> None:
        self._require_object(other)
        marker = _enter(parents, other)
        try:
            for key, value in list(other._items.items()):
                current = self._items.get(key)
                if isinstance(current, JsonObject) and isinstance(value, JsonObject):
                    current._update_recursive(value, parents)
                else:
                    self._store(key, value)
        finally:
            parents.discard(marker)

    def keys(self) -> list[bytes]:
        """Return the keys in insertion order."""
        return list(self._items)

    def items(self) -> list[tuple[bytes, JsonValue]]:
        """Return the (key, value) pairs in insertion order."""
        return list(self._items.items())

    def copy(self) -> JsonObject:
        duplicate = JsonObject()
        duplicate._items = dict(self._items)
        return duplicate

    def _deep_copy(self, parents: set[int]) -> JsonObject:
        marker = _enter(parents, self)
        try:
            duplicate = JsonObject()
            for key, value in self._items.items():
                duplicate._items[key] = value._deep_copy(parents)
            return duplicate
        finally:
            parents.discard(marker)

    def _equal(self, other: JsonValue) -> bool:
        if not isinstance(other, JsonObject) or len(self) != len(other):
            return False
        for key, value in self._items.items():
            theirs = other._items.get(key)
            if theirs is None or not value == theirs:
                return False
        return True

    def __repr__(self) -> str:
        return f"JsonObject({self._items!r})"


class JsonArray(JsonValue):
    """A JSON array."""

    def __init__(self, items: Iterable[JsonValue] | None = None) -> None:
        self.type = JsonType.ARRAY
        self._items: list[JsonValue] = []
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._items)

    def _check_index(self, index: int, limit: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("array index must be an integer")
        if not 0 <= index < limit:
            raise IndexError(f"array index out of range: {index}")
        return index

    def __getitem__(self, index: int) -> JsonValue:
        return self._items[self._check_index(index, len(self._items))]

    def set(self, index: int, value: JsonValue) -> None:
        """Replace the element at index."""
        value = _checked_value(self, value)
        self._items[self._check_index(index, len(self._items))] = value

    def append(self, value: JsonValue) -> None:
        """Add value at the end."""
        self._items.append(_checked_value(self, value))

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert value before index; index may equal the length."""
        value = _checked_value(self, value)
        self._items.insert(self._check_index(index, len(self._items) + 1), value)

    def remove(self, index: int) -> None:
        """Remove the element at index."""
        del self._items[self._check_index(index, len(self._items))]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def extend(self, other: JsonArray) -> None:
        """Append every element of other."""
        if not isinstance(other, JsonArray):
            raise TypeError(f"expected a JSON array, not {type(other).__name__}")
        self._items.extend(list(other._items))

    def copy(self) -> JsonArray:
        duplicate = JsonArray()
        duplicate._items = list(self._items)
        return duplicate

    def _deep_copy(self, parents: set[int]) -> JsonArray:
        marker = _enter(parents, self)
        try:
            duplicate = JsonArray()
            duplicate._items = [item._deep_copy(parents) for item in self._items]
            return duplicate
        finally:
            parents.discard(marker)

    def _equal(self, other: JsonValue) -> bool:
        if not isinstance(other, JsonArray) or len(self) != len(other):
            return False
        return all(mine == theirs for mine, theirs in zip(self._items, other._items))

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


def equal(first: JsonValue | None, second: JsonValue | None) -> bool:
    """Return True if both values are present and equal."""
    if not isinstance(first, JsonValue) or not isinstance(second, JsonValue):
        return False
    return first == second


def copy(value: JsonValue | None) -> JsonValue | None:
    """Return a shallow copy of value, or None for None."""
    if value is None:
        return None
    return value.copy()


def deep_copy(value: JsonValue | None) -> JsonValue | None:
    """Return a deep copy of value, or None for None.

    Raises JsonError if value contains a circular reference.
    """
    if value is None:
        return None
    return value.deep_copy()