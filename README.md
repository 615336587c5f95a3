# jsonvalue

`jsonvalue` is a small library for building JSON values in memory and changing them
in place. Every JSON kind has its own class, and the operations on them check their
inputs strictly:

- strings and object keys must be valid UTF-8 unless the check is turned off;
- integers must fit in a signed 64-bit range, and reals must be finite;
- object keys keep the order they were inserted in;
- copies can be shallow or deep, and deep copies refuse to follow circular references.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Scalar values

`jsonvalue.base` defines the scalar kinds, each tagged with a `JsonType`:

- `JsonString`: holds its text as UTF-8 bytes in `data`; `value` gives it back as a
  `str`, and `len()` counts bytes. `JsonString(..., check=False)` and
  `set(..., check=False)` accept bytes that are not valid UTF-8.
- `JsonInteger`: a signed 64-bit integer; `bool` values are refused.
- `JsonReal`: a finite float.
- `JsonSingleton`: the unique `true`, `false` and `null` values, also available as
  `base.TRUE`, `base.FALSE` and `base.NULL`. Their `value` is `True`, `False` or `None`.

Invalid values raise `JsonError`.

```python
from jsonvalue.base import JsonInteger, JsonReal, JsonString, number_value, sprintf

name = JsonString("foo")
count = JsonInteger(543)
ratio = JsonReal(123e9)

count.set(544)
number_value(count)            # 544.0
number_value(name)             # 0.0
sprintf("%s-%d", "item", 7)    # a JsonString holding "item-7"

JsonReal(float("nan"))         # raises JsonError
```

Values compare with `==` by kind and content. `copy()` and `deep_copy()` return new
values, except for the singletons, which copy to themselves.

## Objects and arrays

`jsonvalue.containers` adds the two container kinds and the module-level helpers
`equal`, `copy` and `deep_copy` (the last two return `None` for `None`).

`JsonObject` stores keys as bytes and keeps insertion order. Keys may be given as `str`
or bytes; `keys()`, `items()` and iteration give them back as bytes.

- `get` returns the value or `None`; `set(key, value, check=True)` stores a value;
  `delete` raises `KeyError` for a missing key; `clear` empties the object.
- `update` overwrites every key, `update_existing` only keys already present,
  `update_missing` only adds keys not yet present.
- `update_recursive` merges nested objects instead of replacing them.

`JsonArray` takes an optional iterable of values and supports indexing, `set`,
`append`, `insert` (the index may equal the length), `remove`, `clear` and `extend`.
Indexes out of range raise `IndexError`; negative indexes are not accepted.

```python
from jsonvalue.base import JsonString
from jsonvalue.containers import JsonArray, JsonObject, deep_copy, equal

doc = JsonObject()
doc.set("name", JsonString("example"))
doc.set("tags", JsonArray([JsonString("a"), JsonString("b")]))

clone = deep_copy(doc)
equal(doc, clone)                      # True
clone.get("tags") is doc.get("tags")   # False
doc.keys()                             # [b'name', b'tags']
```

A container cannot be put directly inside itself (`JsonError`). If a longer cycle is
built, `deep_copy` and `update_recursive` detect it and raise `JsonError`.

## Helpers

- `jsonvalue.utf8`: `encode`, `check_first`, `check_full`, `iterate` and
  `check_string` encode, decode and validate UTF-8. Invalid input raises `Utf8Error`.
- `jsonvalue.strconv`: `format_real` renders a float so that it always reads back as a
  real (17 significant digits by default, exponent without `+` or leading zeros);
  `parse_real` parses one and raises `OverflowError` when it is out of range.
- `jsonvalue.lookup3.hashlittle` is a 32-bit non-cryptographic hash of a byte string.
- `jsonvalue.version`: `version_str()` and `version_cmp(major, minor, micro)` report
  and compare the library's version.

## What it does not do

The package models JSON values only. It does not parse JSON text into values, does not
write values out as JSON text, and has no command-line tool.