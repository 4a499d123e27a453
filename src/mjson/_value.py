"""
Immutable JSON value tree.

A value is exactly one of ``Number``, ``Bool``, ``String``, ``Null``,
``Array`` or ``Object``. Objects keep their members sorted by key, so
iteration and rendering are deterministic regardless of the order keys
appeared in the source. Duplicate keys collapse to the last occurrence.
"""

import bisect
import math
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import TypeAlias

# Plain Python counterpart of a value tree
PyJson: TypeAlias = (
    str | float | bool | None | dict[str, "PyJson"] | list["PyJson"]
)


@dataclass(frozen=True)
class Number:
    """A JSON number, stored as a 64-bit float."""

    value: float

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError(
                f"Number requires a float, not {type(self.value).__name__}"
            )
        if not math.isfinite(value):
            raise ValueError("Out of range float values are not JSON compliant")
        object.__setattr__(self, "value", float(value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self.value == other.value
        if isinstance(other, int | float) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class Bool:
    """A JSON boolean."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(
                f"Bool requires a bool, not {type(self.value).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bool):
            return self.value is other.value
        if isinstance(other, bool):
            return self.value is other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class String:
    """A JSON string; simple escapes are kept as their two-character form."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"String requires a str, not {type(self.value).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, String):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Null:
    """The JSON ``null`` literal."""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Null):
            return True
        if other is None:
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(None)

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Array:
    """An ordered, immutable sequence of values."""

    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[PyJson]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Object:
    """
    A mapping from string keys to values, ordered by key.

    Members are held as a tuple of ``(key, value)`` pairs sorted in
    ascending code point order of the key. Build instances with
    ``Object.from_pairs`` so duplicates and ordering are normalized.
    """

    members: tuple[tuple[str, "Value"], ...] = ()
    _keys: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        members = tuple(self.members)
        keys = tuple(key for key, _ in members)
        if any(a >= b for a, b in zip(keys, keys[1:])):
            raise ValueError("Object members must be sorted by unique key")
        object.__setattr__(self, "members", members)
        object.__setattr__(self, "_keys", keys)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, "Value"]]) -> "Object":
        """Builds an object from pairs in any order; later duplicates win."""
        merged: dict[str, Value] = {}
        for key, value in pairs:
            merged[key] = value
        return cls(tuple(sorted(merged.items(), key=lambda item: item[0])))

    def _index(self, key: str) -> int:
        i = bisect.bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            return i
        return -1

    def __getitem__(self, key: str) -> "Value":
        i = self._index(key)
        if i < 0:
            raise KeyError(key)
        return self.members[i][1]

    def get(self, key: str, default: Any = None) -> "Value | Any":
        i = self._index(key)
        return self.members[i][1] if i >= 0 else default

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._index(key) >= 0

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> list[str]:
        """Returns the keys in ascending order."""
        return list(self._keys)

    def values(self) -> list["Value"]:
        return [value for _, value in self.members]

    def items(self) -> list[tuple[str, "Value"]]:
        return list(self.members)

    def to_python(self) -> dict[str, PyJson]:
        return {key: value.to_python() for key, value in self.members}


Value: TypeAlias = Number | Bool | String | Null | Array | Object

SCALAR_TYPES = (Number, Bool, String, Null)
CONTAINER_TYPES = (Array, Object)


def from_python(obj: Any) -> Value:
    """
    Builds a value tree from plain Python data.

    Accepts ``None``, ``bool``, ``int``, ``float``, ``str``, lists and tuples,
    and mappings with string keys. Existing ``Value`` nodes are kept as is.
    """
    if isinstance(obj, SCALAR_TYPES + CONTAINER_TYPES):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int | float):
        return Number(float(obj))
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, list | tuple):
        return Array(tuple(from_python(item) for item in obj))
    if isinstance(obj, Mapping):
        pairs = []
        for key, value in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be str, not {type(key).__name__}"
                raise TypeError(msg)
            pairs.append((key, from_python(value)))
        return Object.from_pairs(pairs)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)
