"""Typed destinations for scanned form values.

A destination is a caller-owned mutable cell tagged with the kind of value it
accepts. The scanner dispatches on the tag, never on the Python type of the
current value.
"""

from enum import Enum
from typing import Any, NamedTuple


class FieldKind(str, Enum):
    """Value kinds a destination can be declared with."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    BOOL = "bool"
    STRING = "string"
    UNSUPPORTED = "unsupported"  # Interop marker; always rejected by the scanner

    @classmethod
    def from_name(cls, name: str) -> "FieldKind":
        """Resolve a kind name, mapping unknown names to UNSUPPORTED."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNSUPPORTED

    @classmethod
    def from_type(cls, py_type: Any) -> "FieldKind":
        """Resolve a plain Python type to the closest kind."""
        return _PY_TYPES.get(py_type, cls.UNSUPPORTED)

    @property
    def is_integer(self) -> bool:
        return self in INTEGER_BOUNDS

    @property
    def is_signed(self) -> bool:
        return self in _SIGNED


# Machine-width kinds are 64 bits wide
_WIDTHS: dict[FieldKind, int] = {
    FieldKind.INT: 64,
    FieldKind.INT8: 8,
    FieldKind.INT16: 16,
    FieldKind.INT32: 32,
    FieldKind.INT64: 64,
    FieldKind.UINT: 64,
    FieldKind.UINT8: 8,
    FieldKind.UINT16: 16,
    FieldKind.UINT32: 32,
    FieldKind.UINT64: 64,
}

_SIGNED = frozenset(
    {FieldKind.INT, FieldKind.INT8, FieldKind.INT16, FieldKind.INT32, FieldKind.INT64}
)

INTEGER_BOUNDS: dict[FieldKind, tuple[int, int]] = {
    kind: (-(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    if kind in _SIGNED
    else (0, (1 << bits) - 1)
    for kind, bits in _WIDTHS.items()
}

SUPPORTED_KINDS = frozenset(FieldKind) - {FieldKind.UNSUPPORTED}

_PY_TYPES: dict[Any, FieldKind] = {
    int: FieldKind.INT,
    bool: FieldKind.BOOL,
    str: FieldKind.STRING,
}


class Destination:
    """Mutable cell receiving one converted form value.

    Attributes:
        kind: Declared kind of value the cell accepts.
        value: Current contents. Holds ``initial`` until a scan writes it.
    """

    __slots__ = ("kind", "value", "_written")

    def __init__(self, kind: FieldKind | str, initial: Any = None) -> None:
        self.kind = kind if isinstance(kind, FieldKind) else FieldKind.from_name(kind)
        self.value = initial
        self._written = False

    @classmethod
    def for_type(cls, py_type: Any, initial: Any = None) -> "Destination":
        """Create a destination from a plain Python type (``int``, ``bool``, ``str``)."""
        return cls(FieldKind.from_type(py_type), initial)

    @property
    def written(self) -> bool:
        """Whether a scan has stored a value in this cell."""
        return self._written

    def set(self, value: Any) -> None:
        self.value = value
        self._written = True

    def __repr__(self) -> str:
        return f"Destination(kind={self.kind.value!r}, value={self.value!r})"


class ScanField(NamedTuple):
    """One scan request: a form field name paired with its destination."""

    name: str
    destination: Any


def int_(initial: int = 0) -> Destination:
    return Destination(FieldKind.INT, initial)


def int8(initial: int = 0) -> Destination:
    return Destination(FieldKind.INT8, initial)


def int16(initial: int = 0) -> Destination:
    return Destination(FieldKind.INT16, initial)


def int32(initial: int = 0) -> Destination:
    return Destination(FieldKind.INT32, initial)


def int64(initial: int = 0) -> Destination:
    return Destination(FieldKind.INT64, initial)


def uint(initial: int = 0) -> Destination:
    return Destination(FieldKind.UINT, initial)


def uint8(initial: int = 0) -> Destination:
    return Destination(FieldKind.UINT8, initial)


def uint16(initial: int = 0) -> Destination:
    return Destination(FieldKind.UINT16, initial)


def uint32(initial: int = 0) -> Destination:
    return Destination(FieldKind.UINT32, initial)


def uint64(initial: int = 0) -> Destination:
    return Destination(FieldKind.UINT64, initial)


def boolean(initial: bool = False) -> Destination:
    return Destination(FieldKind.BOOL, initial)


def string(initial: str = "") -> Destination:
    return Destination(FieldKind.STRING, initial)
