"""Size information for symbols shown when hovering over them."""

from __future__ import annotations

import struct
from enum import Enum
from typing import Optional

UNKNOWN_SIZE = "?"

_FIXED_SIZES: dict[str, int] = {
    "bool": 1,
    "ichar": 1,
    "char": 1,
    "short": 16 // 8,
    "ushort": 16 // 8,
    "int": 32 // 8,
    "uint": 32 // 8,
    "long": 64 // 8,
    "ulong": 64 // 8,
    "int128": 128 // 8,
    "uint128": 128 // 8,
    "isz": 0,
    "usz": 0,
}

_POINTER_SIZED = frozenset({"iptr", "uptr"})


class SymbolCategory(Enum):
    """What kind of symbol a size is asked for."""

    UNKNOWN = 0
    VARIABLE = 1
    STRUCT = 2
    STRUCT_MEMBER = 3
    BITSTRUCT = 4
    FAULT = 5
    ENUM = 6


def _native_pointer_size() -> int:
    return struct.calcsize("P")


def language_type_size(type_name: str, pointer_size: Optional[int] = None) -> int:
    """Return the size in bytes of a built-in type, or 0 when it is not known.

    Pointer-sized integers take ``pointer_size``, which defaults to the size
    of a pointer on this machine.
    """
    if type_name in _POINTER_SIZED:
        return _native_pointer_size() if pointer_size is None else pointer_size
    return _FIXED_SIZES.get(type_name, 0)


def has_size(category: SymbolCategory) -> bool:
    """Return True if symbols of ``category`` can be given a size."""
    return category is not SymbolCategory.UNKNOWN


def describe_size(
    category: SymbolCategory,
    type_name: str,
    is_pointer: bool,
    is_base_type: bool,
    pointer_size: Optional[int] = None,
) -> str:
    """Return the size of a symbol as text, or ``"?"`` when it cannot be told.

    Only variables and struct members are sized: pointers take the pointer
    size, built-in types their own size.
    """
    if category not in (SymbolCategory.VARIABLE, SymbolCategory.STRUCT_MEMBER):
        return UNKNOWN_SIZE
    if is_pointer:
        size = _native_pointer_size() if pointer_size is None else pointer_size
        return str(size)
    if is_base_type:
        return str(language_type_size(type_name, pointer_size))
    return UNKNOWN_SIZE