"""Little-endian primitives of the level file format."""

from __future__ import annotations

import struct
from typing import BinaryIO


class FormatError(ValueError):
    """Raised when a level or score file is malformed."""


_U16 = struct.Struct("<H")
_I32 = struct.Struct("<i")
_F32 = struct.Struct("<f")


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise FormatError(f"unexpected end of data while reading {what}")
    return data


def read_u16(stream: BinaryIO) -> int:
    """Read an unsigned 16-bit integer."""
    return _U16.unpack(_read_exact(stream, _U16.size, "u16"))[0]


def read_i32(stream: BinaryIO, minimum: int, maximum: int, what: str) -> int:
    """Read a signed 32-bit integer that must lie in [minimum, maximum]."""
    value = _I32.unpack(_read_exact(stream, _I32.size, what))[0]
    if not minimum <= value <= maximum:
        raise FormatError(f"{what} out of range: {value} not in [{minimum}, {maximum}]")
    return value


def read_float(stream: BinaryIO) -> float:
    """Read a 32-bit float."""
    return _F32.unpack(_read_exact(stream, _F32.size, "float"))[0]


def read_string(stream: BinaryIO, what: str) -> str:
    """Read a string prefixed by its 32-bit length."""
    length = _I32.unpack(_read_exact(stream, _I32.size, what))[0]
    if length < 0:
        raise FormatError(f"{what} has negative length {length}")
    raw = _read_exact(stream, length, what)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(f"{what} is not valid text") from exc


def read_compare(stream: BinaryIO, expected: str | bytes) -> bool:
    """Read len(expected) bytes and report whether they match."""
    if isinstance(expected, str):
        expected = expected.encode("ascii")
    return stream.read(len(expected)) == expected


def write_u16(value: int) -> bytes:
    """Encode an unsigned 16-bit integer."""
    return _U16.pack(value)


def write_i32(value: int) -> bytes:
    """Encode a signed 32-bit integer."""
    return _I32.pack(value)


def write_float(value: float) -> bytes:
    """Encode a 32-bit float."""
    return _F32.pack(value)


def write_string(text: str) -> bytes:
    """Encode a length-prefixed string."""
    raw = text.encode("utf-8")
    return _I32.pack(len(raw)) + raw