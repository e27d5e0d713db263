"""Reading level packs and reading and writing the score database."""

from __future__ import annotations

import io
import struct
from collections.abc import Iterable
from typing import BinaryIO

from .binary import FormatError, read_compare, read_i32, read_string, write_i32, write_string
from .factories import LevelFactory, Location, PatternFactory

PROJECT_HEADER = "HAX1.1"
PROJECT_FOOTER = "ENDHAX"
SCORE_HEADER = "SCDB1.0"
SCORE_FOOTER = "ENDSCDB"

# The score database lives in a fixed-size save area.
SCORE_DB_SIZE = 500

_U32 = struct.Struct("<I")


def load_levels(
    stream: BinaryIO, location: Location, level_index_offset: int = 0
) -> list[LevelFactory]:
    """Read a level pack and return its levels.

    ``level_index_offset`` is the number of levels already loaded, so that
    the "next level" links of this pack point at the right entries.
    Raises FormatError when the pack is malformed.
    """
    if not read_compare(stream, PROJECT_HEADER):
        raise FormatError("file header invalid")

    pattern_count = read_i32(stream, 1, 300, "number of patterns")
    patterns = [PatternFactory.from_stream(stream) for _ in range(pattern_count)]

    level_count = read_i32(stream, 1, 300, "number of levels")
    levels = [
        LevelFactory.from_stream(stream, patterns, location, level_index_offset)
        for _ in range(level_count)
    ]

    if not read_compare(stream, PROJECT_FOOTER):
        raise FormatError("file footer invalid")

    return levels


def _key(level: LevelFactory) -> tuple[str, str, str, str]:
    return (level.name, level.difficulty, level.mode, level.creator)


def load_scores(data: bytes | None, levels: Iterable[LevelFactory]) -> int:
    """Apply the high scores stored in ``data`` to matching levels.

    Missing data or an unknown header leaves the levels untouched.
    Returns the number of score records read.
    Raises FormatError when the records are cut short.
    """
    if not data:
        return 0

    stream = io.BytesIO(data)
    if not read_compare(stream, SCORE_HEADER):
        return 0

    raw = stream.read(_U32.size)
    if len(raw) != _U32.size:
        raise FormatError("unexpected end of data while reading score count")
    count = _U32.unpack(raw)[0]

    by_key: dict[tuple[str, str, str, str], list[LevelFactory]] = {}
    for level in levels:
        by_key.setdefault(_key(level), []).append(level)

    for _ in range(count):
        key = (
            read_string(stream, "score level name"),
            read_string(stream, "score level difficulty"),
            read_string(stream, "score level mode"),
            read_string(stream, "score level creator"),
        )
        score = read_i32(stream, -(2**31), 2**31 - 1, "score")
        for level in by_key.get(key, ()):
            level.set_high_score(score)

    return count


def dump_scores(levels: Iterable[LevelFactory]) -> bytes:
    """Encode the high scores of ``levels`` as a score database image.

    The result is padded with zeros to SCORE_DB_SIZE bytes.
    Raises ValueError when the scores do not fit.
    """
    levels = list(levels)
    parts = [SCORE_HEADER.encode("ascii"), _U32.pack(len(levels))]
    for level in levels:
        parts.extend(write_string(field) for field in _key(level))
        parts.append(write_i32(level.high_score))
    parts.append(SCORE_FOOTER.encode("ascii"))

    image = b"".join(parts)
    if len(image) > SCORE_DB_SIZE:
        raise ValueError(
            f"score database needs {len(image)} bytes, only {SCORE_DB_SIZE} available"
        )
    return image.ljust(SCORE_DB_SIZE, b"\0")