"""Square names, origin patterns and coordinate helpers.

Squares are plain two-character strings (``"e4"``). An origin pattern is
also two characters, each either a literal file/rank or ``WILDCARD``:
``"e."`` is any square on the e-file, ``".2"`` any square on rank 2 and
``".."`` any square at all.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1" … "h8"
SquarePattern: TypeAlias = str  # "e.", ".2", "..", "e2"

FILES = "abcdefgh"
RANKS = "12345678"
WILDCARD = "."
ANY_SQUARE: SquarePattern = WILDCARD * 2


def is_file(char: str) -> bool:
    return len(char) == 1 and char in FILES


def is_rank(char: str) -> bool:
    return len(char) == 1 and char in RANKS


def is_square(name: str) -> bool:
    """Check whether *name* is a fully specified square such as ``'e4'``."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and is_file(name[0])
        and is_rank(name[1])
    )


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return FILES.index(sq[0])


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return RANKS.index(sq[1])


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Square index out of range: file={file}, rank={rank}")
    return FILES[file] + RANKS[rank]


def parse_square(name: str) -> Square:
    """Normalise a square name, e.g. ``'E4'`` → ``'e4'``."""
    sq = name.strip().lower()
    if not is_square(sq):
        raise ValueError(f"Invalid square name: {name!r}")
    return sq


def make_pattern(file: str | None = None, rank: str | None = None) -> SquarePattern:
    """Build an origin pattern, leaving unspecified components as wildcards."""
    return (file or WILDCARD) + (rank or WILDCARD)


def matches_pattern(sq: Square, pattern: SquarePattern | None) -> bool:
    """Does square *sq* fit *pattern*? ``None`` matches everything."""
    if pattern is None:
        return True
    if not isinstance(sq, str) or len(sq) != 2 or len(pattern) != 2:
        return False
    return all(p == WILDCARD or p == s for s, p in zip(sq, pattern))
