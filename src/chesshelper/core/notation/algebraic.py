"""Algebraic move notation: ``Nf3``, ``exd5``, ``R2xd2``, ``d8=Q``, ``O-O``."""

from __future__ import annotations

from chesshelper.core.enums import PROMOTION_TYPES, MoveType, PieceType
from chesshelper.core.move import MoveDescriptor
from chesshelper.core.notation.scanner import Scanner
from chesshelper.core.types import (
    ANY_SQUARE,
    FILES,
    RANKS,
    WILDCARD,
    SquarePattern,
    is_file,
    is_rank,
    is_square,
    make_pattern,
)

_SHORT_CASTLING = frozenset({"o-o", "oo", "0-0"})
_LONG_CASTLING = frozenset({"o-o-o", "ooo", "0-0-0"})

_PIECE_LETTERS = "nbrqk"
_CAPTURE = "x"
# Check, mate and move-quality marks carry no information for the board.
_CHECK_MARKS = "+#!?"
_EN_PASSANT = "e.p."
_BODY_CHARS = FILES + RANKS + _CAPTURE


def parse_algebraic(text: str) -> MoveDescriptor | None:
    """Parse algebraic notation into a :class:`MoveDescriptor`.

    Matching is case-insensitive. Returns ``None`` for anything that is not
    a recognisable move.
    """
    raw = text.strip()
    if not raw:
        return None
    lowered = raw.lower()

    castling = _parse_castling(lowered)
    if castling is not None:
        return castling

    if _starts_with_piece(raw):
        descriptor = _parse_move(lowered, PieceType(lowered[0]))
        # A "b" with no destination after it is the b-pawn: "b4", "B8=Q".
        if descriptor is not None or not is_file(lowered[0]):
            return descriptor
    elif not is_file(lowered[0]):
        return None
    return _parse_move(lowered, PieceType.PAWN)


def _parse_move(lowered: str, piece: PieceType) -> MoveDescriptor | None:
    scanner = Scanner(lowered)
    if piece is not PieceType.PAWN:
        scanner.advance()

    parts = _split_body(_scan_body(scanner))
    if parts is None:
        return None
    origin, has_capture_mark, destination = parts

    well_formed, promotion = _scan_suffixes(scanner)
    if not well_formed:
        return None

    # Pawn capture shorthand: a lone origin file, as in "ed5".
    pawn_shorthand = (
        piece is PieceType.PAWN and is_file(origin[0]) and origin[1] == WILDCARD
    )
    move_type = (
        MoveType.CAPTURE if has_capture_mark or pawn_shorthand else MoveType.MOVE
    )
    return MoveDescriptor(
        piece=piece,
        from_sq=origin,
        to_sq=destination,
        move_type=move_type,
        promotion=promotion if piece is PieceType.PAWN else None,
    )


def _parse_castling(lowered: str) -> MoveDescriptor | None:
    token = lowered.rstrip(_CHECK_MARKS)
    if token in _SHORT_CASTLING:
        move_type = MoveType.SHORT_CASTLING
    elif token in _LONG_CASTLING:
        move_type = MoveType.LONG_CASTLING
    else:
        return None
    return MoveDescriptor(
        piece=PieceType.KING, from_sq=None, to_sq=None, move_type=move_type
    )


def _starts_with_piece(raw: str) -> bool:
    """Should the first character be tried as a piece letter first?

    Only ``b`` is both. Uppercase ``B`` is tried as the bishop; lowercase
    ``b`` is the b-pawn when it captures onto the a- or c-file (``bxc4``).
    """
    first = raw[0]
    if first.lower() not in _PIECE_LETTERS:
        return False
    if first == "b":
        return not (raw[1:2].lower() == _CAPTURE and raw[2:3].lower() in ("a", "c"))
    return True


def _scan_body(scanner: Scanner) -> str:
    """Consume origin, capture mark and destination characters."""
    start = scanner.pos
    while not scanner.looking_at(_EN_PASSANT) and scanner.accept(_BODY_CHARS):
        pass
    return scanner.text_since(start)


def _split_body(body: str) -> tuple[SquarePattern, bool, str] | None:
    """Split ``[origin][x]destination`` into its three parts."""
    destination = body[-2:]
    if not is_square(destination):
        return None
    prefix = body[:-2]

    has_capture_mark = prefix.endswith(_CAPTURE)
    if has_capture_mark:
        prefix = prefix[:-1]

    if not prefix:
        origin = ANY_SQUARE
    elif is_file(prefix):
        origin = make_pattern(file=prefix)
    elif is_rank(prefix):
        origin = make_pattern(rank=prefix)
    elif is_square(prefix):
        origin = prefix
    else:
        return None
    return origin, has_capture_mark, destination


def _scan_suffixes(scanner: Scanner) -> tuple[bool, PieceType | None]:
    """Consume trailing check, promotion and en-passant annotations.

    Returns ``(well_formed, promotion)``; *well_formed* is false when the
    tail holds anything else.
    """
    promotion: PieceType | None = None
    seen_en_passant = False

    while True:
        scanner.skip_whitespace()
        if scanner.at_end():
            return True, promotion
        if scanner.accept_literal(_EN_PASSANT):
            if seen_en_passant:
                return False, None
            seen_en_passant = True
        elif scanner.accept(_CHECK_MARKS):
            continue
        elif scanner.accept("="):
            piece = PieceType.from_letter(scanner.advance())
            if promotion is not None or piece not in PROMOTION_TYPES:
                return False, None
            promotion = piece
        else:
            return False, None
