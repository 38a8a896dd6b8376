"""Castling rights and castling moves."""

from .bitboards import bitboard_index
from .move import Move, MoveFlag

# Bits kept when a single right is removed, indexed as q, k, Q, K.
_KEEP_MASKS = (14, 13, 11, 7)

_ROOK_CORNERS = {0: 0, 7: 1, 56: 2, 63: 3}


def square_under_attack(square, atk_bb):
    """True if `square` is set in the attack bitboard."""
    return bool(atk_bb & (1 << square))


def remove_castle_rights(flags, index):
    """Drop one castling right: 0 black queenside, 1 black kingside,
    2 white queenside, 3 white kingside."""
    if not 0 <= index < 4:
        raise ValueError(f"castle rights index {index} out of range")
    flags.castle_rights &= _KEEP_MASKS[index]


def _keep_for_king(start):
    return 3 if start == 60 else 12


def update_castle_rights(bitboards, move, flags):
    """Remove castling rights when a king or a rook leaves its square."""
    index = bitboard_index(bitboards, move.start)
    if index in (3, 9):
        corner = _ROOK_CORNERS.get(move.start)
        if corner is not None:
            remove_castle_rights(flags, corner)
    elif index in (5, 11):
        flags.castle_rights &= _keep_for_king(move.start)


def handle_castling(bitboards, move, flags):
    """Move the rook for a castling move and drop the mover's rights."""
    start, dest = move.start, move.dest
    rook = 9 if start == 60 else 3
    if start > dest:
        source, target = dest - 2, dest + 1
    else:
        source, target = dest + 1, dest - 1
    bitboards[rook] &= ~(1 << source)
    bitboards[rook] |= 1 << target
    flags.castle_rights &= _keep_for_king(start)


def rook_on_castle_square(start, dest, bitboards):
    """True if the rook for this castling move is on its corner."""
    if dest < start:
        board, corner = (3, 0) if start == 4 else (9, 56)
    else:
        board, corner = (3, 7) if start == 4 else (9, 63)
    return bool(bitboards[board] & (1 << corner))


def can_castle(start, dest, bitboards, occupancy_bitboards, flags, atk_bb):
    """Whether the king may castle from `start` to `dest`.

    A missing rook removes the matching castling right.
    """
    if dest is None:
        return False
    if not rook_on_castle_square(start, dest, bitboards):
        index = (0 if start == 4 else 2) + (start < dest)
        remove_castle_rights(flags, index)
        return False
    low, high = min(start, dest), max(start, dest)
    if any(square_under_attack(sq, atk_bb) for sq in range(low, high + 1)):
        return False
    if start < dest:
        between = range(start + 1, dest + 1)
    else:
        between = range(dest - 1, start)
    return not any(occupancy_bitboards[2] & (1 << sq) for sq in between)


def castling_moves(square, bitboards, occupancy_bitboards, flags, atk_bb):
    """Castling moves available to a king standing on `square`."""
    rights = flags.castle_rights
    if square == 4:
        options = ((1, 2), (2, 6))
    elif square == 60:
        options = ((4, 58), (8, 62))
    else:
        return []
    return [
        Move(square, dest, MoveFlag.CASTLE)
        for bit, dest in options
        if rights & bit
        and can_castle(square, dest, bitboards, occupancy_bitboards, flags, atk_bb)
    ]