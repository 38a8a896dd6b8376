"""Validating and applying moves to the board."""

from .bitboards import bitboard_index
from .castling import handle_castling, update_castle_rights
from .move import MoveFlag

_PAWN_BOARDS = (0, 6)


def _is_pawn(bitboards, square):
    return bitboard_index(bitboards, square) in _PAWN_BOARDS


def is_pawn_promotion(bitboards, start, dest):
    """True if a pawn on `start` reaches the first or last rank at `dest`."""
    if not _is_pawn(bitboards, start):
        return False
    return 0 <= dest <= 7 or 56 <= dest <= 63


def handle_pawn_promotion(bitboards, start, dest):
    """Replace the pawn by a queen on `dest`, capturing whatever stood there."""
    captured = bitboard_index(bitboards, dest)
    if captured is not None:
        bitboards[captured] &= ~(1 << dest)
    if 0 <= dest <= 7:
        pawn, queen = 6, 10
    else:
        pawn, queen = 0, 4
    bitboards[pawn] &= ~(1 << start)
    bitboards[queen] |= 1 << dest


def apply_move(bitboards, start, dest):
    """Move the piece on `start` to `dest`, removing any piece captured there."""
    moving = bitboard_index(bitboards, start)
    if moving is None:
        raise ValueError(f"no piece on square {start}")
    captured = bitboard_index(bitboards, dest)
    if is_pawn_promotion(bitboards, start, dest):
        handle_pawn_promotion(bitboards, start, dest)
        return
    bitboards[moving] &= ~(1 << start)
    bitboards[moving] |= 1 << dest
    if captured is not None and captured != moving:
        bitboards[captured] &= ~(1 << dest)


def is_double_pawn_push(bitboards, move):
    """True if `move` advances a pawn two squares."""
    return _is_pawn(bitboards, move.start) and abs(move.start - move.dest) == 16


def handle_double_pawn_push(move, flags):
    """Record the square behind the pushed pawn as the en passant square."""
    flags.en_passant = move.dest + 8 if flags.player else move.dest - 8


def handle_enpassant(bitboards, flags):
    """Remove the pawn captured by an en passant move of the side to move."""
    if flags.en_passant is None:
        raise ValueError("no en passant square is set")
    player = flags.player
    board = (not player) * 6
    square = flags.en_passant + 16 * player - 8
    bitboards[board] &= ~(1 << square)


def is_legal_move(bitboards, start, dest, flags, legal_moves):
    """Find the move among `legal_moves` and apply its side effects.

    Side effects are rook moves for castling, en passant captures, the
    en passant square and castling rights. Returns whether the move was found.
    """
    move = next(
        (m for m in legal_moves if m.start == start and m.dest == dest), None
    )
    if move is None:
        return False
    if move.flag == MoveFlag.CASTLE:
        handle_castling(bitboards, move, flags)
    elif move.flag == MoveFlag.EN_PASSANT:
        handle_enpassant(bitboards, flags)
    if is_double_pawn_push(bitboards, move):
        handle_double_pawn_push(move, flags)
    else:
        flags.en_passant = None
    update_castle_rights(bitboards, move, flags)
    return True


def handle_move(bitboards, start, dest, legal_moves, flags):
    """Play the move if it is legal; return whether it was played."""
    if start is None or dest is None:
        return False
    if not is_legal_move(bitboards, start, dest, flags, legal_moves):
        return False
    apply_move(bitboards, start, dest)
    return True