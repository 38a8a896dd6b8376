"""Pseudo-legal move generation."""

from .attacks import piece_attacks
from .bitboards import highest_square, iter_squares
from .bitmasks import BITMASKS, Mask
from .castling import castling_moves
from .move import Move, MoveFlag


def pawn_moves(player, square, occupancy_bitboards):
    """Destination squares of a pawn: pushes, double push and captures."""
    everyone = occupancy_bitboards[2]
    push = BITMASKS[Mask.BLACK_PAWN_PUSH - player][square] & ~everyone
    double = BITMASKS[Mask.BLACK_PAWN_DOUBLE - player][square] & ~everyone
    double &= (push >> 8) if player else (push << 8)
    capture = (
        BITMASKS[Mask.BLACK_PAWN_CAPTURE - player][square]
        & occupancy_bitboards[not player]
    )
    return push | capture | double


def piece_moves(player, piece, square, occupancy_bitboards):
    """Destination squares of the piece on board `piece` standing on `square`."""
    if piece % 6 == 0:
        return pawn_moves(player, square, occupancy_bitboards)
    return piece_attacks(player, square, piece, occupancy_bitboards)


def en_passant_moves(player, bitboards, flags):
    """En passant captures onto the square recorded in `flags`."""
    target = flags.en_passant
    if target is None:
        return []
    captures = BITMASKS[Mask.BLACK_PAWN_CAPTURE - player]
    return [
        Move(square, target, MoveFlag.EN_PASSANT)
        for square in iter_squares(bitboards[player * 6])
        if captures[square] & (1 << target)
    ]


def generate_legal_moves(player, bitboards, occupancy_bitboards, flags, atk_bb):
    """All moves of `player`, before filtering moves that leave the king in check."""
    moves = []
    first = player * 6
    for index in range(first, first + 6):
        for square in iter_squares(bitboards[index]):
            targets = piece_moves(player, index, square, occupancy_bitboards)
            moves.extend(Move(square, dest) for dest in iter_squares(targets))
    king_square = highest_square(bitboards[first + 5])
    moves.extend(
        castling_moves(king_square, bitboards, occupancy_bitboards, flags, atk_bb)
    )
    moves.extend(en_passant_moves(player, bitboards, flags))
    return moves