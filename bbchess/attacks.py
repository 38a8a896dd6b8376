"""Squares attacked by each piece and by a whole side."""

from .bitboards import iter_squares
from .bitmasks import BITMASKS, Mask
from .constants import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    FILE_OFFSETS,
    ORTHOGONAL_DIRECTIONS,
    RANK_OFFSETS,
    on_board,
)

PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(6)

_SLIDER_DIRECTIONS = {
    BISHOP: DIAGONAL_DIRECTIONS,
    ROOK: ORTHOGONAL_DIRECTIONS,
    QUEEN: ALL_DIRECTIONS,
}


def slide(player, square, directions, occupancy_bitboards):
    """Squares reached by sliding from `square` along `directions`.

    A ray stops before a piece of `player` and on a piece of the opponent.
    """
    own = occupancy_bitboards[player]
    enemy = occupancy_bitboards[not player]
    file, rank = square % 8, square // 8
    result = 0
    for direction in directions:
        for step in range(1, 8):
            f = file + step * FILE_OFFSETS[direction]
            r = rank + step * RANK_OFFSETS[direction]
            if not on_board(f, r):
                break
            bit = 1 << (r * 8 + f)
            if enemy & bit:
                result |= bit
                break
            if own & bit:
                break
            result |= bit
    return result


def sliding_moves(player, square, piece, occupancy_bitboards):
    """Moves of a bishop, rook or queen (piece index taken modulo 6)."""
    directions = _SLIDER_DIRECTIONS.get(piece % 6)
    if directions is None:
        raise ValueError(f"piece {piece} is not a sliding piece")
    return slide(player, square, directions, occupancy_bitboards)


def piece_attacks(player, square, piece, occupancy_bitboards):
    """Squares attacked by one piece of `player` standing on `square`."""
    piece %= 6
    if piece == PAWN:
        return (
            BITMASKS[Mask.BLACK_PAWN_CAPTURE - player][square]
            & occupancy_bitboards[not player]
        )
    if piece == KNIGHT:
        return BITMASKS[Mask.KNIGHT][square] & ~occupancy_bitboards[player]
    if piece == KING:
        return BITMASKS[Mask.KING][square] & ~occupancy_bitboards[player]
    return sliding_moves(player, square, piece, occupancy_bitboards)


def attack_bitboard(player, bitboards, occupancy_bitboards):
    """Union of the squares attacked by every piece of `player`."""
    result = 0
    first = player * 6
    for index in range(first, first + 6):
        for square in iter_squares(bitboards[index]):
            result |= piece_attacks(player, square, index, occupancy_bitboards)
    return result