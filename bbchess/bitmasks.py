"""Precomputed move masks for every piece type and square."""

from enum import IntEnum
from functools import lru_cache

from .constants import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    FILE_OFFSETS,
    RANK_OFFSETS,
    on_board,
    square_index,
)

KNIGHT_FILE_OFFSETS = (2, 2, 1, -1, -2, -2, -1, 1)
KNIGHT_RANK_OFFSETS = (-1, 1, 2, 2, 1, -1, -2, -2)


class Mask(IntEnum):
    """Index of each table returned by load_bitmasks()."""

    WHITE_PAWN_PUSH = 0
    BLACK_PAWN_PUSH = 1
    WHITE_PAWN_DOUBLE = 2
    BLACK_PAWN_DOUBLE = 3
    WHITE_PAWN_CAPTURE = 4
    BLACK_PAWN_CAPTURE = 5
    KNIGHT = 6
    BISHOP = 7
    ROOK = 8
    QUEEN = 9
    KING = 10


def _check_square(square):
    if not 0 <= square < 64:
        raise ValueError(f"square {square} is off the board")


def _offset_mask(square, file_offsets, rank_offsets):
    _check_square(square)
    file, rank = square % 8, square // 8
    mask = 0
    for df, dr in zip(file_offsets, rank_offsets):
        if on_board(file + df, rank + dr):
            mask |= 1 << square_index(file + df, rank + dr)
    return mask


def knight_mask(square):
    """Squares a knight on `square` reaches."""
    return _offset_mask(square, KNIGHT_FILE_OFFSETS, KNIGHT_RANK_OFFSETS)


def king_mask(square):
    """Squares a king on `square` reaches."""
    return _offset_mask(square, FILE_OFFSETS, RANK_OFFSETS)


def bishop_mask(square):
    """All squares on the diagonals through `square`, excluding it."""
    _check_square(square)
    file, rank = square % 8, square // 8
    mask = 0
    for direction in DIAGONAL_DIRECTIONS:
        for step in range(1, 8):
            f = file + step * FILE_OFFSETS[direction]
            r = rank + step * RANK_OFFSETS[direction]
            if not on_board(f, r):
                break
            mask |= 1 << square_index(f, r)
    return mask


def rook_mask(square):
    """All squares on the rank and file of `square`, excluding it."""
    _check_square(square)
    file, rank = square % 8, square // 8
    mask = 0
    for j in range(8):
        mask |= 1 << (rank * 8 + j)
        mask |= 1 << (file + j * 8)
    return mask & ~(1 << square)


def _pawn_table(rank_step, file_steps):
    table = [0] * 64
    for square in range(8, 56):
        file, rank = square % 8, square // 8
        for df in file_steps:
            if on_board(file + df, rank + rank_step):
                table[square] |= 1 << square_index(file + df, rank + rank_step)
    return tuple(table)


def _double_table(first, step):
    table = [0] * 64
    for square in range(first, first + 8):
        table[square] = 1 << (square + step)
    return tuple(table)


@lru_cache(maxsize=None)
def load_bitmasks():
    """Return the eleven 64-entry mask tables, indexed by Mask."""
    bishops = tuple(bishop_mask(sq) for sq in range(64))
    rooks = tuple(rook_mask(sq) for sq in range(64))
    return (
        _pawn_table(-1, (0,)),
        _pawn_table(1, (0,)),
        _double_table(48, -16),
        _double_table(8, 16),
        _pawn_table(-1, (-1, 1)),
        _pawn_table(1, (-1, 1)),
        tuple(knight_mask(sq) for sq in range(64)),
        bishops,
        rooks,
        tuple(b | r for b, r in zip(bishops, rooks)),
        tuple(king_mask(sq) for sq in range(64)),
    )


BITMASKS = load_bitmasks()

# Kept for callers that iterate over every direction.
DIRECTIONS = ALL_DIRECTIONS