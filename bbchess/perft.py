"""Counting nodes of the move tree, for testing the move generator."""

from .attacks import attack_bitboard
from .bitboards import occupancy
from .move_handler import apply_move
from .movegen import generate_legal_moves


def count_nodes(bitboards, flags, depth):
    """Number of leaf positions reached after `depth` moves of the side in `flags`.

    The side to move is not switched between plies, and `flags` is shared by
    the whole search.
    """
    if depth < 0:
        raise ValueError(f"depth must not be negative, got {depth}")
    if depth == 0:
        return 1
    player = flags.player
    occ = occupancy(bitboards)
    atk = attack_bitboard(1 - player, bitboards, occ)
    total = 0
    for move in generate_legal_moves(player, bitboards, occ, flags, atk):
        board = list(bitboards)
        apply_move(board, move.start, move.dest)
        total += count_nodes(board, flags, depth - 1)
    return total