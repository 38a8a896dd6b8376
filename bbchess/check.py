"""Detecting check and removing moves that leave the king attacked."""

from .attacks import attack_bitboard
from .bitboards import occupancy
from .move_handler import apply_move


def is_check(player, bitboards, atk_bb):
    """True if the king of `player` stands on a square set in `atk_bb`."""
    return bool(atk_bb & bitboards[6 * player + 5])


def filter_moves(player, bitboards, legal_moves):
    """Keep only the moves after which the king of `player` is not attacked."""
    valid = []
    for move in legal_moves:
        board = list(bitboards)
        apply_move(board, move.start, move.dest)
        enemy_attacks = attack_bitboard(1 - player, board, occupancy(board))
        if not is_check(player, board, enemy_attacks):
            valid.append(move)
    return valid