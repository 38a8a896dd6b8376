"""State of a game in progress."""

import logging

from .attacks import attack_bitboard
from .bitboards import occupancy
from .check import filter_moves, is_check
from .fen import START_FEN, load_fen
from .move_handler import handle_move
from .movegen import generate_legal_moves

log = logging.getLogger(__name__)


class Game:
    """Piece bitboards, game flags and the moves open to the side to move."""

    def __init__(self, fen=START_FEN):
        self.bitboards, self.flags = load_fen(fen)
        self.legal_moves = generate_legal_moves(
            self.flags.player, self.bitboards, self.occupancy(), self.flags, 0
        )

    def occupancy(self):
        """Return (black, white, all) occupancy of the current board."""
        return occupancy(self.bitboards)

    def _enemy_attacks(self):
        return attack_bitboard(1 - self.flags.player, self.bitboards, self.occupancy())

    def update(self):
        """Hand the move to the other side and compute its legal moves."""
        self.flags.player = 1 - self.flags.player
        player = self.flags.player
        atk = self._enemy_attacks()
        moves = generate_legal_moves(
            player, self.bitboards, self.occupancy(), self.flags, atk
        )
        self.legal_moves = filter_moves(player, self.bitboards, moves)
        if is_check(player, self.bitboards, atk):
            log.info("check")
            if not self.legal_moves:
                log.info("checkmate")

    def moves_from(self, square):
        """Legal moves starting on `square`."""
        return [move for move in self.legal_moves if move.start == square]

    def try_move(self, start, dest):
        """Play the move if it is legal, then pass the turn; return whether played."""
        if not handle_move(self.bitboards, start, dest, self.legal_moves, self.flags):
            return False
        self.update()
        return True

    def in_check(self):
        """True if the side to move is in check."""
        return is_check(self.flags.player, self.bitboards, self._enemy_attacks())

    def is_checkmate(self):
        """True if the side to move is in check and has no legal move."""
        return self.in_check() and not self.legal_moves