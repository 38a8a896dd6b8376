"""Loading positions from FEN strings."""

from dataclasses import dataclass, replace

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

PIECE_LETTERS = "pnbrqk"

WHITE = 1
BLACK = 0


@dataclass
class GameFlags:
    """Side to move, castling rights, en passant square and move counters."""

    player: int = BLACK
    castle_rights: int = 0
    en_passant: int | None = None
    halfmove: int = 0
    fullmove: int = 0

    def copy(self):
        """Return an independent copy."""
        return replace(self)


def piece_index(char):
    """Bitboard index for a FEN piece letter: black 0-5, white 6-11."""
    lower = char.lower()
    if len(char) != 1 or lower not in PIECE_LETTERS:
        raise ValueError(f"not a piece letter: {char!r}")
    return PIECE_LETTERS.index(lower) + (6 if char.isupper() else 0)


def parse_castle_rights(token):
    """Castling rights as bits K=8, Q=4, k=2, q=1; other characters are ignored."""
    bits = {"K": 8, "Q": 4, "k": 2, "q": 1}
    value = 0
    for char in token:
        value |= bits.get(char, 0)
    return value


def square_from_string(text):
    """Square number for a name such as 'e3'; '-' gives None."""
    if text.startswith("-"):
        return None
    if len(text) < 2 or text[0] not in "abcdefgh" or text[1] not in "12345678":
        raise ValueError(f"not a square: {text!r}")
    col = ord(text[0]) - ord("a")
    row = 8 - int(text[1])
    return row * 8 + col


def _parse_placement(placement):
    bitboards = [0] * 12
    row = col = 0
    for char in placement:
        if char == "/":
            row += 1
            col = 0
        elif char.isdigit():
            col += int(char)
        elif char.isalpha():
            bitboards[piece_index(char)] |= 1 << (row * 8 + col)
            col += 1
    return bitboards


def load_fen(fen=START_FEN):
    """Parse a FEN string into twelve piece bitboards and GameFlags."""
    placement, _, rest = fen.partition(" ")
    bitboards = _parse_placement(placement)
    flags = GameFlags()
    for index, token in enumerate(rest.split()):
        if token.startswith("-"):
            continue
        if index == 0:
            flags.player = WHITE if token == "w" else BLACK
        elif index == 1:
            flags.castle_rights = parse_castle_rights(token)
        elif index == 2:
            flags.en_passant = square_from_string(token)
        elif index == 3:
            flags.halfmove = int(token)
        elif index == 4:
            flags.fullmove = int(token)
    return bitboards, flags