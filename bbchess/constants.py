"""Board geometry and shared constants."""

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 1024
TILESIZE = 128

LEGAL_MOVES_SIZE = 256

# Direction offsets: the first four are orthogonal, the last four diagonal.
FILE_OFFSETS = (1, 0, -1, 0, 1, -1, 1, -1)
RANK_OFFSETS = (0, 1, 0, -1, 1, 1, -1, -1)

ORTHOGONAL_DIRECTIONS = range(0, 4)
DIAGONAL_DIRECTIONS = range(4, 8)
ALL_DIRECTIONS = range(0, 8)

# Material values of pawn, knight, bishop, rook and queen.
TRANSLATION_TABLE = (1, 3, 3, 5, 9)

DEPTH = 3


def on_board(file, rank):
    """Return True if the file and rank lie on the 8x8 board."""
    return 0 <= file < 8 and 0 <= rank < 8


def square_index(file, rank):
    """Return the square number for a file and rank (rank 0 is the top row)."""
    if not on_board(file, rank):
        raise ValueError(f"file {file}, rank {rank} is off the board")
    return rank * 8 + file