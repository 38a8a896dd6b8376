# bbchess

A two-player chess board built on 64-bit bitboards. It generates moves for
every piece, handles castling, en passant and promotion to a queen, removes
moves that would leave the king attacked, and detects check and checkmate.
The board is shown in a borderless pygame window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
bbchess
```

This opens a 1024x1024 window with an 8x8 board of 128-pixel tiles. Press
the mouse button on one of your pieces to shade the squares it can move to,
then release it over the square you want. The side to move is taken from the
position and changes after each legal move. After a move, "CHECK!" or
"CHECKMATE" is printed to the console when it applies. Close the window or
press Escape to quit.

Options:

- `--fen FEN` sets the starting position (default: the standard start).
- `--assets DIR` sets the directory holding the piece images (default:
  `assets/pieces-basic-png`).

The twelve piece images are PNG files named `black-pawn.png`,
`black-knight.png`, ... `white-king.png` (pawn, knight, bishop, rook, queen,
king for each colour). If one is missing, the command prints an error and
exits with status 1.

## Using the engine

```python
from bbchess.game import Game
from bbchess.perft import count_nodes

game = Game("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(game.moves_from(52))      # moves of the pawn on e2
game.try_move(52, 36)           # e2-e4; on success the turn passes to black
print(game.in_check(), game.is_checkmate())

print(count_nodes(game.bitboards, game.flags, 2))
```

Squares are numbered 0 (a8) to 63 (h1). Bitboards 0-5 hold the black pawn,
knight, bishop, rook, queen and king; 6-11 the white ones. Player 1 is white
and player 0 is black.

- `bbchess.fen.load_fen` parses a FEN string into twelve bitboards and a
  `GameFlags` record (side to move, castling rights, en passant square, move
  counters).
- `bbchess.movegen.generate_legal_moves` lists the moves of one side before
  king-safety filtering; `bbchess.check.filter_moves` drops those that leave
  the king attacked.
- `bbchess.move_handler.handle_move` checks a move against a move list and
  plays it, including rook moves for castling and en passant captures.
- `bbchess.perft.count_nodes` counts leaf positions of the move tree. It does
  not switch the side to move between plies and shares one `GameFlags` across
  the search.
- `bbchess.console_log` turns bitboards, moves and flags into readable text.

## What it does not do

There is no computer opponent: both sides are moved by hand. Pawns always
promote to a queen. The halfmove clock and fullmove number are read from the
FEN but not advanced, and there is no stalemate, repetition or fifty-move
detection.