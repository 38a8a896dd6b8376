"""Bitboard chess: FEN loading, move generation, check detection and a pygame board."""

__version__ = "0.1.0"