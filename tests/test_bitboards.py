from bbchess.bitboards import (
    bitboard_index,
    count_set_bits,
    highest_square,
    iter_squares,
    occupancy,
)
from bbchess.fen import load_fen


def test_count_set_bits_matches_iteration():
    for bb in (0, 1, 0xFF, (1 << 64) - 1, 0x8000000000000001, 0x1234_5678_9ABC):
        assert count_set_bits(bb) == len(list(iter_squares(bb)))


def test_count_set_bits_full_board():
    assert count_set_bits((1 << 64) - 1) == 64


def test_iter_squares_round_trip_and_order():
    bb = 0x8100_0000_0000_1024
    squares = list(iter_squares(bb))
    assert squares == sorted(squares)
    total = 0
    for sq in squares:
        total |= 1 << sq
    assert total == bb


def test_iter_squares_empty():
    assert list(iter_squares(0)) == []


def test_highest_square():
    assert highest_square(0) == -1
    assert highest_square(1) == 0
    assert highest_square(1 << 63) == 63
    assert highest_square((1 << 60) | 1) == 60


def test_occupancy_start_position():
    bitboards, _ = load_fen()
    black, white, both = occupancy(bitboards)
    assert black & white == 0
    assert both == black | white
    assert count_set_bits(black) == count_set_bits(white) == 16


def test_bitboard_index_start_position():
    bitboards, _ = load_fen()
    assert bitboard_index(bitboards, 60) == 11
    assert bitboard_index(bitboards, 4) == 5
    assert bitboard_index(bitboards, 30) is None