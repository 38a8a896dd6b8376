import pytest

from bbchess.bitboards import count_set_bits
from bbchess.console_log import square_name
from bbchess.fen import (
    BLACK,
    WHITE,
    GameFlags,
    load_fen,
    parse_castle_rights,
    piece_index,
    square_from_string,
)

SECOND_FEN = "rn2k1r1/ppp1pp1p/3p2p1/5bn1/P7/2N2B2/1PPPPP2/2BNK1RR w kq - 4 11"


def test_piece_index_cases():
    assert piece_index("p") == 0
    assert piece_index("k") == 5
    assert piece_index("P") == 6
    assert piece_index("K") == 11
    for letter in "pnbrqk":
        assert piece_index(letter.upper()) == piece_index(letter) + 6


def test_piece_index_rejects_other_letters():
    with pytest.raises(ValueError):
        piece_index("x")


def test_parse_castle_rights_bits():
    assert parse_castle_rights("K") == 1 << 3
    assert parse_castle_rights("q") == 1 << 0
    assert parse_castle_rights("KQkq") == (
        parse_castle_rights("K") | parse_castle_rights("Q")
        | parse_castle_rights("k") | parse_castle_rights("q")
    )
    assert parse_castle_rights("") == 0


def test_square_from_string_round_trip():
    for sq in range(64):
        assert square_from_string(square_name(sq)) == sq


def test_square_from_string_corners_and_dash():
    assert square_from_string("a8") == 0
    assert square_from_string("h1") == 63
    assert square_from_string("-") is None


def test_square_from_string_invalid():
    with pytest.raises(ValueError):
        square_from_string("z9")


def test_start_position():
    bitboards, flags = load_fen()
    assert len(bitboards) == 12
    assert flags.player == WHITE
    assert flags.castle_rights == parse_castle_rights("KQkq")
    assert flags.en_passant is None
    assert (flags.halfmove, flags.fullmove) == (0, 1)
    assert bitboards[11] == 1 << 60
    assert bitboards[5] == 1 << 4
    assert sum(count_set_bits(bb) for bb in bitboards) == 32


def test_second_position_flags():
    bitboards, flags = load_fen(SECOND_FEN)
    assert flags.player == WHITE
    assert flags.castle_rights == parse_castle_rights("kq")
    assert flags.en_passant is None
    assert (flags.halfmove, flags.fullmove) == (4, 11)
    assert bitboards[11] == 1 << square_from_string("e1")


def test_black_to_move_and_en_passant():
    _, flags = load_fen("8/8/8/8/4P3/8/8/8 b - e3 0 1")
    assert flags.player == BLACK
    assert flags.castle_rights == 0
    assert flags.en_passant == square_from_string("e3")


def test_flags_copy_is_independent():
    flags = GameFlags(player=WHITE, castle_rights=15)
    other = flags.copy()
    other.castle_rights = 0
    assert flags.castle_rights == 15
    assert other.player == WHITE