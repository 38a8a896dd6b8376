import pytest

from bbchess.bitboards import bitboard_index, count_set_bits, occupancy
from bbchess.fen import load_fen, square_from_string
from bbchess.move import Move
from bbchess.move_handler import (
    apply_move,
    handle_double_pawn_push,
    handle_enpassant,
    handle_move,
    is_double_pawn_push,
    is_pawn_promotion,
)
from bbchess.movegen import generate_legal_moves

PROMO_FEN = "8/P7/8/8/8/8/8/8 w - - 0 1"
EP_FEN = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"


def _total(bitboards):
    return sum(count_set_bits(bb) for bb in bitboards)


def test_pawn_promotion_detected():
    bitboards, _ = load_fen(PROMO_FEN)
    a7 = square_from_string("a7")
    assert is_pawn_promotion(bitboards, a7, square_from_string("a8")) is True
    start, _ = load_fen()
    assert is_pawn_promotion(start, 57, 0) is False


def test_apply_move_promotes_to_queen():
    bitboards, _ = load_fen(PROMO_FEN)
    a7, a8 = square_from_string("a7"), square_from_string("a8")
    apply_move(bitboards, a7, a8)
    assert bitboards[6] == 0
    assert bitboard_index(bitboards, a8) == 10


def test_apply_move_capture_removes_piece():
    bitboards, _ = load_fen()
    before = _total(bitboards)
    apply_move(bitboards, 57, 8)
    assert _total(bitboards) == before - 1
    assert bitboard_index(bitboards, 8) == 7
    assert bitboard_index(bitboards, 57) is None


def test_apply_move_from_empty_square_raises():
    bitboards, _ = load_fen()
    with pytest.raises(ValueError):
        apply_move(bitboards, 36, 28)


def test_double_pawn_push_detection():
    bitboards, _ = load_fen()
    assert is_double_pawn_push(bitboards, Move(52, 36)) is True
    assert is_double_pawn_push(bitboards, Move(52, 44)) is False
    assert is_double_pawn_push(bitboards, Move(57, 41)) is False


def test_handle_double_pawn_push_sets_square_behind():
    _, flags = load_fen()
    handle_double_pawn_push(Move(52, 36), flags)
    assert flags.en_passant == square_from_string("e3")
    flags.player = 0
    handle_double_pawn_push(Move(12, 28), flags)
    assert flags.en_passant == square_from_string("e6")


def test_handle_enpassant_without_square_raises():
    bitboards, flags = load_fen()
    with pytest.raises(ValueError):
        handle_enpassant(bitboards, flags)


def test_handle_move_double_push_then_normal_move():
    bitboards, flags = load_fen()
    moves = generate_legal_moves(1, bitboards, occupancy(bitboards), flags, 0)
    assert handle_move(bitboards, 52, 36, moves, flags) is True
    assert flags.en_passant == square_from_string("e3")
    assert bitboard_index(bitboards, 36) == 6
    assert handle_move(bitboards, 57, 42, moves, flags) is True
    assert flags.en_passant is None


def test_handle_move_rejects_illegal_move():
    bitboards, flags = load_fen()
    before = list(bitboards)
    moves = generate_legal_moves(1, bitboards, occupancy(bitboards), flags, 0)
    assert handle_move(bitboards, 52, 28, moves, flags) is False
    assert bitboards == before


def test_handle_move_without_square():
    bitboards, flags = load_fen()
    assert handle_move(bitboards, None, 36, [Move(52, 36)], flags) is False


def test_handle_move_en_passant_captures_pawn():
    bitboards, flags = load_fen(EP_FEN)
    moves = generate_legal_moves(1, bitboards, occupancy(bitboards), flags, 0)
    e5, d6, d5 = (square_from_string(s) for s in ("e5", "d6", "d5"))
    assert handle_move(bitboards, e5, d6, moves, flags) is True
    assert bitboard_index(bitboards, d5) is None
    assert bitboard_index(bitboards, d6) == 6
    assert bitboards[0] == 0


def test_handle_move_castling_moves_king_and_rook():
    bitboards, flags = load_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    moves = generate_legal_moves(1, bitboards, occupancy(bitboards), flags, 0)
    assert handle_move(bitboards, 60, 62, moves, flags) is True
    assert bitboard_index(bitboards, 62) == 11
    assert bitboard_index(bitboards, 61) == 9
    assert bitboard_index(bitboards, 63) is None
    assert flags.castle_rights == 3