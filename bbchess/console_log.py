"""Text formatting of boards, moves and flags for console output."""


def square_name(square):
    """Algebraic name of a square, e.g. 0 -> 'a8'."""
    col, row = square % 8, square // 8
    return f"{chr(col + ord('a'))}{8 - row}"


def format_move(move):
    """Move as 'start, dest' square names."""
    return f"{square_name(move.start)}, {square_name(move.dest)}"


def format_bitboard(bb):
    """Board as eight rows of 0/1 digits followed by two blank lines."""
    rows = (
        "".join("1" if bb >> (rank * 8 + file) & 1 else "0" for file in range(8))
        for rank in range(8)
    )
    return "\n".join(rows) + "\n\n\n"


def format_bitboards(bitboards, occupancy_bitboards=None):
    """All piece boards, then the occupancy boards when given."""
    parts = ["bitboards:\n"]
    parts.extend(format_bitboard(bb) for bb in bitboards)
    if occupancy_bitboards:
        parts.append("occupancy_bitboards:\n")
        parts.extend(format_bitboard(bb) for bb in occupancy_bitboards)
    return "".join(parts)


def format_legal_moves(legal_moves):
    """Numbered list of moves, one per line."""
    return "".join(
        f"{number}: {format_move(move)}\n"
        for number, move in enumerate(legal_moves, start=1)
    )


def format_game_flags(flags):
    """Game flags, one per line."""
    en_passant = -1 if flags.en_passant is None else flags.en_passant
    return (
        f"current player, {flags.player}\n"
        f"castle rights, {flags.castle_rights}\n"
        f"enpassant, {en_passant}\n"
        f"halfmove clock, {flags.halfmove}\n"
        f"fullmove number, {flags.fullmove}\n"
    )