"""Helpers for working with 64-bit bitboards."""


def occupancy(bitboards):
    """Return (black, white, all) occupancy built from the twelve piece boards."""
    black = 0
    for bb in bitboards[:6]:
        black |= bb
    white = 0
    for bb in bitboards[6:12]:
        white |= bb
    return (black, white, black | white)


def count_set_bits(num):
    """Number of set bits in `num`."""
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


def bitboard_index(bitboards, square):
    """Index of the piece board holding `square`, or None if it is empty."""
    bit = 1 << square
    return next((i for i, bb in enumerate(bitboards[:12]) if bb & bit), None)


def iter_squares(bb):
    """Yield the set squares of `bb` from lowest to highest."""
    while bb:
        low = bb & -bb
        yield low.bit_length() - 1
        bb ^= low


def highest_square(bb):
    """Highest set square of `bb`, or -1 when it is empty."""
    return bb.bit_length() - 1