"""Decoding tables for canonical Huffman codes as used by the deflate format."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

MAXBITS = 15
"""Longest code length the deflate format allows."""

ENOUGH = 2048
"""Space available for one set of length/literal and distance tables."""

MAXD = 592
"""Worst-case table space needed by a distance code."""

# Length codes 257..285: base lengths and operation bytes (16 + extra bits).
_LBASE = (
    3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17, 19, 23, 27, 31,
    35, 43, 51, 59, 67, 83, 99, 115, 131, 163, 195, 227, 258, 0, 0,
)
_LEXT = (
    16, 16, 16, 16, 16, 16, 16, 16, 17, 17, 17, 17, 18, 18, 18, 18,
    19, 19, 19, 19, 20, 20, 20, 20, 21, 21, 21, 21, 16, 202, 196,
)
# Distance codes 0..29: base distances and operation bytes.
_DBASE = (
    1, 2, 3, 4, 5, 7, 9, 13, 17, 25, 33, 49, 65, 97, 129, 193,
    257, 385, 513, 769, 1025, 1537, 2049, 3073, 4097, 6145,
    8193, 12289, 16385, 24577, 0, 0,
)
_DEXT = (
    16, 16, 16, 16, 17, 17, 18, 18, 19, 19, 20, 20, 21, 21, 22, 22,
    23, 23, 24, 24, 25, 25, 26, 26, 27, 27,
    28, 28, 29, 29, 64, 64,
)

OP_LITERAL = 0
OP_END_OF_BLOCK = 32 + 64
OP_INVALID = 64


@dataclass(frozen=True, slots=True)
class Code:
    """One decoding table entry.

    ``op`` is 0 for a literal, 0000tttt for a link to a sub-table of
    ``tttt`` index bits, 0001eeee for a length or distance base with
    ``eeee`` extra bits, 96 for end of block and 64 for an invalid code.
    ``bits`` is the number of bits this entry consumes and ``val`` is the
    literal, base value, or sub-table offset from the start of the table.
    """

    op: int
    bits: int
    val: int


class CodeType(enum.Enum):
    """Kind of code a table is built for."""

    CODES = 0
    LENS = 1
    DISTS = 2


class TableError(ValueError):
    """The code lengths do not describe a usable code."""


def _next_huff(huff: int, length: int) -> int:
    """Increment a ``length``-bit code whose bits are stored reversed."""
    incr = 1 << (length - 1)
    while huff & incr:
        incr >>= 1
    if incr:
        return (huff & (incr - 1)) + incr
    return 0


def build_table(kind: CodeType, lens: Sequence[int], bits: int) -> tuple[list[Code], int]:
    """Build decoding tables for the code lengths ``lens``.

    ``bits`` is the requested number of root table index bits.  Returns the
    table (root table followed by any sub-tables) and the root index bits
    actually used, which is clamped to the shortest and longest code lengths.
    Raises :class:`TableError` for over-subscribed or disallowed incomplete
    codes, and when the tables would not fit in the available space.
    """
    if any(not 0 <= length <= MAXBITS for length in lens):
        raise TableError("code length out of range")

    count = [0] * (MAXBITS + 1)
    for length in lens:
        count[length] += 1

    max_len = next((n for n in range(MAXBITS, 0, -1) if count[n]), 0)
    root = min(bits, max_len)
    if max_len == 0:
        # No symbols at all: a table that makes any decode fail.
        invalid = Code(OP_INVALID, 1, 0)
        return [invalid, invalid], 1
    min_len = next(n for n in range(1, MAXBITS + 1) if count[n])
    root = max(root, min_len)

    left = 1
    for length in range(1, MAXBITS + 1):
        left = (left << 1) - count[length]
        if left < 0:
            raise TableError("over-subscribed set of code lengths")
    if left > 0 and (kind is CodeType.CODES or max_len != 1):
        raise TableError("incomplete set of code lengths")

    # Symbols sorted by length, keeping symbol order within each length.
    work = sorted((sym for sym, length in enumerate(lens) if length), key=lambda s: lens[s])

    if kind is CodeType.CODES:
        base: Sequence[int] = ()
        extra: Sequence[int] = ()
        match = 20
    elif kind is CodeType.LENS:
        base, extra, match = _LBASE, _LEXT, 257
    else:
        base, extra, match = _DBASE, _DEXT, 0

    used = 1 << root
    if kind is CodeType.LENS and used >= ENOUGH - MAXD:
        raise TableError("not enough table space")

    table: list[Code] = [Code(OP_INVALID, 1, 0)] * used
    huff = 0
    sym = 0
    length = min_len
    nxt = 0
    curr = root
    drop = 0
    low = -1
    mask = used - 1

    while True:
        symbol = work[sym]
        if symbol + 1 < match:
            entry = Code(OP_LITERAL, length - drop, symbol)
        elif symbol >= match:
            entry = Code(extra[symbol - match], length - drop, base[symbol - match])
        else:
            entry = Code(OP_END_OF_BLOCK, length - drop, 0)

        incr = 1 << (length - drop)
        start = nxt + (huff >> drop)
        for fill in range((1 << curr) - incr, -1, -incr):
            table[start + fill] = entry

        huff = _next_huff(huff, length)

        sym += 1
        count[length] -= 1
        if count[length] == 0:
            if length == max_len:
                break
            length = lens[work[sym]]

        if length > root and (huff & mask) != low:
            if drop == 0:
                drop = root
            nxt += 1 << curr

            curr = length - drop
            left = 1 << curr
            while curr + drop < max_len:
                left -= count[curr + drop]
                if left <= 0:
                    break
                curr += 1
                left <<= 1

            used += 1 << curr
            if kind is CodeType.LENS and used >= ENOUGH - MAXD:
                raise TableError("not enough table space")
            table.extend([Code(OP_INVALID, 1, 0)] * (1 << curr))

            low = huff & mask
            table[low] = Code(curr, root, nxt)

    # Fill in the rest of the table for an incomplete code.
    invalid = Code(OP_INVALID, length - drop, 0)
    while huff != 0:
        if drop != 0 and (huff & mask) != low:
            drop = 0
            length = root
            nxt = 0
            curr = root
            invalid = Code(OP_INVALID, length, 0)
        table[nxt + (huff >> drop)] = invalid
        huff = _next_huff(huff, length)

    return table, root


@lru_cache(maxsize=1)
def fixed_tables() -> tuple[tuple[Code, ...], int, tuple[Code, ...], int]:
    """Return the fixed-code tables: (lencode, lenbits, distcode, distbits)."""
    lit_lens = [8] * 144 + [9] * 112 + [7] * 24 + [8] * 8
    lencode, lenbits = build_table(CodeType.LENS, lit_lens, 9)
    distcode, distbits = build_table(CodeType.DISTS, [5] * 32, 5)
    return tuple(lencode), lenbits, tuple(distcode), distbits