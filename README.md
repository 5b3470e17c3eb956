# zsinflate

Pure-Python building blocks for decoding DEFLATE data: canonical Huffman
decoding tables, a least-significant-bit-first bit reader, a circular output
history for back references, and a search for the `00 00 FF FF` marker that
a full flush leaves in a stream.

No third-party libraries are needed at run time.

## Installation

```
pip install .
```

## Huffman tables — `zsinflate.huffman`

`build_table(kind, lens, bits)` builds lookup tables for the code lengths in
`lens`. `kind` is a `CodeType` (`CODES` for the code-length code, `LENS` for
literal/length codes, `DISTS` for distance codes) and `bits` is the requested
number of root index bits. It returns the table (root table followed by any
sub-tables) as a list of `Code` entries, and the root bits actually used,
which is clamped between the shortest and longest code length.

Each `Code` has `op`, `bits` and `val`: `op` is 0 for a literal, a small
number for a link to a sub-table, `16 + extra bits` for a length or distance
base, 96 for end of block and 64 for an invalid code.

`TableError` (a `ValueError`) is raised for lengths outside 0..15,
over-subscribed codes, incomplete codes where they are not allowed, and
tables that would not fit in the available space. A set of lengths that are
all zero gives a two-entry table of invalid codes.

```python
from zsinflate.huffman import CodeType, build_table, fixed_tables

table, root = build_table(CodeType.CODES, [1, 1], 1)
# table == [Code(op=0, bits=1, val=0), Code(op=0, bits=1, val=1)], root == 1

lencode, lenbits, distcode, distbits = fixed_tables()   # lenbits 9, distbits 5
```

`fixed_tables()` returns the tables for the fixed code of the format; the
result is computed once and cached.

## Bit reader — `zsinflate.bits`

`BitReader` accumulates input bits starting from the least significant bit of
each byte. Input may be supplied at construction and later with `feed`.

- `need(n)` pulls bytes until at least `n` bits are held, returning `False`
  if input runs out first; `pull_byte()` pulls a single byte.
- `peek(n)` returns the low `n` held bits; `drop(n)` removes them and raises
  `ValueError` if fewer are held.
- `align()` discards bits up to the next byte boundary; `clear()` empties the
  accumulator.
- `take_bytes(n)` takes up to `n` raw input bytes without going through the
  accumulator.
- `hold`, `bits`, `consumed` and `available` expose the accumulator, its bit
  count, the number of input bytes taken and the bytes still waiting.

```python
from zsinflate.bits import BitReader

reader = BitReader(b"\xa5")
reader.need(3)      # True
reader.peek(3)      # 5
reader.drop(3)
reader.peek(5)      # 20
```

## Sliding window — `zsinflate.window`

`SlidingWindow(wbits=15)` keeps the last `2 ** wbits` bytes of output;
`wbits` must be between 8 and 15, otherwise `ValueError` is raised.

- `update(data)` records newly written output.
- `set_dictionary(dictionary)` loads a preset dictionary, keeping only its
  tail if it is longer than the window.
- `fetch(distance, length)` returns up to `length` bytes beginning `distance`
  bytes back, never more than `distance` bytes; a distance outside the held
  history raises `ValueError`.
- `history` gives the held bytes oldest first; `size`, `have` and `write`
  describe the buffer.

```python
from zsinflate.window import SlidingWindow

window = SlidingWindow(8)
window.update(b"abcdef")
window.fetch(3, 5)   # b"def"
```

## Flush-marker search — `zsinflate.sync`

`sync_search(have, buf)` scans `buf` for `00 00 FF FF`, continuing from
`have` pattern bytes already matched. It returns the new match count and the
number of bytes examined; a count of 4 means the marker was found and ends at
the last examined byte.

```python
from zsinflate.sync import sync_search

sync_search(0, b"\x01\x00\x00\xff\xff\x02")   # (4, 5)
```

## What this package does not do

There is no complete decompressor here: no function that takes a compressed
stream and returns its decoded bytes, no zlib or gzip header and trailer
handling, and no checksum verification. The modules above are the pieces
such a decoder is built from, and assembling them is left to the caller.

## Tests

```
pip install .[test]
pytest
```