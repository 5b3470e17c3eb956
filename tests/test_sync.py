import random

import pytest

from zsinflate.sync import sync_search

MARKER = b"\x00\x00\xff\xff"


def test_finds_marker_at_start():
    assert sync_search(0, MARKER + b"tail") == (4, len(MARKER))


def test_not_found_examines_everything():
    data = b"abc\x01\x02"
    got, examined = sync_search(0, data)
    assert got < 4
    assert examined == len(data)


def test_marker_split_across_calls():
    got, examined = sync_search(0, b"xy\x00\x00")
    assert (got, examined) == (2, 4)
    got, examined = sync_search(got, b"\xff\xffrest")
    assert (got, examined) == (4, 2)


def test_extra_zeros_before_marker():
    data = b"\x00\x00\x00" + b"\xff\xff"
    assert sync_search(0, data) == (4, len(data))


def test_nonzero_byte_resets_match():
    got, examined = sync_search(0, b"\x00\x00\xfe")
    assert got == 0
    assert examined == 3


def test_already_found_examines_nothing():
    assert sync_search(4, b"anything") == (4, 0)


@pytest.mark.parametrize("have", [-1, 5])
def test_rejects_bad_match_count(have):
    with pytest.raises(ValueError):
        sync_search(have, b"")


def test_found_position_matches_first_occurrence():
    rng = random.Random(1234)
    for _ in range(300):
        data = bytes(rng.choice((0, 0, 0xFF, 0xFF, 1, 0x7F)) for _ in range(rng.randrange(1, 40)))
        got, examined = sync_search(0, data)
        position = data.find(MARKER)
        if position < 0:
            assert got < 4
            assert examined == len(data)
        else:
            assert got == 4
            assert examined == position + len(MARKER)