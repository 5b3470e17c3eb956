import pytest

from zsinflate.window import SlidingWindow


def test_small_update_kept_in_order():
    window = SlidingWindow(8)
    window.update(b"hello")
    window.update(b" world")
    assert window.history == b"hello world"
    assert window.have == len(b"hello world")


def test_window_size_from_bits():
    window = SlidingWindow(8)
    window.update(b"")
    assert window.size == 256
    assert window.have == 0


def test_wrapping_keeps_last_bytes():
    window = SlidingWindow(8)
    first = bytes(range(200))
    second = bytes(range(100, 200))
    window.update(first)
    window.update(second)
    assert window.history == (first + second)[-window.size :]
    assert window.have == window.size


def test_update_larger_than_window():
    window = SlidingWindow(8)
    data = bytes(i % 251 for i in range(1000))
    window.update(data)
    assert window.history == data[-window.size :]
    assert window.write == 0


def test_many_small_updates_match_concatenation():
    window = SlidingWindow(8)
    chunks = [bytes([i]) * (i % 17 + 1) for i in range(60)]
    for chunk in chunks:
        window.update(chunk)
    joined = b"".join(chunks)
    assert window.history == joined[-window.size :]


def test_fetch_returns_bytes_back_from_end():
    window = SlidingWindow(8)
    window.update(b"abcdef")
    assert window.fetch(3, 2) == b"de"
    assert window.fetch(6, 6) == b"abcdef"


def test_fetch_is_limited_by_distance():
    window = SlidingWindow(8)
    window.update(b"abcdef")
    assert window.fetch(2, 10) == b"ef"


def test_fetch_across_wrap():
    window = SlidingWindow(8)
    data = bytes(i % 256 for i in range(300))
    window.update(data)
    window.update(b"xyz")
    history = (data + b"xyz")[-window.size :]
    assert window.fetch(window.size, window.size) == history
    assert window.fetch(10, 4) == history[-10:-6]


@pytest.mark.parametrize("distance", [0, -1, 7])
def test_fetch_rejects_bad_distance(distance):
    window = SlidingWindow(8)
    window.update(b"abcdef")
    with pytest.raises(ValueError):
        window.fetch(distance, 1)


def test_fetch_before_any_output_fails():
    window = SlidingWindow(8)
    with pytest.raises(ValueError):
        window.fetch(1, 1)


def test_dictionary_shorter_than_window():
    window = SlidingWindow(8)
    window.set_dictionary(b"preset")
    assert window.history == b"preset"
    assert window.fetch(6, 3) == b"pre"


def test_dictionary_longer_than_window_keeps_tail():
    window = SlidingWindow(8)
    dictionary = bytes(i % 256 for i in range(400))
    window.set_dictionary(dictionary)
    assert window.have == window.size
    assert window.history == dictionary[-window.size :]


def test_output_after_dictionary_follows_it():
    window = SlidingWindow(8)
    window.set_dictionary(b"dict")
    window.update(b"out")
    assert window.fetch(3, 3) == b"out"
    assert window.fetch(window.have, window.have)[-3:] == b"out"


@pytest.mark.parametrize("wbits", [7, 16])
def test_rejects_window_bits_out_of_range(wbits):
    with pytest.raises(ValueError):
        SlidingWindow(wbits)