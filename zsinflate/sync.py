"""Search for the empty stored block marker that a full flush leaves behind."""

from __future__ import annotations

_PATTERN_LENGTH = 4


def sync_search(have: int, buf: bytes) -> tuple[int, int]:
    """Scan ``buf`` for the byte pattern 00 00 ff ff.

    ``have`` is how many pattern bytes were already matched (0 to 4).
    Returns the new match count and the number of bytes examined.  When the
    count reaches four the pattern was found and the bytes examined end with
    its last byte; otherwise all of ``buf`` was examined.
    """
    if not 0 <= have <= _PATTERN_LENGTH:
        raise ValueError(f"match count must be between 0 and 4, not {have}")
    got = have
    examined = 0
    for byte in buf:
        if got >= _PATTERN_LENGTH:
            break
        if byte == (0 if got < 2 else 0xFF):
            got += 1
        elif byte:
            got = 0
        else:
            got = _PATTERN_LENGTH - got
        examined += 1
    return got, examined