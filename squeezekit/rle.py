"""Run-length encoding as (value, count) byte pairs, runs capped at 255."""

from __future__ import annotations

from itertools import groupby

MAX_RUN = 255


def compress(data: bytes) -> bytes:
    """Encode ``data`` as a sequence of (byte, run length) pairs."""
    out = bytearray()
    for value, group in groupby(data):
        run = sum(1 for _ in group)
        while run > 0:
            chunk = min(run, MAX_RUN)
            out += bytes((value, chunk))
            run -= chunk
    return bytes(out)


def decompress(data: bytes) -> bytes:
    """Expand (byte, run length) pairs; a trailing odd byte is ignored."""
    out = bytearray()
    pairs = zip(data[0::2], data[1::2])
    for value, count in pairs:
        out += bytes((value,)) * count
    return bytes(out)