"""LZ77 with a 4096-byte window and matches of up to 15 bytes.

Each token is four bytes: a big-endian 16-bit offset, a match length and
the literal byte that follows the match.
"""

from __future__ import annotations

from .common import CompressionError

WINDOW_SIZE = 4096
LOOKAHEAD_SIZE = 15


def _longest_match(data: bytes, pos: int) -> tuple[int, int]:
    """Return (offset, length) of the earliest longest match before ``pos``."""
    best_offset = 0
    best_length = 0
    size = len(data)
    for start in range(max(0, pos - WINDOW_SIZE), pos):
        limit = min(LOOKAHEAD_SIZE, pos - start, size - pos)
        length = 0
        while length < limit and data[start + length] == data[pos + length]:
            length += 1
        if length > best_length:
            best_length = length
            best_offset = pos - start
    return best_offset, best_length


def compress(data: bytes) -> bytes:
    """Encode ``data`` as a sequence of four-byte LZ77 tokens."""
    out = bytearray()
    pos = 0
    size = len(data)
    while pos < size:
        offset, length = _longest_match(data, pos)
        if pos + length >= size:
            offset, length = 0, 0
        out += offset.to_bytes(2, "big")
        out.append(length)
        out.append(data[pos + length])
        pos += length + 1
    return bytes(out)


def decompress(data: bytes) -> bytes:
    """Decode four-byte LZ77 tokens; an incomplete trailing token is ignored.

    Raises CompressionError when a token refers back past the start of output.
    """
    out = bytearray()
    for start in range(0, len(data) - 3, 4):
        offset = int.from_bytes(data[start:start + 2], "big")
        length = data[start + 2]
        symbol = data[start + 3]
        if offset > 0:
            if len(out) < offset:
                raise CompressionError(
                    f"back-reference offset {offset} exceeds output of {len(out)} bytes"
                )
            for _ in range(length):
                out.append(out[-offset])
        out.append(symbol)
    return bytes(out)