"""LZW with a dictionary of at most 4096 entries and 16-bit little-endian codes."""

from __future__ import annotations

from .common import CompressionError

MAX_DICT_SIZE = 4096


def compress(data: bytes) -> bytes:
    """Encode ``data`` as a sequence of 16-bit little-endian LZW codes."""
    if not data:
        return b""
    table = {bytes((i,)): i for i in range(256)}
    out = bytearray()
    word = data[:1]
    for byte in data[1:]:
        candidate = word + bytes((byte,))
        if candidate in table:
            word = candidate
            continue
        out += table[word].to_bytes(2, "little")
        if len(table) < MAX_DICT_SIZE:
            table[candidate] = len(table)
        word = bytes((byte,))
    out += table[word].to_bytes(2, "little")
    return bytes(out)


def decompress(data: bytes) -> bytes:
    """Decode 16-bit little-endian LZW codes.

    Raises CompressionError for odd-length input or an unknown code.
    """
    if len(data) % 2 != 0:
        raise CompressionError("LZW stream length must be even")
    if not data:
        return b""
    codes = [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]
    entries = [bytes((i,)) for i in range(256)]

    first = codes[0]
    if first >= len(entries):
        raise CompressionError(f"invalid first LZW code {first}")
    out = bytearray(entries[first])
    previous = entries[first]

    for code in codes[1:]:
        if code < len(entries):
            entry = entries[code]
        elif code == len(entries):
            entry = previous + previous[:1]
        else:
            raise CompressionError(f"invalid LZW code {code}")
        out += entry
        if len(entries) < MAX_DICT_SIZE:
            entries.append(previous + entry[:1])
        previous = entry
    return bytes(out)