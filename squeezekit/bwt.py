"""Burrows-Wheeler transform over cyclic rotations."""

from __future__ import annotations

from .common import CompressionError


def _sorted_rotations(data: bytes) -> list[int]:
    """Start indices of the cyclic rotations of ``data`` in sorted order."""
    size = len(data)
    rank = list(data)
    order = sorted(range(size), key=rank.__getitem__)
    step = 1
    while step < size:
        keys = [(r, rank[(i + step) % size]) for i, r in enumerate(rank)]
        order = sorted(range(size), key=keys.__getitem__)
        new_rank = [0] * size
        current = -1
        previous = None
        for index in order:
            if keys[index] != previous:
                current += 1
                previous = keys[index]
            new_rank[index] = current
        rank = new_rank
        if current == size - 1:
            break
        step *= 2
    return order


def transform(data: bytes) -> tuple[bytes, int]:
    """Return the last column of the sorted rotations and the primary index."""
    if not data:
        raise CompressionError("BWT input must not be empty")
    order = _sorted_rotations(data)
    last_column = bytes(data[start - 1] for start in order)
    return last_column, order.index(0)


def inverse(data: bytes, primary_index: int) -> bytes:
    """Rebuild the original data from a BWT last column and its primary index."""
    size = len(data)
    if size == 0 or not 0 <= primary_index < size:
        raise CompressionError("invalid BWT input or primary index")

    counts = [0] * 256
    for byte in data:
        counts[byte] += 1
    totals = [0] * 256
    running = 0
    for value, count in enumerate(counts):
        totals[value] = running
        running += count

    following = []
    for byte in data:
        following.append(totals[byte])
        totals[byte] += 1

    out = bytearray(size)
    pos = primary_index
    for target in range(size - 1, -1, -1):
        out[target] = data[pos]
        pos = following[pos]
    return bytes(out)