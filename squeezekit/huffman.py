"""Static Huffman coding.

The stream is a table of 256 little-endian 32-bit symbol frequencies, the
code bits packed most significant bit first, and a little-endian 32-bit
count of the original bytes.
"""

from __future__ import annotations

import struct
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from .common import CompressionError

_FREQ_FORMAT = "<256I"
HEADER_SIZE = struct.calcsize(_FREQ_FORMAT)
TRAILER_SIZE = 4
MIN_STREAM_SIZE = HEADER_SIZE + TRAILER_SIZE


@dataclass
class _Node:
    freq: int
    value: int = 0
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """Binary min-heap on node frequency with a fixed tie-breaking order.

    The order in which equal frequencies leave the heap decides the shape
    of the tree, so encoder and decoder must both use this heap.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def push(self, node: _Node) -> None:
        nodes = self._nodes
        nodes.append(node)
        i = len(nodes) - 1
        while i > 0 and nodes[(i - 1) // 2].freq > node.freq:
            nodes[i] = nodes[(i - 1) // 2]
            i = (i - 1) // 2
        nodes[i] = node

    def pop(self) -> _Node:
        nodes = self._nodes
        result = nodes[0]
        last = nodes.pop()
        if not nodes:
            return result
        size = len(nodes)
        i = 0
        while i * 2 + 1 < size:
            child = i * 2 + 1
            if child + 1 < size and nodes[child + 1].freq < nodes[child].freq:
                child += 1
            if last.freq <= nodes[child].freq:
                break
            nodes[i] = nodes[child]
            i = child
        nodes[i] = last
        return result


def _build_tree(freq: list[int]) -> Optional[_Node]:
    heap = _MinHeap()
    for value, count in enumerate(freq):
        if count:
            heap.push(_Node(freq=count, value=value))
    while len(heap) > 1:
        a = heap.pop()
        b = heap.pop()
        heap.push(_Node(freq=a.freq + b.freq, left=a, right=b))
    return heap.pop() if len(heap) else None


def _code_table(root: _Node) -> dict[int, str]:
    table: dict[int, str] = {}
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            table[node.value] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return table


def compress(data: bytes) -> bytes:
    """Huffman-encode ``data``; raises CompressionError for empty input."""
    counts = Counter(data)
    freq = [counts.get(value, 0) for value in range(256)]
    root = _build_tree(freq)
    if root is None:
        raise CompressionError("cannot build a Huffman tree from empty input")

    table = _code_table(root)
    bits = "".join(table[byte] for byte in data)
    padding = -len(bits) % 8
    bits += "0" * padding
    payload = int(bits, 2).to_bytes(len(bits) // 8, "big") if bits else b""

    return (
        struct.pack(_FREQ_FORMAT, *freq)
        + payload
        + (len(data) & 0xFFFFFFFF).to_bytes(4, "little")
    )


def decompress(data: bytes) -> bytes:
    """Decode a Huffman stream produced by :func:`compress`.

    Raises CompressionError when the stream is too short, its frequency
    table is empty, or its bits do not follow the tree.
    """
    if len(data) < MIN_STREAM_SIZE:
        raise CompressionError(
            f"Huffman stream must be at least {MIN_STREAM_SIZE} bytes"
        )
    freq = list(struct.unpack_from(_FREQ_FORMAT, data, 0))
    length_pos = len(data) - TRAILER_SIZE
    original_size = int.from_bytes(data[length_pos:], "little")

    root = _build_tree(freq)
    if root is None:
        raise CompressionError("Huffman frequency table is empty")

    out = bytearray()
    node = root
    for byte in data[HEADER_SIZE:length_pos]:
        for shift in range(7, -1, -1):
            child = node.right if (byte >> shift) & 1 else node.left
            if child is None:
                raise CompressionError("Huffman bit stream does not match the tree")
            node = child
            if node.is_leaf:
                out.append(node.value)
                node = root
                if len(out) == original_size:
                    return bytes(out)
    return bytes(out)