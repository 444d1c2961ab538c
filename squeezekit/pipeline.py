"""BWT followed by RLE followed by Huffman coding.

Before Huffman coding, the RLE stream is prefixed with the BWT primary
index as four little-endian bytes.
"""

from __future__ import annotations

from . import bwt, huffman, rle
from .common import CompressionError, ExecutionMode

INDEX_SIZE = 4


def compress(data: bytes, mode: ExecutionMode = ExecutionMode.CPU) -> bytes:
    """Compress ``data`` through BWT, RLE and Huffman coding.

    Both execution modes produce the same stream.
    """
    ExecutionMode(mode)
    try:
        last_column, primary_index = bwt.transform(data)
    except CompressionError as exc:
        raise CompressionError(f"BWT stage failed: {exc}") from exc
    runs = rle.compress(last_column)
    prefixed = (primary_index & 0xFFFFFFFF).to_bytes(INDEX_SIZE, "little") + runs
    return huffman.compress(prefixed)


def decompress(data: bytes, mode: ExecutionMode = ExecutionMode.CPU) -> bytes:
    """Reverse :func:`compress`; raises CompressionError on a damaged stream."""
    ExecutionMode(mode)
    try:
        decoded = huffman.decompress(data)
    except CompressionError as exc:
        raise CompressionError(f"Huffman stage failed: {exc}") from exc
    if len(decoded) < INDEX_SIZE:
        raise CompressionError("stream is missing the BWT primary index")
    primary_index = int.from_bytes(decoded[:INDEX_SIZE], "little")
    last_column = rle.decompress(decoded[INDEX_SIZE:])
    return bwt.inverse(last_column, primary_index)