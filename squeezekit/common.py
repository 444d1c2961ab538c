"""Shared enumerations and exceptions for the compression algorithms."""

from __future__ import annotations

from enum import Enum


class CompressionError(ValueError):
    """Raised when data cannot be compressed or decompressed."""


class UnsupportedModeError(CompressionError):
    """Raised when an algorithm does not support the requested execution mode."""


class Algorithm(Enum):
    """Available compression algorithms."""

    RLE = "rle"
    LZ77 = "lz77"
    LZW = "lzw"
    HUFFMAN = "huffman"
    BWT_RLE_HUFFMAN = "bwt-rle-huffman"


class ExecutionMode(Enum):
    """Where the work is meant to run."""

    CPU = "cpu"
    CUDA = "cuda"