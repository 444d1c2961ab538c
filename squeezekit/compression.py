"""Dispatch compression and decompression to the chosen algorithm."""

from __future__ import annotations

from typing import Callable

from . import huffman, lz77, lzw, pipeline, rle
from .common import Algorithm, CompressionError, ExecutionMode, UnsupportedModeError

_Codec = Callable[[bytes], bytes]

# Algorithms with an accelerated variant share its stream format with the
# CPU implementation, so both modes map onto the same codec here.
_COMPRESSORS: dict[Algorithm, dict[ExecutionMode, _Codec]] = {
    Algorithm.RLE: {ExecutionMode.CPU: rle.compress, ExecutionMode.CUDA: rle.compress},
    Algorithm.LZ77: {ExecutionMode.CPU: lz77.compress},
    Algorithm.LZW: {ExecutionMode.CPU: lzw.compress},
    Algorithm.HUFFMAN: {
        ExecutionMode.CPU: huffman.compress,
        ExecutionMode.CUDA: huffman.compress,
    },
}

_DECOMPRESSORS: dict[Algorithm, dict[ExecutionMode, _Codec]] = {
    Algorithm.RLE: {
        ExecutionMode.CPU: rle.decompress,
        ExecutionMode.CUDA: rle.decompress,
    },
    Algorithm.LZ77: {ExecutionMode.CPU: lz77.decompress},
    Algorithm.LZW: {ExecutionMode.CPU: lzw.decompress},
    Algorithm.HUFFMAN: {
        ExecutionMode.CPU: huffman.decompress,
        ExecutionMode.CUDA: huffman.decompress,
    },
}


def _resolve(algorithm, mode) -> tuple[Algorithm, ExecutionMode]:
    try:
        algo = Algorithm(algorithm)
    except ValueError as exc:
        raise CompressionError(f"unsupported algorithm: {algorithm!r}") from exc
    try:
        exec_mode = ExecutionMode(mode)
    except ValueError as exc:
        raise UnsupportedModeError(f"unknown execution mode: {mode!r}") from exc
    return algo, exec_mode


def _select(table, algo: Algorithm, mode: ExecutionMode) -> _Codec:
    codec = table[algo].get(mode)
    if codec is None:
        raise UnsupportedModeError(
            f"{algo.value} does not support {mode.value} execution"
        )
    return codec


def compress_data(data: bytes, algorithm, mode=ExecutionMode.CPU) -> bytes:
    """Compress ``data`` with ``algorithm`` in execution ``mode``."""
    algo, exec_mode = _resolve(algorithm, mode)
    if algo is Algorithm.BWT_RLE_HUFFMAN:
        return pipeline.compress(data, exec_mode)
    return _select(_COMPRESSORS, algo, exec_mode)(data)


def decompress_data(data: bytes, algorithm, mode=ExecutionMode.CPU) -> bytes:
    """Decompress ``data`` that was produced with ``algorithm``."""
    algo, exec_mode = _resolve(algorithm, mode)
    if algo is Algorithm.BWT_RLE_HUFFMAN:
        return pipeline.decompress(data, exec_mode)
    return _select(_DECOMPRESSORS, algo, exec_mode)(data)