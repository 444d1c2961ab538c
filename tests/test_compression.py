import pytest
from hypothesis import given
from hypothesis import strategies as st

from squeezekit import huffman, lz77, lzw, rle
from squeezekit.common import (
    Algorithm,
    CompressionError,
    ExecutionMode,
    UnsupportedModeError,
)
from squeezekit.compression import compress_data, decompress_data

SAMPLE = b"TOBEORNOTTOBEORTOBEORNOT AAABBBCCCCDDDEEEEEEEE"


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_roundtrip_cpu(algorithm):
    compressed = compress_data(SAMPLE, algorithm, ExecutionMode.CPU)
    assert decompress_data(compressed, algorithm, ExecutionMode.CPU) == SAMPLE


@pytest.mark.parametrize(
    "algorithm", [Algorithm.RLE, Algorithm.HUFFMAN, Algorithm.BWT_RLE_HUFFMAN]
)
def test_roundtrip_cuda(algorithm):
    compressed = compress_data(SAMPLE, algorithm, ExecutionMode.CUDA)
    assert decompress_data(compressed, algorithm, ExecutionMode.CUDA) == SAMPLE


@pytest.mark.parametrize("algorithm", [Algorithm.LZ77, Algorithm.LZW])
def test_cuda_unsupported(algorithm):
    with pytest.raises(UnsupportedModeError):
        compress_data(SAMPLE, algorithm, ExecutionMode.CUDA)
    with pytest.raises(UnsupportedModeError):
        decompress_data(b"\x00\x00", algorithm, ExecutionMode.CUDA)


@pytest.mark.parametrize(
    "algorithm, module",
    [
        (Algorithm.RLE, rle),
        (Algorithm.LZ77, lz77),
        (Algorithm.LZW, lzw),
        (Algorithm.HUFFMAN, huffman),
    ],
)
def test_dispatch_matches_module(algorithm, module):
    assert compress_data(SAMPLE, algorithm, ExecutionMode.CPU) == module.compress(SAMPLE)


def test_accepts_names():
    compressed = compress_data(SAMPLE, "rle", "cpu")
    assert compressed == rle.compress(SAMPLE)
    assert decompress_data(compressed, "rle", "cpu") == SAMPLE


def test_unknown_algorithm_raises():
    with pytest.raises(CompressionError):
        compress_data(SAMPLE, "zip", ExecutionMode.CPU)


def test_unknown_mode_raises():
    with pytest.raises(UnsupportedModeError):
        decompress_data(SAMPLE, Algorithm.RLE, "gpu")


def test_errors_propagate():
    with pytest.raises(CompressionError):
        decompress_data(b"\x00\x00\x00", Algorithm.LZW, ExecutionMode.CPU)


@given(st.binary(min_size=1, max_size=150))
def test_roundtrip_property(data):
    for algorithm in (Algorithm.RLE, Algorithm.LZ77, Algorithm.LZW, Algorithm.BWT_RLE_HUFFMAN):
        compressed = compress_data(data, algorithm, ExecutionMode.CPU)
        assert decompress_data(compressed, algorithm, ExecutionMode.CPU) == data