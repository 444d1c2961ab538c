import struct

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from squeezekit import huffman
from squeezekit.common import CompressionError

SAMPLE = b"AAAAABBBBBBBBBBBBBCCCCCCCCCCDDDDDDDDDDEEEEEEEE"
CUDA_SAMPLE = b"THIS IS A TEST STRING FOR HUFFMAN CUDA"


@pytest.mark.parametrize("text", [SAMPLE, CUDA_SAMPLE])
def test_roundtrip_source_cases(text):
    compressed = huffman.compress(text)
    assert huffman.decompress(compressed) == text


def test_header_holds_frequencies():
    compressed = huffman.compress(SAMPLE)
    freq = struct.unpack_from("<256I", compressed, 0)
    assert freq[ord("A")] == SAMPLE.count(b"A")
    assert freq[ord("B")] == SAMPLE.count(b"B")
    assert sum(freq) == len(SAMPLE)


def test_trailer_holds_original_size():
    compressed = huffman.compress(SAMPLE)
    assert int.from_bytes(compressed[-4:], "little") == len(SAMPLE)


def test_sample_compresses_below_raw_plus_header():
    compressed = huffman.compress(SAMPLE)
    assert len(compressed) < len(SAMPLE) + huffman.MIN_STREAM_SIZE


def test_two_symbol_worked_example():
    compressed = huffman.compress(b"AB")
    assert compressed[huffman.HEADER_SIZE:] == b"\x40\x02\x00\x00\x00"


def test_empty_input_raises():
    with pytest.raises(CompressionError):
        huffman.compress(b"")


def test_short_stream_raises():
    with pytest.raises(CompressionError):
        huffman.decompress(b"\x00" * 1027)


def test_empty_frequency_table_raises():
    with pytest.raises(CompressionError):
        huffman.decompress(b"\x00" * 1028)


@given(st.binary(min_size=2, max_size=300))
def test_roundtrip_property(data):
    assume(len(set(data)) >= 2)
    assert huffman.decompress(huffman.compress(data)) == data