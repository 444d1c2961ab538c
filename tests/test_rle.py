import pytest
from hypothesis import given, strategies as st

from squeezekit import rle


@pytest.mark.parametrize(
    "text",
    [b"AAABBBCCCCDDDEEEEEEEE", b"AAAAABBBBBCCCCDDDEEFFGGG"],
)
def test_roundtrip_source_cases(text):
    packed = rle.compress(text)
    assert rle.decompress(packed) == text


def test_compressed_layout():
    assert rle.compress(b"AAABBBCCCCDDDEEEEEEEE") == b"A\x03B\x03C\x04D\x03E\x08"


def test_runs_are_capped_at_255():
    data = b"x" * 300
    packed = rle.compress(data)
    assert packed == b"x\xffx\x2d"
    assert rle.decompress(packed) == data


def test_empty_input():
    assert rle.compress(b"") == b""
    assert rle.decompress(b"") == b""


def test_trailing_odd_byte_is_ignored():
    assert rle.decompress(b"A\x02B") == b"AA"


def test_zero_count_pair_produces_nothing():
    assert rle.decompress(b"A\x00B\x01") == b"B"


@given(st.binary(max_size=600))
def test_roundtrip_property(data):
    assert rle.decompress(rle.compress(data)) == data


@given(st.binary(max_size=200))
def test_compressed_length_is_even(data):
    assert len(rle.compress(data)) % 2 == 0