# squeezekit

A small toolkit of classic lossless compression algorithms for byte data,
written in pure Python with no dependencies:

- **RLE** (`squeezekit.rle`): `(byte, count)` pairs, runs capped at 255
- **LZ77** (`squeezekit.lz77`): 4-byte tokens (big-endian 16-bit offset,
  match length, next byte) over a 4096-byte window, matches of up to 15 bytes
- **LZW** (`squeezekit.lzw`): 16-bit little-endian codes, dictionary of up to
  4096 entries
- **Huffman** (`squeezekit.huffman`): a 1024-byte table of 256 little-endian
  32-bit frequencies, the code bits packed most significant bit first, then the
  original length as a little-endian 32-bit value
- **BWT** (`squeezekit.bwt`): the Burrows–Wheeler transform and its inverse
- **BWT+RLE+Huffman** (`squeezekit.pipeline`): BWT, then RLE, then Huffman,
  with the BWT primary index stored as four little-endian bytes in front of
  the RLE stream

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

Each algorithm module has `compress(data)` and `decompress(data)` working on
`bytes`; `bwt` has `transform(data)` and `inverse(data, primary_index)`:

```python
from squeezekit import rle, bwt

packed = rle.compress(b"AAABBBCCCCDDDEEEEEEEE")
assert rle.decompress(packed) == b"AAABBBCCCCDDDEEEEEEEE"

last_column, primary_index = bwt.transform(b"banana_bandana")
assert bwt.inverse(last_column, primary_index) == b"banana_bandana"
```

To choose the algorithm at run time, use the dispatcher. The algorithm and
mode may be given as enum members or as their string values (`"rle"`,
`"lz77"`, `"lzw"`, `"huffman"`, `"bwt-rle-huffman"`; `"cpu"`, `"cuda"`):

```python
from squeezekit.common import Algorithm, ExecutionMode
from squeezekit.compression import compress_data, decompress_data

data = b"TOBEORNOTTOBEORTOBEORNOT"
packed = compress_data(data, Algorithm.LZW, ExecutionMode.CPU)
assert decompress_data(packed, Algorithm.LZW, ExecutionMode.CPU) == data
```

### Errors

Failures raise `squeezekit.common.CompressionError` (a `ValueError`), for
example:

- `bwt.transform` and the pipeline on empty input
- `huffman.compress` on empty input, and `huffman.decompress` on a stream
  shorter than 1028 bytes or whose bits do not follow the tree
- `lz77.decompress` on a back-reference past the start of the output
- `lzw.decompress` on odd-length input or an unknown code
- an unknown algorithm name passed to the dispatcher

`squeezekit.common.UnsupportedModeError` (a subclass of `CompressionError`)
is raised for an unknown execution mode, and when LZ77 or LZW is asked for
`cuda` mode.

## Command line

```
squeezekit --algo huffman --compress --input notes.txt --output notes.huf
squeezekit --algo huffman --decompress --input notes.huf --output notes.txt
squeezekit --algo bwt-rle-huffman --benchmark --input notes.txt
```

| Option | Meaning |
| --- | --- |
| `--algo <name>` | `rle`, `lz77`, `lzw`, `huffman` or `bwt-rle-huffman` (default `rle`) |
| `--mode <type>` | `cpu` or `cuda` (default `cpu`) |
| `--compress` | compress the input (the default) |
| `--decompress` | decompress the input |
| `--input <file>` | input file (default `data/test.txt`, or `data/output.bin` when decompressing) |
| `--output <file>` | output file (default `data/output.bin`, or `data/restored.txt` when decompressing) |
| `--benchmark` | compress and decompress the input, report sizes, times and whether the round trip matched; nothing is written |
| `--help` | show the help text |

Input files are read up to 10 MB; anything beyond that is ignored.
Unrecognised arguments are ignored. The command exits with status 0 on
success and 1 on an unknown algorithm or mode, an unreadable input, an
unwritable output, a compression error, or a failed benchmark round trip.

## What it does not do

There is no GPU acceleration. The `cuda` mode is accepted for RLE, Huffman
and BWT+RLE+Huffman, but runs the same Python code as `cpu` and produces the
same streams; LZ77 and LZW reject it. The formats carry no magic number or
algorithm tag, so the algorithm used to compress a file must be given again
to decompress it.