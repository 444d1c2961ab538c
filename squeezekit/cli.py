"""Command-line front end: compress, decompress or benchmark a file."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .common import Algorithm, CompressionError, ExecutionMode
from .compression import compress_data, decompress_data

MAX_FILE_SIZE = 10 * 1024 * 1024
PROG = "squeezekit"

DEFAULT_COMPRESS_INPUT = "data/test.txt"
DEFAULT_COMPRESS_OUTPUT = "data/output.bin"
DEFAULT_DECOMPRESS_INPUT = "data/output.bin"
DEFAULT_DECOMPRESS_OUTPUT = "data/restored.txt"

_HELP = """\
Compression Utility

Usage:
  {prog} [OPTIONS]

Options:
  --algo <name>        Compression algorithm [rle | lz77 | lzw | huffman | bwt-rle-huffman] (default: rle)
  --mode <type>        Execution mode [cpu | cuda] (default: cpu)
  --compress           Perform compression (default if --decompress is not specified)
  --decompress         Perform decompression (overrides --compress)
  --input <filename>   Input file (default: test.txt or output.bin)
  --output <filename>  Output file (default: output.bin or restored.txt)
  --benchmark          Measure time for compress + decompress, ignore other mode flags
  --help               Show this help message

Examples:
  {prog} --algo rle --compress --input data/a.txt --output a.rle
  {prog} --algo rle --decompress --input a.rle --output a.txt"""

_VALUE_OPTIONS = {
    "--algo": "algo",
    "--mode": "mode",
    "--input": "input_file",
    "--output": "output_file",
}


def parse_algorithm(name: str) -> Algorithm:
    """Map a command-line algorithm name to an :class:`Algorithm`."""
    try:
        return Algorithm(name)
    except ValueError:
        raise ValueError(f"unknown algorithm: {name!r}") from None


def parse_mode(name: str) -> ExecutionMode:
    """Map a command-line mode name to an :class:`ExecutionMode`."""
    try:
        return ExecutionMode(name)
    except ValueError:
        raise ValueError(f"unknown mode: {name!r}") from None


@dataclass
class _Options:
    algo: str = "rle"
    mode: str = "cpu"
    input_file: Optional[str] = None
    output_file: Optional[str] = None
    compress: bool = True
    decompress: bool = False
    benchmark: bool = False
    show_help: bool = False


def _parse_args(argv: Sequence[str]) -> _Options:
    """Read options; unknown arguments and options missing a value are ignored."""
    options = _Options()
    args = iter(argv)
    for arg in args:
        if arg == "--help":
            options.show_help = True
            return options
        if arg in _VALUE_OPTIONS:
            value = next(args, None)
            if value is not None:
                setattr(options, _VALUE_OPTIONS[arg], value)
        elif arg == "--compress":
            options.compress = True
        elif arg == "--decompress":
            options.decompress = True
            options.compress = False
        elif arg == "--benchmark":
            options.benchmark = True
    return options


def _benchmark(data: bytes, algo: Algorithm, mode: ExecutionMode, options: _Options) -> int:
    start = time.perf_counter()
    try:
        compressed = compress_data(data, algo, mode)
    except CompressionError as exc:
        print(f"Compression failed: {exc}", file=sys.stderr)
        return 1
    compress_time = time.perf_counter() - start

    start = time.perf_counter()
    try:
        restored = decompress_data(compressed, algo, mode)
    except CompressionError as exc:
        print(f"Decompression failed: {exc}", file=sys.stderr)
        return 1
    decompress_time = time.perf_counter() - start

    ok = restored == data
    print("[Benchmark Report]")
    print(f"Algorithm:          {options.algo}")
    print(f"Mode:               {options.mode}")
    print(f"Input size:         {len(data)} bytes")
    print(f"Compressed size:    {len(compressed)} bytes")
    print(f"Decompressed size:  {len(restored)} bytes")
    print(f"Compression time:   {compress_time:.6f} s")
    print(f"Decompression time: {decompress_time:.6f} s")
    print(f"Correctness:        {'OK' if ok else 'FAILED'}")
    return 0 if ok else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the process exit status."""
    options = _parse_args(sys.argv[1:] if argv is None else argv)
    if options.show_help:
        print(_HELP.format(prog=PROG))
        return 0

    input_file = options.input_file or (
        DEFAULT_DECOMPRESS_INPUT if options.decompress else DEFAULT_COMPRESS_INPUT
    )
    output_file = options.output_file or (
        DEFAULT_DECOMPRESS_OUTPUT if options.decompress else DEFAULT_COMPRESS_OUTPUT
    )

    try:
        algo = parse_algorithm(options.algo)
        mode = parse_mode(options.mode)
    except ValueError:
        print("Unknown algorithm or mode.", file=sys.stderr)
        return 1

    try:
        with open(input_file, "rb") as handle:
            data = handle.read(MAX_FILE_SIZE)
    except OSError:
        print(f"Failed to read input file: {input_file}", file=sys.stderr)
        return 1

    if options.benchmark:
        return _benchmark(data, algo, mode, options)

    try:
        if options.compress:
            result = compress_data(data, algo, mode)
        else:
            result = decompress_data(data, algo, mode)
    except CompressionError as exc:
        print(f"Compression/decompression failed: {exc}", file=sys.stderr)
        return 1

    try:
        with open(output_file, "wb") as handle:
            handle.write(result)
    except OSError:
        print(f"Failed to write output file: {output_file}", file=sys.stderr)
        return 1

    print(f"Done. Output written to {output_file} ({len(result)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())