"""Lossless compression algorithms: RLE, LZ77, LZW, Huffman, BWT and a BWT+RLE+Huffman pipeline."""

__version__ = "0.1.0"
__all__ = ["bwt", "cli", "common", "compression", "huffman", "lz77", "lzw", "pipeline", "rle"]