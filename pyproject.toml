[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squeezekit"
version = "0.1.0"
description = "Small lossless compression toolkit: RLE, LZ77, LZW, Huffman and a BWT+RLE+Huffman pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "rle", "lz77", "lzw", "huffman", "bwt", "burrows-wheeler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
squeezekit = "squeezekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["squeezekit"]

[tool.pytest.ini_options]
addopts = "-ra"
