[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zsinflate"
version = "0.1.0"
description = "Pure-Python building blocks for DEFLATE decoding: Huffman tables, bit reader, sliding window and flush-marker search"
requires-python = ">=3.10"
dependencies = []
keywords = ["inflate", "deflate", "huffman", "decompression", "bit reader", "sliding window"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zsinflate"]

[tool.pytest.ini_options]
addopts = "-ra"
