"""Building blocks for DEFLATE decoding: Huffman tables, bit reader, window and flush-marker search."""

__version__ = "0.1.0"
__all__ = ["bits", "huffman", "sync", "window"]