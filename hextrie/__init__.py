"""
HexTrie - 16-way radix tree for hex-digit keys

This module provides insertion, lookup and deletion (with automatic pruning of
emptied branches) of values keyed by strings of hexadecimal digits, plus a
tree diagram for inspecting the structure.
"""

from .hextrie import HexTrie
from .helpers import hex_to_nibbles, nibbles_to_hex, int_to_nibbles, canonical_key

# Alias for convenience
Trie = HexTrie

__all__ = ["HexTrie", "Trie", "hex_to_nibbles", "nibbles_to_hex", "int_to_nibbles", "canonical_key"]
