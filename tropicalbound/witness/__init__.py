"""
Witness reconstruction: shortest paths through word products.
"""

from .layered_graph import LayeredGraph
from .witness_search import (
    DEFAULT_TIMEOUT_SECONDS,
    decode_word,
    encode_word,
    word_product,
    shortest_word_path,
    tropical_dijkstra,
    find_min_path_for_max_value,
)

__all__ = [
    "LayeredGraph",
    "DEFAULT_TIMEOUT_SECONDS",
    "decode_word",
    "encode_word",
    "word_product",
    "shortest_word_path",
    "tropical_dijkstra",
    "find_min_path_for_max_value",
]
