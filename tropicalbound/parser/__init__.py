"""
Text format parser for tropical generator sets.

Each matrix is a block of whitespace-separated rows; entries are non-negative
integers or '-' for infinity, and blocks are separated by blank lines.
"""

from .matrix_parser import (
    INFINITY_TOKEN,
    parse_token,
    parse_block,
    parse_matrices,
    format_matrix,
    format_matrices,
)

__all__ = [
    "INFINITY_TOKEN",
    "parse_token",
    "parse_block",
    "parse_matrices",
    "format_matrix",
    "format_matrices",
]
