import re

from typing import Iterable, List

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import INF, TropicalValue
from tropicalbound.elements.tropical import is_tropical, tropical_matrix
from tropicalbound.exceptions import InputFaultError

INFINITY_TOKEN = "-"

# One or more lines that contain only whitespace
_BLOCK_SPLIT = re.compile(r"\n\s*\n")


# ===================================================================
# 1. PARSING
# ===================================================================


def parse_token(token: str) -> TropicalValue:
    """
    Convert one token into a tropical entry.

    Args:
        token: A non-negative decimal integer or '-' for infinity

    Returns:
        The integer value or INF
    """
    if token == INFINITY_TOKEN:
        return INF
    if not (token.isascii() and token.isdigit()):
        raise InputFaultError(f"Invalid matrix entry {token!r}.")
    return int(token)


def parse_block(block: str) -> SemiringMatrix:
    """
    Parse a single whitespace-separated square grid.

    Raises:
        InputFaultError: If the block is not square or holds an invalid token
    """
    rows: List[List[TropicalValue]] = []
    for line in block.strip().splitlines():
        if not line.strip():
            continue
        rows.append([parse_token(token) for token in line.split()])

    n = len(rows)
    for row in rows:
        if len(row) != n:
            raise InputFaultError(f"Matrix is not square: {n}×{len(row)}")
    return tropical_matrix(rows)


def parse_matrices(source: str) -> List[SemiringMatrix]:
    """
    Parse blank-line-separated matrix blocks into a generator list.

    Example input (two 3×3 matrices)::

        1  -  0
        -  0  -
        0  1  -

        0  -  1
        1  0  -
        1  -  -

    Returns:
        The matrices in input order; an empty list for blank input
    """
    text = source.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return []
    return [parse_block(block) for block in _BLOCK_SPLIT.split(text)]


# ===================================================================
# 2. FORMATTING
# ===================================================================


def format_matrix(matrix: SemiringMatrix) -> str:
    """Render a tropical matrix as aligned rows, '-' for infinity."""
    if not is_tropical(matrix):
        raise InputFaultError("Only tropical matrices have a text format.")
    return str(matrix)


def format_matrices(matrices: Iterable[SemiringMatrix]) -> str:
    """Render matrices as blocks separated by one blank line."""
    return "\n\n".join(format_matrix(m) for m in matrices)
