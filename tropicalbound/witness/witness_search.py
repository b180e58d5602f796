"""
Witness search
==============

Reconstructs why an entry of a word product has its value, and finds a
shortest word whose product reaches the largest finite value of a bounded
instance.

Words are encoded as integers: a word of length L over k generators is the
L-digit base-k number whose most significant digit is the first letter.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from tropicalbound.decision.closure import explore_closure, validate_generators
from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import INF
from tropicalbound.elements.tropical import tropical_identity
from tropicalbound.exceptions import ConvergenceTimeoutError, InputFaultError
from tropicalbound.logger import tb_logger
from tropicalbound.logger.formatting import format_path, format_word
from tropicalbound.types import GeneratorSet, WitnessReport, Word
from tropicalbound.witness.layered_graph import LayeredGraph

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def decode_word(code: int, length: int, alphabet_size: int) -> Word:
    """Digits of ``code`` in base ``alphabet_size``, most significant first."""
    if length < 0 or code < 0 or alphabet_size < 1:
        raise InputFaultError("Word length, code and alphabet size must be valid.")
    if alphabet_size == 1:
        if code != 0:
            raise InputFaultError(f"Word code {code} does not fit a unary alphabet.")
        return [0] * length
    if code >= alphabet_size**length:
        raise InputFaultError(
            f"Word code {code} does not fit {length} letters over {alphabet_size}."
        )
    word = [0] * length
    for position in range(length - 1, -1, -1):
        code, word[position] = divmod(code, alphabet_size)
    return word


def encode_word(word: Sequence[int], alphabet_size: int) -> int:
    """Inverse of ``decode_word``."""
    code = 0
    for letter in word:
        if not 0 <= letter < alphabet_size:
            raise InputFaultError(f"Letter {letter} is not a generator index.")
        code = code * alphabet_size + letter
    return code


def word_product(generators: GeneratorSet, word: Sequence[int]) -> SemiringMatrix:
    """Left-to-right tropical product of the word; the empty word gives the identity."""
    n = validate_generators(generators)
    result = tropical_identity(n)
    for letter in word:
        result.times_in_place(generators[letter])
    return result


def _check_word(word: Sequence[int], alphabet_size: int) -> Word:
    letters = list(word)
    for letter in letters:
        if isinstance(letter, bool) or not isinstance(letter, int):
            raise InputFaultError(f"Letter {letter!r} is not a generator index.")
        if not 0 <= letter < alphabet_size:
            raise InputFaultError(
                f"Letter {letter} is outside 0..{alphabet_size - 1}."
            )
    return letters


def shortest_word_path(
    generators: GeneratorSet, start: int, end: int, word: Sequence[int]
) -> WitnessReport:
    """
    Lightest path realizing entry (start, end) of the product of ``word``.

    Args:
        generators: The generator set
        start: 1-based row of the entry
        end: 1-based column of the entry
        word: 0-based generator indices, left to right

    Returns:
        A WitnessReport whose distance equals the (start, end) entry of
        ``word_product(generators, word)``; distance is INF and path/weights
        are empty when the entry is infinite.
    """
    n = validate_generators(generators)
    if not (1 <= start <= n and 1 <= end <= n):
        raise InputFaultError("Start or end invalid.")
    letters = _check_word(word, len(generators))

    resulting_matrix = word_product(generators, letters)
    matrices = [generators[letter] for letter in letters]

    tb_logger.section("Witness path")
    tb_logger.info(f"Word: {format_word(letters)}")
    tb_logger.matrix(resulting_matrix, title="Resulting Matrix")

    if matrices:
        graph = LayeredGraph.from_word(matrices)
    else:
        graph = LayeredGraph(n)
    found = graph.shortest_path(start - 1, len(letters) * n + end - 1)

    if found is None:
        logger.warning(
            "No path from %d to %d for word %s; the product entry is infinite.",
            start,
            end,
            format_word(letters),
        )
        return WitnessReport(
            generators=list(generators),
            word=letters,
            resulting_matrix=resulting_matrix,
            start=start,
            end=end,
            distance=INF,
        )

    distance, vertices = found
    path = [vertex % n for vertex in vertices]
    weights = [
        generators[letters[i]].get(path[i], path[i + 1]) for i in range(len(letters))
    ]
    report = WitnessReport(
        generators=list(generators),
        word=letters,
        resulting_matrix=resulting_matrix,
        start=start,
        end=end,
        distance=distance,
        path=[node + 1 for node in path],
        weights=weights,
    )
    tb_logger.result("Total distance", distance)
    tb_logger.result("Path", format_path(report.path))
    tb_logger.result("Weights", weights)
    return report


def tropical_dijkstra(
    generators: GeneratorSet, start: int, end: int, word_length: int, word_code: int
) -> WitnessReport:
    """
    Shortest path from ``start`` to ``end`` (1-based) through an encoded word.

    The word of ``word_length`` letters is read from ``word_code`` in base
    ``len(generators)``, first letter as the most significant digit.
    """
    validate_generators(generators)
    word = decode_word(word_code, word_length, len(generators))
    return shortest_word_path(generators, start, end, word)


def _find_value(
    products: Sequence[SemiringMatrix], target: int
) -> Optional[Tuple[int, int, int]]:
    for index, product in enumerate(products):
        for row, entries in enumerate(product.rows()):
            for col, value in enumerate(entries):
                if value == target:
                    return index, row, col
    return None


def find_min_path_for_max_value(
    generators: GeneratorSet, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
) -> WitnessReport:
    """
    Find a shortest word whose product contains the closure's maximum value.

    Runs the semi-decision first; words are then enumerated breadth-first by
    length, so the first hit has minimal length. The product of parent i
    extended by generator j sits at index ``i·k + j`` of its round, which is
    exactly the word code of that product.

    Raises:
        ConvergenceTimeoutError: If the semi-decision does not converge in
            ``timeout_seconds``; either the instance is unbounded or the
            timeout has to be increased
    """
    n = validate_generators(generators)

    frontier = explore_closure(generators, timeout_seconds)
    if not frontier.converged:
        raise ConvergenceTimeoutError(
            "Semi-decide timed out. Either this instance is unbounded or you "
            "need to increase timeout_seconds."
        )
    target = frontier.max_value()

    tb_logger.section("Minimal witness for the maximum value")
    tb_logger.result("Maximum value", target)

    # Every product in the closure is the product of a word of at most `layers` letters.
    max_length = max(frontier.layers, 1)
    last: List[SemiringMatrix] = [tropical_identity(n)]
    for length in range(1, max_length + 1):
        last = [parent.times(g) for parent in last for g in generators]
        hit = _find_value(last, target)
        if hit is not None:
            code, row, col = hit
            tb_logger.info(
                f"Maximum reached by a word of length {length} at ({row + 1}, {col + 1})"
            )
            return tropical_dijkstra(generators, row + 1, col + 1, length, code)
        logger.debug(
            "No word of length %d reaches %d (%d products)", length, target, len(last)
        )

    # Only the empty word reaches the maximum (it is 0, on the identity's diagonal).
    return shortest_word_path(generators, 1, 1, [])
