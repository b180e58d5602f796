"""
Custom exceptions for the tropical boundedness package.
"""

from __future__ import annotations
from typing import NoReturn


class TropicalBoundError(Exception):
    """Base exception for tropical boundedness analysis errors."""

    pass


class InputFaultError(TropicalBoundError, ValueError):
    """Raised when a caller passes a malformed matrix, generator set or argument."""

    @staticmethod
    def raise_dimension_mismatch(expected: int, actual: int, index: int) -> NoReturn:
        """
        Raises an InputFaultError for a generator whose dimension differs from the first one.

        Args:
            expected: Dimension of the first generator
            actual: Dimension of the offending generator
            index: Position of the offending generator in the generator set

        Raises:
            InputFaultError: Always raised with detailed error information
        """
        from tropicalbound.logger import tb_logger

        message = (
            f"Generator {index} has dimension {actual}, expected {expected}. "
            f"All generators of one instance must share a single dimension."
        )
        if not tb_logger.disabled:
            tb_logger.error(message)
        raise InputFaultError(message)


class TropicalOverflowError(TropicalBoundError, ArithmeticError):
    """Raised when a finite tropical sum reaches the representable limit."""

    @staticmethod
    def raise_overflow(x: int, y: int, limit: int) -> NoReturn:
        from tropicalbound.logger import tb_logger

        message = f"Overflow: {x} + {y} reaches the finite limit {limit}."
        if not tb_logger.disabled:
            tb_logger.error(message)
        raise TropicalOverflowError(message)


class ConvergenceTimeoutError(InputFaultError):
    """Raised when a computation needs a converged closure but the semi-decision timed out."""

    pass
