"""Logging package for tropicalbound."""

from tropicalbound.logger.base_logger import AlgorithmLogger
from tropicalbound.logger.table_logger import TableLogger
from tropicalbound.logger.matrix_logger import MatrixLogger
from tropicalbound.logger.combined_logger import Logger
from tropicalbound.logger.formatting import (
    format_entry,
    format_word,
    format_path,
    format_set,
)

# Unified singleton for algorithm tracing
tb_logger = Logger("TropicalBound")
tb_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "MatrixLogger",
    "Logger",
    "tb_logger",
    "format_entry",
    "format_word",
    "format_path",
    "format_set",
]
