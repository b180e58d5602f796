"""The logger type behind ``tb_logger``."""

import logging

from tropicalbound.logger.base_logger import AlgorithmLogger
from tropicalbound.logger.matrix_logger import MatrixLogger
from tropicalbound.logger.table_logger import TableLogger


class Logger(TableLogger, MatrixLogger):
    """
    Trace logger with tables and matrices.

    Usage:
        trace = Logger("closure")
        trace.section("Layer 3")
        trace.table([[3, 12]], headers=["layer", "new products"])
        trace.matrix(product, title="M1·M2")
        trace.write_html("closure.html")
    """

    def __init__(self, name: str):
        AlgorithmLogger.__init__(self, name)

    def setup_console_logging(self, level: int = logging.INFO):
        """Enable the trace and print it with timestamps at ``level``."""
        self.disabled = False
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        for handler in self.logger.handlers:
            handler.setFormatter(formatter)
        self.logger.setLevel(level)
