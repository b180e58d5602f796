"""Matrix display functionality for logs."""

import html
from typing import List, Optional, TYPE_CHECKING

from tropicalbound.logger.base_logger import AlgorithmLogger
from tropicalbound.logger.formatting import format_entry

if TYPE_CHECKING:
    from tropicalbound.elements.matrix import SemiringMatrix


def to_ascii_matrix(matrix: "SemiringMatrix") -> List[str]:
    """Render a matrix as bracketed, column-aligned lines."""
    cells = [[format_entry(v) for v in row] for row in matrix.rows()]
    col_widths = [
        max(len(cells[r][c]) for r in range(len(cells))) for c in range(len(cells[0]))
    ]
    return [
        "[ " + "  ".join(cell.rjust(w) for cell, w in zip(row, col_widths)) + " ]"
        for row in cells
    ]


class MatrixLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with matrix display support."""

    def matrix(self, matrix: "SemiringMatrix", title: str = "") -> None:
        """Display a matrix as aligned text in the terminal and a grid in HTML."""
        if self.disabled or matrix is None:
            return

        lines = to_ascii_matrix(matrix)
        if title:
            self.logger.info(f"\n{title}:")
        self.logger.info("\n".join(lines))

        wrapper = '<div class="matrix-container">'
        if title:
            wrapper += f"<h4>{html.escape(title)}</h4>"
        wrapper += "<pre>" + html.escape("\n".join(lines)) + "</pre></div>"
        self._html_content.append(wrapper)

    def matrices(
        self, matrices: "List[SemiringMatrix]", title: Optional[str] = None
    ) -> None:
        """Display a numbered list of matrices (for example a generator set)."""
        if self.disabled:
            return
        if title:
            self.subsection(title)
        for index, matrix in enumerate(matrices):
            self.matrix(matrix, title=f"M{index + 1}")
