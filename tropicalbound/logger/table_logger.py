"""Table display functionality for logs.

Tables are rendered with ``tabulate`` for the terminal and as plain HTML
tables for the HTML buffer.
"""

import html
from typing import Any, List, Optional, Sequence

from tabulate import tabulate

from tropicalbound.logger.base_logger import AlgorithmLogger


def html_table(rows: Sequence[Sequence[Any]], headers: Sequence[str]) -> str:
    head = "".join(f"<th>{html.escape(str(h))}</th>" for h in headers)
    body = "".join(
        "<tr>" + "".join(f"<td>{html.escape(str(cell))}</td>" for cell in row) + "</tr>"
        for row in rows
    )
    thead = f"<thead><tr>{head}</tr></thead>" if headers else ""
    return (
        f'<div class="table-container"><table>{thead}'
        f"<tbody>{body}</tbody></table></div>"
    )


class TableLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with table support."""

    def table(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None,
        tablefmt: str = "simple",
    ) -> None:
        """Log rows as a table; INF cells print as '-' through ``str``."""
        if self.disabled:
            return
        headers = headers or []
        if title:
            self.logger.info(f"\n{title}:")
            self._html_content.append(f"<h4>{html.escape(title)}</h4>")

        cells = [[str(cell) for cell in row] for row in data]
        self.logger.info(tabulate(cells, headers=headers, tablefmt=tablefmt))
        self._html_content.append(html_table(cells, headers))
