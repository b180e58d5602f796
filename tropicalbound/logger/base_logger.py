"""Base logging functionality for tracing the decision procedures."""

import html
import logging
from pathlib import Path
from typing import Any, Union

from tropicalbound.logger.html_content import CSS_LOG

_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "debug": logging.DEBUG,
}


class AlgorithmLogger:
    """
    Writes a trace of an algorithm run to a ``logging`` logger and, in
    parallel, to an HTML buffer that ``write_html`` turns into a page.

    Every method is a no-op while ``disabled`` is True.
    """

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._html_content = ['<div class="content">']
        self._section_open = False

        self.logger = logging.getLogger(name)
        # One handler per logger name, even if several instances share it.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

    # ------------------------------------------------------------------ #
    # Structure
    # ------------------------------------------------------------------ #

    def _close_section(self) -> None:
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

    def section(self, title: str):
        """Start a new top-level section, closing the previous one."""
        if self.disabled:
            return
        self._close_section()
        self.logger.info(f"\n{'=' * 20} {title} {'=' * 20}\n")
        self._html_content.append(
            f'<section class="section"><h3>{html.escape(title)}</h3>'
        )
        self._section_open = True

    def subsection(self, title: str):
        if self.disabled:
            return
        self.logger.info(f"\n{'-' * 15} {title} {'-' * 15}\n")
        self._html_content.append(
            f'<div class="subsection"><h4>{html.escape(title)}</h4></div>'
        )

    # ------------------------------------------------------------------ #
    # Messages
    # ------------------------------------------------------------------ #

    def _message(self, kind: str, message: str) -> None:
        if self.disabled:
            return
        self.logger.log(_LEVELS[kind], message)
        self._html_content.append(f'<p class="{kind}">{html.escape(message)}</p>')

    def info(self, message: str):
        self._message("info", message)

    def warning(self, message: str):
        self._message("warning", message)

    def error(self, message: str):
        self._message("error", message)

    def debug(self, message: str):
        self._message("debug", message)

    def result(self, label: str, value: Any):
        """Log a labelled value such as a bound or a distance."""
        if self.disabled:
            return
        self.logger.info(f"{label}: {value}")
        self._html_content.append(
            f'<div class="result"><span class="label">{html.escape(label)}:</span> '
            f"{html.escape(str(value))}</div>"
        )

    # ------------------------------------------------------------------ #
    # HTML output
    # ------------------------------------------------------------------ #

    def clear(self):
        """Drop everything recorded so far."""
        self._html_content = ['<div class="content">']
        self._section_open = False

    def get_html_content(self) -> str:
        """Snapshot of the HTML body; open sections are closed in the copy only."""
        parts = list(self._html_content)
        if self._section_open:
            parts.append("</section>")
        parts.append("</div>")
        return "\n".join(parts)

    def write_html(self, path: Union[str, Path], title: str = "") -> Path:
        """Write the trace as a standalone HTML page and return its path."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        page = (
            "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{html.escape(title or self.name)}</title>\n"
            f"<style>{CSS_LOG}</style>\n</head>\n<body>\n"
            f"{self.get_html_content()}\n</body>\n</html>\n"
        )
        path.write_text(page, encoding="utf-8")
        return path
