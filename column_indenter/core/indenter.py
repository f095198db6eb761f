"""Column aligner

Tokenizes every line of a selection, groups the cells of code lines into
columns, and reflows each line so that the i-th cell of every line starts at
the same character offset.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..languages import Language
from .fragment import Fragment, Line

COLUMN_SEPARATOR = " "


@dataclass
class IndentResult:
    """Outcome of one alignment pass"""

    text: str
    language: Language
    column_widths: Tuple[int, ...] = ()
    total_lines: int = 0
    aligned_lines: int = 0
    changed_lines: int = 0

    @property
    def passthrough_lines(self) -> int:
        return self.total_lines - self.aligned_lines

    @property
    def column_count(self) -> int:
        return len(self.column_widths)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language.label,
            "total_lines": self.total_lines,
            "aligned_lines": self.aligned_lines,
            "passthrough_lines": self.passthrough_lines,
            "changed_lines": self.changed_lines,
            "column_count": self.column_count,
            "column_widths": list(self.column_widths),
        }


def compute_column_widths(rows: Sequence[Sequence[str]]) -> Tuple[int, ...]:
    """Widest cell per column index over all rows.

    Rows may have different lengths; missing cells count as width 0.
    """
    if not rows:
        return ()
    column_count = max(len(row) for row in rows)
    if column_count == 0:
        return ()

    lengths = np.zeros((len(rows), column_count), dtype=np.int64)
    for r, row in enumerate(rows):
        lengths[r, : len(row)] = [len(cell) for cell in row]
    return tuple(int(w) for w in lengths.max(axis=0))


def render_line(
    line: Line, widths: Sequence[int], indent: Optional[str] = None
) -> str:
    """Reflow one code line against the shared column widths

    `indent` replaces the line's own leading whitespace when given.
    """
    cells = line.cells
    last = len(cells) - 1
    parts = [
        cell if i == last else cell.ljust(widths[i]) for i, cell in enumerate(cells)
    ]
    if indent is None:
        indent = line.indent
    return indent + COLUMN_SEPARATOR.join(parts) + line.line_break


class Indenter:
    """Aligns a selection into columns using one language's tokenizer

    Usage:
        Indenter(Language.CSHARP).apply(selected_text)
    """

    def __init__(self, language: Optional[Language] = None):
        self.language = language or Language.BASE
        self.logger = logging.getLogger(self.__class__.__name__)

    def apply(self, selected_text: str) -> str:
        """Return `selected_text` realigned into columns"""
        return self.align(selected_text).text

    def align(self, selected_text: str) -> IndentResult:
        """Align and report column statistics alongside the text"""
        if not selected_text:
            return IndentResult(text="", language=self.language)

        fragment = Fragment.parse(selected_text, self.language)
        code_lines = [line for line in fragment.lines if line.has_code]
        widths = compute_column_widths([line.cells for line in code_lines])
        # every aligned line starts at the first code line's indent
        indent = code_lines[0].indent if code_lines else ""
        self.logger.debug(
            f"{self.language.label}: {len(fragment)} lines, "
            f"{len(code_lines)} with code, widths={list(widths)}"
        )

        output: List[str] = []
        changed = 0
        for line in fragment.lines:
            if line.has_code:
                rendered = render_line(line, widths, indent)
            else:
                rendered = line.text
            if rendered != line.text:
                changed += 1
            output.append(rendered)

        return IndentResult(
            text="".join(output),
            language=self.language,
            column_widths=widths,
            total_lines=len(fragment),
            aligned_lines=len(code_lines),
            changed_lines=changed,
        )


def apply(selected_text: str, language: Language = Language.BASE) -> str:
    """Realign `selected_text` with the given language's tokenizer"""
    return Indenter(language).apply(selected_text)
