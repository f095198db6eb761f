"""
Core modules for column alignment.
"""

from .fragment import Fragment, Line, split_lines
from .indenter import (
    Indenter,
    IndentResult,
    apply,
    compute_column_widths,
    render_line,
)

__all__ = [
    "Fragment",
    "Line",
    "split_lines",
    "Indenter",
    "IndentResult",
    "apply",
    "compute_column_widths",
    "render_line",
]
