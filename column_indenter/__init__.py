"""
Column Indenter: align selected source lines into columns.
"""

import logging

from .api import (
    SelectionAligner,
    EmptySelectionError,
    SELECTION_NOTICE,
    align_text,
    resolve_language,
)
from .core import Fragment, Line, Indenter, IndentResult, apply
from . import core

# Language module
from . import languages
from .languages import Language, Token, TokenKind

# Output module
from .output import OutputFormatter

__version__ = "0.1.0"
__all__ = [
    "SelectionAligner",
    "EmptySelectionError",
    "SELECTION_NOTICE",
    "align_text",
    "resolve_language",
    "Fragment",
    "Line",
    "Indenter",
    "IndentResult",
    "apply",
    "Language",
    "Token",
    "TokenKind",
    "OutputFormatter",
    "core",
    "languages",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("column_indenter")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
