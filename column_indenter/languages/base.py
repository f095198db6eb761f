"""Fallback scanner used for any file type without a dedicated language

Splits purely on whitespace boundaries; there is no string or comment
recognition, so every non-whitespace run is an alignment candidate.
"""

from typing import Tuple

from .tokens import Token, split_whitespace_runs


def tokenize_base(line: str) -> Tuple[Token, ...]:
    """Tokenize a line on whitespace / non-whitespace runs"""
    return split_whitespace_runs(line)
