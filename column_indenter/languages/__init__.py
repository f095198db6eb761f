"""Language tokenization module

Per-language scanners that turn a line into classified tokens.
"""

from .tokens import Token, TokenKind, join_tokens
from .base import tokenize_base
from .csharp import tokenize_csharp
from .language import Language, normalize_extension

__all__ = [
    "Token",
    "TokenKind",
    "join_tokens",
    "tokenize_base",
    "tokenize_csharp",
    "Language",
    "normalize_extension",
]
