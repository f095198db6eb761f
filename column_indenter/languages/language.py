"""Language selection

`Language` is a closed set of tokenization variants. Each member knows how to
tokenize a line; the column aligner only ever talks to this enum.
"""

from enum import Enum
from typing import Callable, Dict, Optional, Tuple
import logging

from .base import tokenize_base
from .csharp import tokenize_csharp
from .tokens import Token

logger = logging.getLogger(__name__)


class Language(Enum):
    """Tokenization variant, valued by its canonical file extension"""

    BASE = "base"
    CSHARP = "cs"

    def tokenize(self, line: str) -> Tuple[Token, ...]:
        """Split one line (without its line break) into classified tokens"""
        return _SCANNERS[self](line)

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_extension(cls, extension: Optional[str]) -> "Language":
        """Pick the variant for a file extension hint.

        The hint is compared lower-cased and without a leading dot; anything
        unrecognized (including None and "") falls back to BASE.
        """
        ext = normalize_extension(extension)
        language = _EXTENSIONS.get(ext, cls.BASE)
        logger.debug(f"Extension {ext!r} -> {language.label}")
        return language

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Resolve an explicit language name such as 'csharp' or 'base'.

        Raises:
            ValueError: unknown name
        """
        key = (name or "").strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        known = ", ".join(sorted(_ALIASES))
        raise ValueError(f"Unknown language '{name}' (expected one of: {known})")


def normalize_extension(extension: Optional[str]) -> str:
    """Lower-case an extension hint and strip its leading dot"""
    if not extension:
        return ""
    return extension.strip().lower().lstrip(".")


_SCANNERS: Dict[Language, Callable[[str], Tuple[Token, ...]]] = {
    Language.BASE: tokenize_base,
    Language.CSHARP: tokenize_csharp,
}

_LABELS = {
    Language.BASE: "Base",
    Language.CSHARP: "C#",
}

_EXTENSIONS = {
    "cs": Language.CSHARP,
}

_ALIASES = {
    "base": Language.BASE,
    "text": Language.BASE,
    "cs": Language.CSHARP,
    "csharp": Language.CSHARP,
    "c#": Language.CSHARP,
}
