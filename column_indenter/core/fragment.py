"""Document fragment model

A fragment is the selected text broken into lines. Line breaks are kept on
each line as metadata so that CRLF / LF / CR survive a round trip untouched.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

from ..languages import Language, Token, join_tokens

LINE_BREAK_PATTERN = re.compile(r"\r\n|\n|\r")


def split_lines(text: str) -> List[Tuple[str, str]]:
    """Split text into (body, line_break) pairs.

    The last pair always has an empty line break, so "a\\n" yields two
    lines: ("a", "\\n") and ("", "").
    """
    if not text:
        return []

    pairs = []
    prev = 0
    for match in LINE_BREAK_PATTERN.finditer(text):
        pairs.append((text[prev : match.start()], match.group()))
        prev = match.end()
    pairs.append((text[prev:], ""))
    return pairs


@dataclass(frozen=True)
class Line:
    """One tokenized line plus the break sequence that ended it"""

    tokens: Tuple[Token, ...]
    line_break: str = ""

    @property
    def body(self) -> str:
        return join_tokens(self.tokens)

    @property
    def text(self) -> str:
        return self.body + self.line_break

    @property
    def has_code(self) -> bool:
        return any(token.is_code for token in self.tokens)

    @property
    def indent(self) -> str:
        """Leading whitespace of the line ("" when it starts with a token)"""
        if self.tokens and self.tokens[0].is_whitespace:
            return self.tokens[0].text
        return ""

    @property
    def cells(self) -> Tuple[str, ...]:
        """Maximal runs of adjacent non-whitespace tokens.

        A literal glued to code (`"x";`) stays one cell; a comment containing
        spaces is a single token and therefore a single cell.
        """
        cells = []
        current = []
        for token in self.tokens:
            if token.is_whitespace:
                if current:
                    cells.append("".join(current))
                    current = []
            else:
                current.append(token.text)
        if current:
            cells.append("".join(current))
        return tuple(cells)


@dataclass
class Fragment:
    """Ordered lines of a selection, tokenized with one language"""

    lines: List[Line]
    language: Language = Language.BASE

    @classmethod
    def parse(cls, text: str, language: Language) -> "Fragment":
        lines = [
            Line(language.tokenize(body), line_break)
            for body, line_break in split_lines(text)
        ]
        return cls(lines, language)

    @property
    def text(self) -> str:
        return "".join(line.text for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)
