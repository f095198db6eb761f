"""Token data structures shared by all language scanners"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class TokenKind(Enum):
    """Lexical class of a token"""

    CODE = "code"
    STRING = "string-literal"
    COMMENT = "comment"
    WHITESPACE = "whitespace"


@dataclass(frozen=True)
class Token:
    """A classified, contiguous slice of one line.

    `start` is the character offset of the token inside its line.
    """

    kind: TokenKind
    text: str
    start: int = 0

    def __repr__(self):
        return f"Token({self.kind.value}, {self.text!r}, @{self.start})"

    def __len__(self) -> int:
        return len(self.text)

    @property
    def is_code(self) -> bool:
        return self.kind is TokenKind.CODE

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE


def join_tokens(tokens: Iterable[Token]) -> str:
    """Concatenate token texts back into the line they came from."""
    return "".join(token.text for token in tokens)


def split_whitespace_runs(text: str, offset: int = 0) -> Tuple[Token, ...]:
    """Split `text` into alternating whitespace / code runs.

    Every non-whitespace run is classified as code. `offset` is added to
    each token start so the result can be spliced into a larger line.
    """
    tokens = []
    n = len(text)
    i = 0
    while i < n:
        start = i
        is_space = text[i].isspace()
        while i < n and text[i].isspace() == is_space:
            i += 1
        kind = TokenKind.WHITESPACE if is_space else TokenKind.CODE
        tokens.append(Token(kind, text[start:i], offset + start))
    return tuple(tokens)
