"""C#-aware scanner

Performs one left-to-right pass over a line and carves out string literals,
character literals and comments as opaque tokens. Whatever lies between them
is split with the fallback whitespace rule.

Recognized constructs:
- `// ...` line comment, up to end of line
- `/* ... */` block comment (unterminated: rest of the line)
- `"..."` string literal, backslash escapes the next character
- `'...'` character literal, same escape handling
- `@"..."` verbatim string, `""` is an escaped quote, backslash is literal

An unterminated literal swallows the rest of the line. Delimiters found
inside an open literal are plain text.
"""

from typing import List, Tuple

from .tokens import Token, TokenKind, split_whitespace_runs


def _scan_quoted(line: str, start: int, quote: str) -> int:
    """Return the index just past the literal opened at `start`"""
    n = len(line)
    j = start + 1
    while j < n:
        char = line[j]
        if char == "\\":
            j += 2
            continue
        if char == quote:
            return j + 1
        j += 1
    return n


def _scan_verbatim(line: str, start: int) -> int:
    """Return the index just past the verbatim string opened at `start` (the `@`)"""
    n = len(line)
    j = start + 2
    while j < n:
        if line[j] == '"':
            if j + 1 < n and line[j + 1] == '"':
                j += 2
                continue
            return j + 1
        j += 1
    return n


def tokenize_csharp(line: str) -> Tuple[Token, ...]:
    """Tokenize one line of C# source"""
    tokens: List[Token] = []
    n = len(line)
    plain_start = 0
    i = 0

    def flush(end: int):
        if end > plain_start:
            tokens.extend(
                split_whitespace_runs(line[plain_start:end], offset=plain_start)
            )

    while i < n:
        char = line[i]
        pair = line[i : i + 2]

        if pair == "//":
            flush(i)
            tokens.append(Token(TokenKind.COMMENT, line[i:], i))
            i = plain_start = n
            break

        if pair == "/*":
            close = line.find("*/", i + 2)
            end = n if close < 0 else close + 2
            kind = TokenKind.COMMENT
        elif pair == '@"':
            end = _scan_verbatim(line, i)
            kind = TokenKind.STRING
        elif char in "\"'":
            end = _scan_quoted(line, i, char)
            kind = TokenKind.STRING
        else:
            i += 1
            continue

        flush(i)
        tokens.append(Token(kind, line[i:end], i))
        i = plain_start = end

    flush(n)
    return tuple(tokens)
