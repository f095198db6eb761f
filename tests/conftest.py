"""Pytest configuration and fixtures

Shared fixtures for all tests.
"""

import pytest
from pathlib import Path

from column_indenter.core.indenter import Indenter
from column_indenter.languages import Language


# Lines that exercise every scanner branch, including unterminated constructs
SAMPLE_LINES = [
    "",
    "   ",
    "a = 1",
    "\tint  x\t=\t1;   ",
    'var s = "a // b"; // real comment',
    's = "escaped \\" quote" + c;',
    "c = '\\'';",
    'p = @"C:\\dir\\" + "x";',
    'q = @"say ""hi"" now";',
    'x = "unterminated // still string',
    "y = 'z",
    "int /* a = b */ k = 2;",
    "/* never closed",
    "//",
    'mixed = "s" /* c */ // d',
    "trailing backslash \"\\",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def base_indenter():
    """Indenter using the whitespace-only tokenizer"""
    return Indenter(Language.BASE)


@pytest.fixture
def csharp_indenter():
    """Indenter using the C# tokenizer"""
    return Indenter(Language.CSHARP)


@pytest.fixture
def project_root():
    """Project root directory"""
    return Path(__file__).parent.parent


@pytest.fixture
def write_input(tmp_path):
    """Write raw bytes to a temp file and return its path"""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
