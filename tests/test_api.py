#!/usr/bin/env python3
"""
Host boundary tests: text entry point and selection adapter
"""

import pytest

from column_indenter import (
    EmptySelectionError,
    Language,
    SELECTION_NOTICE,
    SelectionAligner,
    align_text,
    resolve_language,
)

CS_TEXT = 'a = "x = y";\nbbb = 100;'
CS_ALIGNED = 'a   = "x = y";\nbbb = 100;'


def test_align_text_defaults_to_base():
    assert align_text("a = 1\nbb = 2") == "a  = 1\nbb = 2"


def test_align_text_uses_extension_hint():
    assert align_text(CS_TEXT, extension="cs") == CS_ALIGNED
    assert align_text(CS_TEXT, extension="txt") != CS_ALIGNED


def test_align_text_language_overrides_extension():
    assert align_text(CS_TEXT, extension="txt", language="csharp") == CS_ALIGNED
    assert align_text(CS_TEXT, extension="cs", language=Language.BASE) != CS_ALIGNED


def test_resolve_language():
    assert resolve_language("cs") is Language.CSHARP
    assert resolve_language(None) is Language.BASE
    assert resolve_language("cs", "base") is Language.BASE


def test_resolve_language_unknown_name():
    with pytest.raises(ValueError):
        resolve_language(None, "fortran")


def test_selection_aligner_for_path():
    aligner = SelectionAligner.for_path("/src/Project/Model.CS")
    assert aligner.extension == "cs"
    assert aligner.language is Language.CSHARP
    assert aligner.replace_selection(CS_TEXT) == CS_ALIGNED


def test_selection_aligner_unknown_extension_uses_base():
    aligner = SelectionAligner.for_path("notes.md")
    assert aligner.language is Language.BASE

    assert SelectionAligner.for_path("Makefile").language is Language.BASE


def test_no_active_document():
    with pytest.raises(EmptySelectionError) as excinfo:
        SelectionAligner.for_path(None)
    assert str(excinfo.value) == SELECTION_NOTICE


@pytest.mark.parametrize("selection", [None, "", "   ", "\n\t\r\n"])
def test_empty_selection_is_rejected(selection):
    aligner = SelectionAligner(extension="cs")
    with pytest.raises(EmptySelectionError, match="Please select some text"):
        aligner.replace_selection(selection)


def test_empty_selection_error_is_value_error():
    assert issubclass(EmptySelectionError, ValueError)
    assert str(EmptySelectionError()) == "Please select some text in active document."


def test_replace_selection_returns_core_output_verbatim():
    selection = "int x = 1; // note\r\nint longName = 2; // other\r\n"
    aligner = SelectionAligner(extension=".cs")
    expected = "int x        = 1; // note\r\nint longName = 2; // other\r\n"
    assert aligner.replace_selection(selection) == expected


def test_align_returns_result_with_statistics():
    result = SelectionAligner().align("a = 1\nbb = 2\n")
    assert result.text == "a  = 1\nbb = 2\n"
    assert result.total_lines == 3
    assert result.aligned_lines == 2
