#!/usr/bin/env python3
"""
Report formatter tests
"""

import json

from column_indenter.core import Indenter
from column_indenter.languages import Language
from column_indenter.output import OutputFormatter


def make_summary(source=None):
    result = Indenter(Language.CSHARP).align("int x = 1; // a\n\nint yy = 2;")
    return OutputFormatter.build_summary(result, source=source)


def test_build_summary():
    summary = make_summary("Model.cs")
    assert summary["source"] == "Model.cs"
    assert summary["language"] == "C#"
    assert summary["lines"]["total"] == 3
    assert summary["lines"]["aligned"] == 2
    assert summary["lines"]["passthrough"] == 1
    assert summary["columns"] == {"count": 5, "widths": [3, 2, 1, 2, 4]}


def test_format_console_minimal():
    assert OutputFormatter.format_console(make_summary(), "minimal") == (
        "[OK] Aligned 2/3 lines"
    )


def test_format_console_normal():
    text = OutputFormatter.format_console(make_summary("Model.cs"))
    assert text.startswith("[OK] Column alignment (C#)")
    assert "Source: Model.cs" in text
    assert "Columns: 5" in text


def test_format_console_verbose_lists_widths():
    text = OutputFormatter.format_console(make_summary(), "verbose")
    assert "[0] width=3" in text
    assert "[4] width=4" in text


def test_format_console_unknown_level_falls_back_to_normal():
    summary = make_summary()
    assert OutputFormatter.format_console(summary, "loud") == (
        OutputFormatter.format_console(summary, "normal")
    )


def test_save_json(tmp_path):
    path = OutputFormatter.save_json(make_summary(), str(tmp_path / "r" / "s.json"))
    with open(path, encoding="utf-8") as f:
        assert json.load(f)["columns"]["count"] == 5
