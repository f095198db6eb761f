"""Output formatting for alignment reports"""

from typing import Dict, Any, Optional
import json
import os

from ..core.indenter import IndentResult


class OutputFormatter:
    """Formats alignment results into a summary dict and console output"""

    # Output levels
    OUTPUT_LEVELS = {"minimal", "normal", "verbose"}
    DEFAULT_LEVEL = "normal"

    @staticmethod
    def build_summary(
        result: IndentResult, source: Optional[str] = None
    ) -> Dict[str, Any]:
        """Build summary layer from an alignment result

        Args:
            result: IndentResult from Indenter.align()
            source: Optional input name (file path or "<stdin>")

        Returns:
            Structured summary dict with language, line and column statistics
        """
        stats = result.to_dict()
        return {
            "source": source,
            "language": stats["language"],
            "lines": {
                "total": stats["total_lines"],
                "aligned": stats["aligned_lines"],
                "passthrough": stats["passthrough_lines"],
                "changed": stats["changed_lines"],
            },
            "columns": {
                "count": stats["column_count"],
                "widths": stats["column_widths"],
            },
        }

    @staticmethod
    def format_console(summary: Dict[str, Any], level: str = "normal") -> str:
        """Format summary as console output

        Args:
            summary: Dict from build_summary()
            level: Output level (minimal, normal, verbose)

        Returns:
            Formatted console output string
        """
        if level not in OutputFormatter.OUTPUT_LEVELS:
            level = OutputFormatter.DEFAULT_LEVEL

        if level == "minimal":
            return OutputFormatter._format_minimal(summary)
        elif level == "normal":
            return OutputFormatter._format_normal(summary)
        else:  # verbose
            return OutputFormatter._format_verbose(summary)

    @staticmethod
    def _format_minimal(summary: Dict[str, Any]) -> str:
        lines = summary.get("lines", {})
        return (
            f"[OK] Aligned {lines.get('aligned', 0)}/{lines.get('total', 0)} lines"
        )

    @staticmethod
    def _format_normal(summary: Dict[str, Any]) -> str:
        lines = summary.get("lines", {})
        columns = summary.get("columns", {})
        out = [
            f"[OK] Column alignment ({summary.get('language', 'Base')})",
            f"     Lines: {lines.get('total', 0)} total, "
            f"{lines.get('aligned', 0)} aligned, "
            f"{lines.get('passthrough', 0)} passed through, "
            f"{lines.get('changed', 0)} changed",
            f"     Columns: {columns.get('count', 0)}",
        ]
        if summary.get("source"):
            out.insert(1, f"     Source: {summary['source']}")
        return "\n".join(out)

    @staticmethod
    def _format_verbose(summary: Dict[str, Any]) -> str:
        out = [OutputFormatter._format_normal(summary)]
        widths = summary.get("columns", {}).get("widths", [])
        for i, width in enumerate(widths):
            out.append(f"       [{i}] width={width}")
        return "\n".join(out)

    @staticmethod
    def save_json(summary: Dict[str, Any], path: str) -> str:
        """Write summary as JSON and return the absolute path"""
        path = os.path.abspath(path)
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(summary, f, ensure_ascii=False, indent=2)
        return path
