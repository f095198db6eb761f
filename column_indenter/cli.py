import argparse
import logging
from .api import SelectionAligner, EmptySelectionError
from .output.formatter import OutputFormatter
from .utils import build_config_from_args, read_text, write_text


def build_parser():
    parser = argparse.ArgumentParser(
        description="Column Indenter - align selected code into columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  column-indenter Fields.cs
  git diff --cached | column-indenter --ext cs
  column-indenter settings.ini -i --report
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="File holding the selected text (default: read stdin)",
    )
    parser.add_argument(
        "-e",
        "--ext",
        type=str,
        default=None,
        help="File extension hint used to pick the tokenizer (e.g. cs). Defaults to the input file's suffix",
    )
    parser.add_argument(
        "-l",
        "--language",
        type=str,
        default=None,
        help="Force a tokenizer by name (base, csharp), overriding the extension hint",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "-o", "--output", type=str, help="Write aligned text to this file"
    )
    target.add_argument(
        "-i",
        "--in-place",
        action="store_true",
        help="Rewrite the input file with the aligned text",
    )

    parser.add_argument(
        "--report",
        action="store_true",
        help="Log a short alignment report (line and column statistics)",
    )
    parser.add_argument(
        "--report-file",
        type=str,
        help="Write the alignment report as JSON to this path",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        # package logger is pinned at INFO on import
        logging.getLogger("column_indenter").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.in_place and (args.input is None or args.input == "-"):
        logging.error("Error: --in-place requires an input file")
        return 1

    try:
        selection = read_text(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error: {e}")
        return 1

    config = build_config_from_args(args)

    try:
        aligner = SelectionAligner(**config)
        result = aligner.align(selection)
    except EmptySelectionError as e:
        logging.info(str(e))
        return 1
    except ValueError as e:
        logging.error(f"Error: {e}")
        return 1

    destination = args.input if args.in_place else args.output
    try:
        write_text(result.text, destination)
    except OSError as e:
        logging.error(f"Error writing output: {e}")
        return 1

    if args.report or args.report_file:
        source = args.input if args.input not in (None, "-") else "<stdin>"
        summary = OutputFormatter.build_summary(result, source=source)
        if args.report:
            level = "verbose" if args.verbose else "normal"
            logging.info(OutputFormatter.format_console(summary, level=level))
        if args.report_file:
            path = OutputFormatter.save_json(summary, args.report_file)
            logging.info(f"Report written: {path}")

    return 0


if __name__ == "__main__":
    exit(main())
