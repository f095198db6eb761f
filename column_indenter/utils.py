"""
Utility functions for the column indenter.
"""

import os
import sys


def build_config_from_args(args):
    """Build SelectionAligner config from an argparse Namespace.

    The extension hint comes from --ext, else from the input file's suffix.

    Returns: config dict with None values removed
    """
    extension = getattr(args, "ext", None)
    input_path = getattr(args, "input", None)
    if extension is None and input_path and input_path != "-":
        extension = os.path.splitext(input_path)[1] or None

    config = {
        "extension": extension,
        "language": getattr(args, "language", None),
    }

    # Remove None values to avoid overriding defaults
    return {k: v for k, v in config.items() if v is not None}


def read_text(path=None, encoding="utf-8"):
    """Read a file (or stdin for None / "-") without newline translation"""
    if path is None or path == "-":
        stream = getattr(sys.stdin, "buffer", None)
        if stream is None:
            return sys.stdin.read()
        return stream.read().decode(encoding)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file '{path}' does not exist.")
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_text(text, path=None, encoding="utf-8"):
    """Write text to a file (or stdout for None / "-") without newline translation"""
    if path is None or path == "-":
        stream = getattr(sys.stdout, "buffer", None)
        if stream is None:
            sys.stdout.write(text)
        else:
            stream.write(text.encode(encoding))
            stream.flush()
        return
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
