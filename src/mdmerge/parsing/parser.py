# mdmerge/parsing/parser.py
from __future__ import annotations

import argparse
import os

from mdmerge.constants import DEFAULT_INPUT_DIR, DEFAULT_MODEL, DEFAULT_OUTPUT_PATH, DEFAULT_SEPARATOR
from mdmerge.io.readers import ENCODING_ERROR_POLICIES

_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', '\\': '\\'}


def decode_separator(raw: str) -> str:
    """Expand backslash escapes (\\n, \\t, \\r, \\\\) typed on the command line.

    Unknown escapes are kept literally, backslash included.
    """
    out: list[str] = []
    i, n = 0, len(raw)
    while i < n:
        ch = raw[i]
        if ch == '\\' and i + 1 < n and raw[i + 1] in _ESCAPES:
            out.append(_ESCAPES[raw[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return ''.join(out)


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Defaults for the input tree, the output file and the model come from the
    MDMERGE_INPUT_DIR, MDMERGE_OUTPUT and MDMERGE_MODEL environment variables
    when set, otherwise from mdmerge.constants.
    """
    p = argparse.ArgumentParser(
        prog="mdmerge",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        description=(
            "mdmerge – merge a markdown tree into one file and estimate its token count\n"
            "Markdown files are collected depth-first in directory-listing order and "
            "joined with a separator."
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_mrg = p.add_argument_group("Merge")
    g_tok = p.add_argument_group("Tokens")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "-i",
        "--input",
        metavar="DIR",
        dest="input_dir",
        default=os.getenv("MDMERGE_INPUT_DIR") or DEFAULT_INPUT_DIR,
        help="Root directory scanned recursively for markdown files.",
    )
    g_loc.add_argument(
        "-s",
        "--suffix",
        metavar="SUF",
        action="append",
        dest="suffix",
        help=(
            "File-name suffix that marks a markdown file (default '.md'). "
            "Repeatable. Matching is case-sensitive."
        ),
    )
    g_loc.add_argument(
        "--no-follow-symlinks",
        action="store_false",
        dest="follow_symlinks",
        help=(
            "Skip symbolic links instead of following them. When links are followed "
            "(the default) a link back into an ancestor directory aborts the run."
        ),
    )

    # -----------------------
    # Merge
    # -----------------------
    g_mrg.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        default=os.getenv("MDMERGE_OUTPUT") or DEFAULT_OUTPUT_PATH,
        help="Merged output file, overwritten on every run.",
    )
    g_mrg.add_argument(
        "--separator",
        metavar="SEP",
        dest="separator",
        type=decode_separator,
        default=DEFAULT_SEPARATOR,
        help=r"Text placed between merged files; \n and \t escapes are expanded (default '\n\n---\n\n').",
    )
    g_mrg.add_argument(
        "--encoding-errors",
        choices=ENCODING_ERROR_POLICIES,
        dest="encoding_errors",
        default="strict",
        help=(
            "How invalid UTF-8 in a source file is handled: 'strict' aborts the run, "
            "'replace' substitutes U+FFFD."
        ),
    )
    g_mrg.add_argument(
        "--mkdirs",
        action="store_true",
        dest="mkdirs",
        help="Create the output file's parent directory when it does not exist.",
    )

    # -----------------------
    # Tokens
    # -----------------------
    g_tok.add_argument(
        "-m",
        "--model",
        metavar="NAME",
        dest="model",
        default=os.getenv("MDMERGE_MODEL") or DEFAULT_MODEL,
        help="Model whose tokenizer estimates the size of the result.",
    )
    g_tok.add_argument(
        "--encoding",
        metavar="NAME",
        dest="encoding_name",
        default=None,
        help="Explicit tiktoken encoding (e.g. 'cl100k_base'), bypasses the model lookup.",
    )
    g_tok.add_argument(
        "--no-tokens",
        action="store_false",
        dest="count_tokens",
        help="Skip token estimation.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print a JSON execution report to stderr.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also MDMERGE_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    g_misc.add_argument("--help", action="help", help="Show this help message and exit.")
    return p
