from __future__ import annotations
"""Suffix utilities for the markdown filter.

Tokens passed via `-s/--suffix` are normalized here and matched against
entry names.

Semantics:
    * Tokens WITHOUT a dot are treated as bare extensions and normalized by
      prefixing a dot. Example: "md" -> ".md".
    * Tokens WITH a dot anywhere are treated as explicit "filename tail"
      patterns and left AS-IS. Examples:
        - ".md" stays ".md"
        - "README.md" stays "README.md"  (basename tail)
    * Matching is `str.endswith(...)` over the entry name (not the full
      path). Case is compared exactly as given; names are never folded.

Examples:
    normalize_suffixes(["md"])          -> [".md"]
    normalize_suffixes([".markdown"])   -> [".markdown"]
"""

from typing import Sequence, Tuple


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Normalize suffix tokens from CLI.

    Args:
        suffixes: Raw tokens from `-s/--suffix`.

    Returns:
        A normalized, de-duplicated list of tokens, first occurrence wins.
    """
    if not suffixes:
        return []
    out: list[str] = []
    for raw in suffixes:
        s = (raw or "").strip()
        if not s:
            continue
        if "." not in s:
            s = f".{s}"
        if s not in out:
            out.append(s)
    return out


def has_allowed_suffix(filename: str, suffixes: Tuple[str, ...]) -> bool:
    """Return True if *filename* ends with any of *suffixes*."""
    return filename.endswith(suffixes)
