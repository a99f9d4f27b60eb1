#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates / refreshes the markdown fixture tree used by the
mdmerge test-suite.

Idempotent and 100 % Python.
"""
from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()
DOCS = ROOT / "docs"


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


# ───────────────────── markdown sources ─────────────────────
def _populate_docs() -> None:
    _write(DOCS / "index.md", """
        # Index
        Welcome to the docs.
    """)

    _write(DOCS / "guide/intro.md", """
        # Introduction
        Start here.
    """)

    _write(DOCS / "guide/setup/install.md", """
        # Installation
        ```bash
        pip install mdmerge
        ```
    """)

    _write(DOCS / "api/reference.md", """
        # API reference
        | name | kind |
        |------|------|
        | merge | function |
    """)

    _write(DOCS / "api/notes.txt", "plain text, never merged\n")
    _write(DOCS / "draft.markdown", "# Draft\nonly with -s .markdown\n")
    _write(DOCS / "LOUD.MD", "# Upper-case suffix\n")
    (DOCS / "crlf.md").write_bytes(b"line1\r\nline2\r\n")

    uni = DOCS / "ünicode dir"
    _write(uni / "file with space.md", "# Ünïcödé ✓\n")

    (ROOT / "empty/nested").mkdir(parents=True, exist_ok=True)
    _write(ROOT / "empty/nested/readme.txt", "no markdown here\n")


# ──────────────────────────── main ────────────────────────────
def main() -> None:  # pragma: no cover
    if ROOT.exists():
        shutil.rmtree(ROOT)
    print(f"⚙️  Rebuilding fixture tree → {ROOT}")
    _populate_docs()
    print("✅  Fixture tree READY")


if __name__ == "__main__":  # pragma: no cover
    main()
