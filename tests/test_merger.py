#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Merger test-suite: separator placement, verbatim content, idempotence and
failure behaviour.
"""
from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from typing import List

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from mdmerge import DEFAULT_SEPARATOR, merge_markdown_files  # noqa: E402
from mdmerge.io.merger import MarkdownMerger  # noqa: E402
from mdmerge.io.readers import DefaultTextReader  # noqa: E402
from mdmerge.io.walker import MarkdownCollector  # noqa: E402


def _sorted_listdir(path: Path) -> List[str]:
    return sorted(os.listdir(path))


def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


class MergerBaseTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        base = Path(self._tmp.name)
        self.src = base / "input"
        self.src.mkdir()
        self.out_dir = base / "output"
        self.out_dir.mkdir()
        self.out = self.out_dir / "merged.md"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def merger(self, **kwargs) -> MarkdownMerger:
        kwargs.setdefault("collector", MarkdownCollector(listdir=_sorted_listdir))
        return MarkdownMerger(**kwargs)


# --------------------------------------------------------------------------- #
#  1. Output shape                                                            #
# --------------------------------------------------------------------------- #
class OutputTests(MergerBaseTest):
    def test_scenario_two_files_and_ignored_text(self) -> None:
        _write(self.src / "a.md", "A")
        _write(self.src / "sub/b.md", "B")
        _write(self.src / "c.txt", "ignored")

        result = self.merger().merge(self.src, self.out)

        self.assertEqual(self.out.read_text(encoding="utf-8"), "A\n\n---\n\nB")
        self.assertEqual(result.files_merged, 2)
        self.assertEqual(result.separator_count, 1)
        self.assertEqual(result.output, self.out)

    def test_default_separator_literal(self) -> None:
        self.assertEqual(DEFAULT_SEPARATOR, "\n\n---\n\n")

    def test_separator_appears_k_minus_one_times(self) -> None:
        for i in range(5):
            _write(self.src / f"doc{i}.md", f"# Doc {i}\nbody {i}")

        self.merger().merge(self.src, self.out)
        text = self.out.read_text(encoding="utf-8")

        self.assertEqual(text.count(DEFAULT_SEPARATOR), 4)
        self.assertFalse(text.startswith(DEFAULT_SEPARATOR))
        self.assertFalse(text.endswith(DEFAULT_SEPARATOR))

    def test_single_file_has_no_separator(self) -> None:
        _write(self.src / "only.md", "solo\n")
        result = self.merger().merge(self.src, self.out)
        self.assertEqual(self.out.read_text(encoding="utf-8"), "solo\n")
        self.assertEqual(result.separator_count, 0)

    def test_empty_tree_writes_empty_file(self) -> None:
        _write(self.src / "notes.txt", "not markdown")

        result = self.merger().merge(self.src, self.out)

        self.assertTrue(self.out.exists())
        self.assertEqual(self.out.read_bytes(), b"")
        self.assertEqual(result.files, ())
        self.assertEqual(result.bytes_written, 0)

    def test_custom_separator(self) -> None:
        _write(self.src / "a.md", "A")
        _write(self.src / "b.md", "B")
        _write(self.src / "c.md", "C")

        self.merger().merge(self.src, self.out, separator="\n<!-- next -->\n")

        self.assertEqual(self.out.read_text(encoding="utf-8"), "A\n<!-- next -->\nB\n<!-- next -->\nC")

    def test_contents_are_verbatim(self) -> None:
        (self.src / "crlf.md").write_bytes(b"line1\r\nline2\r\n")
        _write(self.src / "unicode.md", "# Ünïcödé ✓\n")

        self.merger().merge(self.src, self.out, separator="|")

        self.assertEqual(
            self.out.read_bytes(),
            b"line1\r\nline2\r\n|" + "# Ünïcödé ✓\n".encode("utf-8"),
        )

    def test_bytes_written_matches_file_size(self) -> None:
        _write(self.src / "a.md", "ä")
        _write(self.src / "b.md", "b")
        result = self.merger().merge(self.src, self.out)
        self.assertEqual(result.bytes_written, self.out.stat().st_size)

    def test_existing_output_is_overwritten(self) -> None:
        self.out.write_text("stale content that is much longer than the new one", encoding="utf-8")
        _write(self.src / "a.md", "fresh")

        self.merger().merge(self.src, self.out)

        self.assertEqual(self.out.read_text(encoding="utf-8"), "fresh")

    def test_merge_is_idempotent(self) -> None:
        _write(self.src / "a.md", "alpha\n")
        _write(self.src / "x/y.md", "why\n")
        _write(self.src / "x/z/w.md", "double-u\n")

        merger = self.merger()
        merger.merge(self.src, self.out)
        first = self.out.read_bytes()
        merger.merge(self.src, self.out)

        self.assertEqual(self.out.read_bytes(), first)

    def test_merge_files_uses_the_given_order(self) -> None:
        a = _write(self.src / "a.md", "A")
        b = _write(self.src / "b.md", "B")

        result = self.merger().merge_files([b, a], self.out, "+")

        self.assertEqual(self.out.read_text(encoding="utf-8"), "B+A")
        self.assertEqual(result.files, (b, a))

    def test_module_level_helper(self) -> None:
        _write(self.src / "only.md", "one")
        result = merge_markdown_files(self.src, self.out)
        self.assertEqual(result.files_merged, 1)
        self.assertEqual(self.out.read_text(encoding="utf-8"), "one")


# --------------------------------------------------------------------------- #
#  2. Failures & encodings                                                    #
# --------------------------------------------------------------------------- #
class FailureTests(MergerBaseTest):
    def test_missing_output_parent_raises(self) -> None:
        _write(self.src / "a.md", "A")
        target = self.out_dir / "missing" / "merged.md"
        with self.assertRaises(FileNotFoundError):
            self.merger().merge(self.src, target)

    def test_create_parents_makes_output_directory(self) -> None:
        _write(self.src / "a.md", "A")
        target = self.out_dir / "nested" / "deeper" / "merged.md"

        self.merger(create_parents=True).merge(self.src, target)

        self.assertEqual(target.read_text(encoding="utf-8"), "A")

    def test_missing_source_root_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            self.merger().merge(self.src / "absent", self.out)
        self.assertFalse(self.out.exists())

    def test_invalid_utf8_aborts_before_writing(self) -> None:
        self.out.write_text("previous", encoding="utf-8")
        _write(self.src / "a.md", "A")
        (self.src / "b.md").write_bytes(b"caf\xe9")

        with self.assertRaises(UnicodeDecodeError):
            self.merger().merge(self.src, self.out)

        self.assertEqual(self.out.read_text(encoding="utf-8"), "previous")

    def test_vanished_file_aborts_before_writing(self) -> None:
        a = _write(self.src / "a.md", "A")
        merger = self.merger()
        files = merger.collect(self.src)
        a.unlink()

        with self.assertRaises(FileNotFoundError):
            merger.merge_files(files, self.out)
        self.assertFalse(self.out.exists())

    def test_replace_policy_decodes_lossily(self) -> None:
        (self.src / "b.md").write_bytes(b"caf\xe9")

        self.merger(reader=DefaultTextReader(errors="replace")).merge(self.src, self.out)

        self.assertEqual(self.out.read_text(encoding="utf-8"), "caf�")

    def test_unknown_error_policy_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DefaultTextReader(errors="ignore")


if __name__ == "__main__":
    unittest.main()
