from __future__ import annotations
"""Markdown merger.

Reads every file the collector returns, joins the contents with a separator
and writes the result in one go. All reads finish before the output file is
opened, so a failed read leaves any existing output untouched.
"""
from pathlib import Path
from typing import List, Optional

from mdmerge.constants import DEFAULT_SEPARATOR, TEXT_ENCODING
from mdmerge.core.interfaces import CollectorProtocol, LoggerLikeProtocol, ReaderProtocol
from mdmerge.core.models import MergeResult
from mdmerge.io.readers import DefaultTextReader
from mdmerge.io.walker import MarkdownCollector
from mdmerge.logging.helpers import get_logger, trace_io
from mdmerge.utils.paths import ensure_parent


class MarkdownMerger:
    def __init__(
        self,
        *,
        collector: Optional[CollectorProtocol] = None,
        reader: Optional[ReaderProtocol] = None,
        create_parents: bool = False,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('io.merger')
        self._collector: CollectorProtocol = collector or MarkdownCollector()
        self._reader: ReaderProtocol = reader or DefaultTextReader()
        self._create_parents = bool(create_parents)

    @property
    def collector(self) -> CollectorProtocol:
        return self._collector

    def collect(self, source_root: Path) -> List[Path]:
        return self._collector.collect(Path(source_root))

    def merge_files(self, files: List[Path], output_path: Path, separator: str = DEFAULT_SEPARATOR) -> MergeResult:
        """Join *files* with *separator* and write them to *output_path*."""
        output_path = Path(output_path)
        contents = [self._reader.read_text(fp) for fp in files]
        merged = separator.join(contents)
        data = merged.encode(TEXT_ENCODING)

        if self._create_parents:
            ensure_parent(output_path)
        with output_path.open('wb') as fp:
            fp.write(data)
        trace_io(self._log, 'wrote', path=str(output_path), bytes=len(data))

        return MergeResult(
            output=output_path,
            files=tuple(files),
            separator_count=max(0, len(files) - 1),
            bytes_written=len(data),
        )

    def merge(self, source_root: Path, output_path: Path, separator: str = DEFAULT_SEPARATOR) -> MergeResult:
        """Collect markdown under *source_root* and merge it into *output_path*."""
        files = self.collect(source_root)
        result = self.merge_files(files, output_path, separator)
        self._log.info('merged %d file(s) into %s', result.files_merged, result.output)
        return result
