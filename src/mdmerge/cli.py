from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from mdmerge.ai.token_budget import TokenEstimator
from mdmerge.core.interfaces import LoggerFactoryProtocol
from mdmerge.core.models import MergeResult, TokenCount
from mdmerge.core.report import ExecutionReport, StageTimer
from mdmerge.io.merger import MarkdownMerger
from mdmerge.io.readers import DefaultTextReader
from mdmerge.io.walker import MarkdownCollector
from mdmerge.logging.factory import DefaultLoggerFactory
from mdmerge.logging.helpers import get_logger, is_trace_io_enabled
from mdmerge.parsing.parser import _build_parser


logger = get_logger('mdmerge')


def _configure_logging(enable_json: bool, verbose: bool = False) -> LoggerFactoryProtocol:
    """Configure process-wide logging, either JSON or plain text.

    DEBUG is enabled by -v and by MDMERGE_TRACE_IO=1, whose per-file events
    are logged at that level.
    """
    level = logging.DEBUG if (verbose or is_trace_io_enabled()) else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('mdmerge')
    return factory


def _build_merger(ns: argparse.Namespace, loggers: LoggerFactoryProtocol) -> MarkdownMerger:
    collector = MarkdownCollector(
        suffixes=ns.suffix,
        follow_symlinks=ns.follow_symlinks,
        logger=loggers.get_logger('io.walker'),
    )
    reader = DefaultTextReader(errors=ns.encoding_errors, logger=loggers.get_logger('io.readers'))
    return MarkdownMerger(
        collector=collector,
        reader=reader,
        create_parents=ns.mkdirs,
        logger=loggers.get_logger('io.merger'),
    )


class MdMerge:
    """Top-level façade for command-style execution."""

    def __init__(self, *, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self._out = stdout or sys.stdout
        self._err = stderr or sys.stderr
        self.report: Optional[ExecutionReport] = None
        self.merge_result: Optional[MergeResult] = None
        self.token_count: Optional[TokenCount] = None

    def run(self, argv: Sequence[str]) -> int:
        """Run the tool with given argv-like sequence and return the exit status."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('MDMERGE_JSON_LOGS') == '1'
        loggers = _configure_logging(json_logs, ns.verbose)

        report = ExecutionReport(source_root=str(ns.input_dir))
        self.report = report
        merger = _build_merger(ns, loggers)

        with StageTimer(report, 'collect'):
            files = merger.collect(Path(ns.input_dir))
        with StageTimer(report, 'merge'):
            result = merger.merge_files(files, Path(ns.output), ns.separator)
        report.add_merge(result)
        self.merge_result = result
        print(f'Merged markdown written to {ns.output}', file=self._out)

        if ns.count_tokens:
            estimator = TokenEstimator(encoding_name=ns.encoding_name, logger=loggers.get_logger('ai.tokens'))
            with StageTimer(report, 'tokens'):
                count = estimator.count_file_tokens(result.output, ns.model)
            report.add_tokens(count)
            self.token_count = count
            print(f'Number of {count.model} tokens in result: {count.tokens}', file=self._out)
            if count.fits_context is False:
                logger.warning(
                    '⚠  %d tokens exceed the %d-token context window of %s',
                    count.tokens,
                    count.context_window,
                    count.model,
                )

        report.finish()
        if ns.report:
            print(report.to_json(), file=self._err)
        return 0


def main() -> NoReturn:
    """Entry point for the `mdmerge` console script."""
    try:
        raise SystemExit(MdMerge().run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
