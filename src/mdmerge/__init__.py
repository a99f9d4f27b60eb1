from __future__ import annotations

from mdmerge.constants import DEFAULT_SEPARATOR, MARKDOWN_SUFFIXES
from mdmerge.cli import MdMerge, main
from mdmerge.core.models import MergeResult, TokenCount
from mdmerge.io.merger import MarkdownMerger
from mdmerge.io.readers import DefaultTextReader
from mdmerge.io.walker import MarkdownCollector, SymlinkCycleError
from mdmerge.ai.token_budget import TokenEstimator, UnsupportedModelError
from mdmerge.parsing.parser import _build_parser

__version__ = '1.0.0'


def collect_markdown_files(root, *, suffixes=MARKDOWN_SUFFIXES, follow_symlinks: bool = True):
    """Return every markdown file under *root* in depth-first listing order."""
    return MarkdownCollector(suffixes=suffixes, follow_symlinks=follow_symlinks).collect(root)


def merge_markdown_files(source_dir, output_file, separator: str = DEFAULT_SEPARATOR) -> MergeResult:
    """Merge the markdown tree under *source_dir* into *output_file*."""
    return MarkdownMerger().merge(source_dir, output_file, separator)


def count_tokens(text: str, model: str) -> int:
    """Token count of *text* under *model*'s tiktoken encoding."""
    return TokenEstimator().count_tokens(text, model)


__all__ = [
    'MdMerge',
    'main',
    'DEFAULT_SEPARATOR',
    'MergeResult',
    'TokenCount',
    'MarkdownMerger',
    'MarkdownCollector',
    'DefaultTextReader',
    'SymlinkCycleError',
    'TokenEstimator',
    'UnsupportedModelError',
    'collect_markdown_files',
    'merge_markdown_files',
    'count_tokens',
    '_build_parser',
]
