from __future__ import annotations
import os
import stat
from pathlib import Path
from typing import Callable, FrozenSet, Iterator, List, Optional, Sequence, Tuple

from mdmerge.constants import MARKDOWN_SUFFIXES
from mdmerge.core.interfaces import CollectorProtocol, LoggerLikeProtocol
from mdmerge.logging.helpers import get_logger, trace_io
from mdmerge.utils.paths import dir_identity
from mdmerge.utils.suffixes import has_allowed_suffix, normalize_suffixes

ListDir = Callable[[Path], Sequence[str]]


class SymlinkCycleError(RuntimeError):
    """Raised when a followed symlink leads back into one of its ancestors."""

    def __init__(self, path: Path, target: Path) -> None:
        super().__init__(f'symlink cycle: {path} points back to ancestor {target}')
        self.path = path
        self.target = target


class _Frame:
    __slots__ = ('path', 'entries', 'ancestors')

    def __init__(self, path: Path, entries: Iterator[str], ancestors: FrozenSet[Tuple[int, int]]) -> None:
        self.path = path
        self.entries = entries
        self.ancestors = ancestors


def _default_listdir(path: Path) -> Sequence[str]:
    return os.listdir(path)


class MarkdownCollector(CollectorProtocol):
    """Depth-first collector of markdown files.

    Entries are visited in listing order and a subdirectory is descended into
    as soon as it is met, so its files land where the directory appears. The
    walk keeps an explicit stack of open listings; tree depth is not bounded
    by the interpreter's recursion limit.
    """

    def __init__(
        self,
        *,
        suffixes: Optional[Sequence[str]] = None,
        follow_symlinks: bool = True,
        listdir: Optional[ListDir] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        norm = normalize_suffixes(suffixes) if suffixes else list(MARKDOWN_SUFFIXES)
        self._suffixes: Tuple[str, ...] = tuple(norm)
        self._follow = bool(follow_symlinks)
        self._listdir: ListDir = listdir or _default_listdir
        self._log = logger or get_logger('io.walker')

    @property
    def suffixes(self) -> Tuple[str, ...]:
        return self._suffixes

    def _stat(self, path: Path) -> os.stat_result:
        return os.stat(path) if self._follow else os.lstat(path)

    def _open(self, path: Path, ancestors: FrozenSet[Tuple[int, int]], st: os.stat_result) -> _Frame:
        key = dir_identity(st)
        return _Frame(path, iter(self._listdir(path)), ancestors | {key})

    def collect(self, root: Path) -> List[Path]:
        root = Path(root)
        files: List[Path] = []
        stack: List[_Frame] = [self._open(root, frozenset(), os.stat(root))]

        while stack:
            frame = stack[-1]
            name = next(frame.entries, None)
            if name is None:
                stack.pop()
                continue

            fp = frame.path / name
            st = self._stat(fp)
            mode = st.st_mode

            if stat.S_ISDIR(mode):
                if dir_identity(st) in frame.ancestors:
                    raise SymlinkCycleError(fp, Path(os.path.realpath(fp)))
                stack.append(self._open(fp, frame.ancestors, st))
            elif stat.S_ISREG(mode) and has_allowed_suffix(name, self._suffixes):
                files.append(fp)
                trace_io(self._log, 'collected', path=str(fp))

        self._log.debug('collected %d file(s) under %s', len(files), root)
        return files
