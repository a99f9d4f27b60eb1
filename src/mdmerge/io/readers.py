from __future__ import annotations

"""
Text readers used by the merger.

This module exposes:
  * `FileReader`: abstract base for anything that turns a path into text.
  * `DefaultTextReader`: verbatim UTF-8 reader (no newline translation).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from mdmerge.constants import TEXT_ENCODING
from mdmerge.core.interfaces import LoggerLikeProtocol
from mdmerge.logging.helpers import get_logger, trace_io

ENCODING_ERROR_POLICIES = ('strict', 'replace')


class FileReader(ABC):
    @abstractmethod
    def read_text(self, path: Path) -> str:
        raise NotImplementedError


class DefaultTextReader(FileReader):
    """Read a whole file as UTF-8 text, newlines untouched.

    With ``errors='strict'`` (the default) an undecodable file raises
    ``UnicodeDecodeError``; ``errors='replace'`` substitutes U+FFFD for
    invalid bytes instead. OS errors always propagate.
    """

    def __init__(self, *, errors: str = 'strict', logger: Optional[LoggerLikeProtocol] = None) -> None:
        if errors not in ENCODING_ERROR_POLICIES:
            raise ValueError(f'unsupported encoding error policy {errors!r}')
        self._errors = errors
        self._log = logger or get_logger('io.readers')

    @property
    def errors(self) -> str:
        return self._errors

    def read_text(self, path: Path) -> str:
        with path.open('r', encoding=TEXT_ENCODING, errors=self._errors, newline='') as fp:
            content = fp.read()
        trace_io(self._log, 'read', path=str(path), chars=len(content))
        return content
