from __future__ import annotations
"""
Token estimation for merged documents.

`TokenEstimator` wraps tiktoken: a model name selects its encoding unless an
explicit encoding name is given. Unknown models are an error, there is no
silent fallback to a default encoding.
"""

from pathlib import Path
from typing import Dict, Optional

import tiktoken

from mdmerge.ai.model_registry import context_window_for
from mdmerge.constants import DEFAULT_MODEL, TEXT_ENCODING
from mdmerge.core.interfaces import LoggerLikeProtocol
from mdmerge.core.models import TokenCount
from mdmerge.logging.helpers import get_logger


class UnsupportedModelError(ValueError):
    """Raised when tiktoken has no encoding for the requested model."""


class TokenEstimator:
    def __init__(self, *, encoding_name: Optional[str] = None, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._encoding_name = encoding_name or None
        self._log = logger or get_logger('ai.tokens')
        self._cache: Dict[str, tiktoken.Encoding] = {}

    def encoding_for(self, model: str) -> tiktoken.Encoding:
        key = self._encoding_name or f'model:{model}'
        enc = self._cache.get(key)
        if enc is not None:
            return enc

        if self._encoding_name:
            enc = tiktoken.get_encoding(self._encoding_name)
        else:
            try:
                enc = tiktoken.encoding_for_model(model)
            except KeyError as exc:
                raise UnsupportedModelError(f'no tiktoken encoding known for model {model!r}') from exc
        self._cache[key] = enc
        return enc

    def count_tokens(self, text: str, model: str = DEFAULT_MODEL) -> int:
        """Return the number of tokens *text* encodes to for *model*.

        Special-token literals such as ``<|endoftext|>`` are counted as plain
        text, documentation may legitimately contain them.
        """
        enc = self.encoding_for(model)
        return len(enc.encode(text, disallowed_special=()))

    def count_file_tokens(self, path: Path, model: str = DEFAULT_MODEL) -> TokenCount:
        with Path(path).open('r', encoding=TEXT_ENCODING, newline='') as fp:
            text = fp.read()
        tokens = self.count_tokens(text, model)
        enc = self.encoding_for(model)
        self._log.debug('%s: %d %s token(s) [%s]', path, tokens, model, enc.name)
        return TokenCount(
            model=model,
            encoding=enc.name,
            tokens=tokens,
            context_window=context_window_for(model),
        )
