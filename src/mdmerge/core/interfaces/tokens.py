from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from mdmerge.core.models import TokenCount


@runtime_checkable
class TokenEstimatorProtocol(Protocol):
    def count_tokens(self, text: str, model: str) -> int:
        ...

    def count_file_tokens(self, path: Path, model: str) -> TokenCount:
        ...
