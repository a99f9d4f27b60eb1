from __future__ import annotations
from pathlib import Path
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class CollectorProtocol(Protocol):
    """Abstract markdown file collector."""

    def collect(self, root: Path) -> List[Path]:
        """Return every matching file under *root* in traversal order."""
        ...
