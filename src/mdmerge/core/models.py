from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a single merge run."""
    output: Path
    files: Sequence[Path] = field(default_factory=tuple)
    separator_count: int = 0
    bytes_written: int = 0

    @property
    def files_merged(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class TokenCount:
    model: str
    encoding: str
    tokens: int
    context_window: Optional[int] = None

    @property
    def fits_context(self) -> Optional[bool]:
        if self.context_window is None:
            return None
        return self.tokens <= self.context_window
