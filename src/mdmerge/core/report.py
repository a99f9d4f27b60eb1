from __future__ import annotations

"""
Runtime execution report.

Collects what a run touched (files, bytes, separators) together with the
token estimate and the wall time spent in each stage. Serialized with
`to_json` when the CLI is invoked with --report.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from mdmerge.core.models import MergeResult, TokenCount


@dataclass
class ExecutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    source_root: Optional[str] = None
    output: Optional[str] = None

    files_total: int = 0
    bytes_total: int = 0
    separators: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "collect": 0.0,
            "merge": 0.0,
            "tokens": 0.0,
        }
    )

    model: Optional[str] = None
    encoding: Optional[str] = None
    tokens: Optional[int] = None
    context_window: Optional[int] = None

    def add_merge(self, result: MergeResult) -> None:
        self.output = str(result.output)
        self.files_total += result.files_merged
        self.bytes_total += result.bytes_written
        self.separators += result.separator_count

    def add_tokens(self, count: TokenCount) -> None:
        self.model = count.model
        self.encoding = count.encoding
        self.tokens = count.tokens
        self.context_window = count.context_window

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "source_root": self.source_root,
                "output": self.output,
                "files_total": self.files_total,
                "bytes_total": self.bytes_total,
                "separators": self.separators,
                "time_by_stage": self.time_by_stage,
                "model": self.model,
                "encoding": self.encoding,
                "tokens": self.tokens,
                "context_window": self.context_window,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: ExecutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
