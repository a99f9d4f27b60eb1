from __future__ import annotations

"""Logger setup for mdmerge.

Every module logs under the 'mdmerge' namespace. The CLI attaches a single
stderr handler to that logger, formatting records either as
``LEVEL: message`` or as one JSON object per line (--json-logs /
MDMERGE_JSON_LOGS=1). Per-file read/write/collect events go through
`trace_io` and are only emitted with MDMERGE_TRACE_IO=1.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from mdmerge.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ts (UTC, millisecond ISO-8601 with 'Z'), level, module (logger
    name), msg, version, and ctx when the record carries a 'context' dict
    (see `trace_io`).
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # mdmerge/__init__ imports this module, so resolve lazily.
            from mdmerge import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("MDMERGE_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach the stderr handler to 'mdmerge' and return that logger.

    A second call only adjusts the level; the handler and its format stay
    as first configured.
    """
    base = logging.getLogger("mdmerge")
    base.setLevel(level)
    if base.handlers:
        return base

    import sys as _sys

    base.propagate = False
    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """'io.walker' -> 'mdmerge.io.walker'; names already under mdmerge pass through."""
    if not name or name == "mdmerge":
        return logging.getLogger("mdmerge")
    if name.startswith("mdmerge"):
        return logging.getLogger(name)
    return logging.getLogger(f"mdmerge.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv("MDMERGE_TRACE_IO") == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Log a per-file IO event at DEBUG when MDMERGE_TRACE_IO=1.

    Keyword arguments are rendered after the message and attached to the
    record as 'context' for the JSON formatter.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
