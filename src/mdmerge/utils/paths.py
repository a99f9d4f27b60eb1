# src/mdmerge/utils/paths.py
"""
paths – Small path helpers for mdmerge.

Provides:
  • dir_identity(stat_result)  – (device, inode) key used for cycle checks
  • ensure_parent(path)        – create the parent directory of an output file
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple


def dir_identity(st: os.stat_result) -> Tuple[int, int]:
    """Return the (st_dev, st_ino) pair identifying a directory on disk."""
    return (st.st_dev, st.st_ino)


def ensure_parent(path: Path) -> Path:
    """Create *path*'s parent directory if needed and return *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
