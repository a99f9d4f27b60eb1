"""
mdmerge.utils – Small shared utilities (suffix normalization, path helpers).
"""
from .paths import dir_identity, ensure_parent
from .suffixes import has_allowed_suffix, normalize_suffixes

__all__ = ["dir_identity", "ensure_parent", "has_allowed_suffix", "normalize_suffixes"]
