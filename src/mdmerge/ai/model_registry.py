from __future__ import annotations
"""Model registry for context-window metadata.

Maps model names to the size of their context window so the CLI can tell
whether a merged document fits in one prompt. Resolution is prefix-based and
the most specific prefix wins.

Public API:
    - ModelSpec: Dataclass that describes a model family.
    - register_model(prefix, spec): Register or override a spec at runtime.
    - resolve_model_spec(model): Resolve the closest ModelSpec for a name.
    - context_window_for(model): Convenience to get the context window.
    - get_registry(): Return a copy of the current registry.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ModelSpec:
    """Immutable description of a model family."""
    family: str
    context_window: Optional[int]


_UNKNOWN = ModelSpec(family="unknown", context_window=None)

# Keys are lower-cased model-name prefixes.
_MODEL_SPEC_REGISTRY: Dict[str, ModelSpec] = {
    "gpt-4o": ModelSpec(family="gpt-4o", context_window=128000),
    "gpt-4.1": ModelSpec(family="gpt-4.1", context_window=1047576),
    "gpt-4-turbo": ModelSpec(family="gpt-4-turbo", context_window=128000),
    "gpt-4-32k": ModelSpec(family="gpt-4-32k", context_window=32768),
    "gpt-4": ModelSpec(family="gpt-4", context_window=8192),
    "gpt-3.5-turbo-16k": ModelSpec(family="gpt-3.5-turbo-16k", context_window=16385),
    "gpt-3.5-turbo": ModelSpec(family="gpt-3.5-turbo", context_window=16385),
    "text-davinci-003": ModelSpec(family="text-davinci-003", context_window=4097),
}


def register_model(prefix: str, spec: ModelSpec) -> None:
    """Register or override a model spec.

    Raises:
        ValueError: If prefix is empty.
    """
    key = (prefix or "").strip().lower()
    if not key:
        raise ValueError("model prefix must be non-empty")
    _MODEL_SPEC_REGISTRY[key] = spec


def resolve_model_spec(model: str) -> ModelSpec:
    m = (model or "").lower().strip()
    best: Optional[str] = None
    for prefix in _MODEL_SPEC_REGISTRY:
        if m.startswith(prefix) and (best is None or len(prefix) > len(best)):
            best = prefix
    return _MODEL_SPEC_REGISTRY[best] if best is not None else _UNKNOWN


def context_window_for(model: str) -> Optional[int]:
    return resolve_model_spec(model).context_window


def get_registry() -> Dict[str, ModelSpec]:
    """Return a copy of the current model registry."""
    return dict(_MODEL_SPEC_REGISTRY)
