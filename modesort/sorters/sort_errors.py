"""
Sort errors and option resolution.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

SORT_BACKENDS: Tuple[str, ...] = ("builtin", "merge", "numpy")
DEFAULT_BACKEND = "builtin"
DEFAULT_WORKERS = 1

EMPTY_SEQUENCE_MESSAGE = "Cannot find the mode of an empty sequence."

_TRUTHY = ("1", "true", "yes", "on")


class EmptySequenceError(ValueError):
    """
    Raised when the mode is requested for a sequence with no elements.
    """

    def __init__(self, message: str = EMPTY_SEQUENCE_MESSAGE) -> None:
        super().__init__(message)


class UnknownBackendError(ValueError):
    """
    Raised when a non-mode sort backend name is not registered.
    """

    def __init__(self, backend: str, *, choices: Tuple[str, ...] = SORT_BACKENDS) -> None:
        super().__init__(
            f"Unknown sort backend {backend!r}; expected one of {', '.join(choices)}."
        )
        self.backend = backend
        self.choices = choices


def resolve_backend(backend: Optional[str] = None) -> str:
    """
    Resolve the non-mode sort backend.

    Priority:
    1) explicit argument (must be valid)
    2) env MODESORT_BACKEND (ignored when invalid)
    3) DEFAULT_BACKEND
    """
    if backend is not None:
        if backend not in SORT_BACKENDS:
            raise UnknownBackendError(backend)
        return backend

    raw = os.getenv("MODESORT_BACKEND")
    if raw is not None and raw.strip().lower() in SORT_BACKENDS:
        return raw.strip().lower()
    return DEFAULT_BACKEND


def resolve_workers(workers: Optional[int] = None) -> int:
    """
    Resolve the worker count used for mode finding.

    Priority:
    1) explicit argument
    2) env MODESORT_WORKERS
    3) DEFAULT_WORKERS

    Non-positive or unparsable values fall back to DEFAULT_WORKERS.
    """
    raw = workers if workers is not None else os.getenv("MODESORT_WORKERS")
    if raw is None:
        return DEFAULT_WORKERS

    try:
        count = int(raw)
        if count > 0:
            return count
    except (TypeError, ValueError):
        pass
    return DEFAULT_WORKERS


def debug_enabled_from_env() -> bool:
    """True when env MODESORT_DEBUG holds a truthy flag."""
    return os.getenv("MODESORT_DEBUG", "").strip().lower() in _TRUTHY
