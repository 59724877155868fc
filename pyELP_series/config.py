"""
pyELP_series.config - Runtime configuration

Selects the summation backend used by the series evaluators.

Environment variables (read once at import):

    PYELP_SERIES_BACKEND
        'auto' (default), 'numpy' or 'numba'.
        'auto' uses the Numba kernel for single-epoch evaluation and
        NumPy for batched epochs.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import os
import threading
import warnings
from contextlib import contextmanager

__all__ = [
    'BACKENDS',
    'get_backend',
    'set_backend',
    'use_backend',
]

BACKENDS = ('auto', 'numpy', 'numba')


# =============================================================================
# Global State
# =============================================================================

class _ConfigState:
    """Thread-safe configuration state."""

    def __init__(self):
        self._lock = threading.Lock()
        self._backend = 'auto'

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        backend = os.environ.get('PYELP_SERIES_BACKEND', '').strip().lower()
        if not backend:
            return
        if backend in BACKENDS:
            self._backend = backend
        else:
            warnings.warn(
                f"pyELP_series: ignoring PYELP_SERIES_BACKEND={backend!r}. "
                f"Expected one of {BACKENDS}; using 'auto'.",
                UserWarning,
                stacklevel=2
            )

    @property
    def backend(self) -> str:
        with self._lock:
            return self._backend

    @backend.setter
    def backend(self, value: str):
        with self._lock:
            self._backend = value


# Global state instance
_state = _ConfigState()


def _check_backend(name: str) -> str:
    key = str(name).lower()
    if key not in BACKENDS:
        raise ValueError(f"Unknown backend: {name}. Must be one of {BACKENDS}")
    return key


def get_backend() -> str:
    """Return the configured summation backend."""
    return _state.backend


def set_backend(name: str) -> None:
    """Set the summation backend.

    Parameters
    ----------
    name : str
        'auto', 'numpy' or 'numba'
    """
    _state.backend = _check_backend(name)


@contextmanager
def use_backend(name: str):
    """Context manager to temporarily switch the summation backend.

    Example
    -------
    >>> with use_backend('numpy'):
    ...     dr = evaluate_main_cosine(angles, multipliers, coefficients)
    """
    key = _check_backend(name)
    prev_backend = _state.backend
    _state.backend = key
    try:
        yield
    finally:
        _state.backend = prev_backend
