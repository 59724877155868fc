"""
Numba-accelerated series summation

Single-epoch kernel for the ELP2000-82B series. Used by the 'numba' and
'auto' backends when the angles describe one epoch.

Call warmup() once at start-up to pay the JIT compilation cost before
the first evaluation.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""


import numpy as np
from numba import jit


@jit(nopython=True, fastmath=True)
def sum_series_numba(angles: np.ndarray,
                     multipliers: np.ndarray,
                     amplitudes: np.ndarray,
                     phases: np.ndarray,
                     cosine: bool) -> float:
    """
    Numba version of the series summation

    Parameters
    ----------
    angles : np.ndarray
        Angles in slot order (radians), shape (n_slots,)
    multipliers : np.ndarray
        Integer multipliers as float64, shape (n_terms, n_slots)
    amplitudes : np.ndarray
        Amplitudes (arcseconds), shape (n_terms,)
    phases : np.ndarray
        Phase offsets (radians), shape (n_terms,)
    cosine : bool
        Use cosine instead of sine

    Returns
    -------
    float
        Sum of the series (arcseconds)
    """
    n_terms = multipliers.shape[0]
    n_slots = angles.shape[0]

    total = 0.0
    for i in range(n_terms):
        theta = phases[i]
        for k in range(n_slots):
            theta += multipliers[i, k] * angles[k]
        if cosine:
            total += amplitudes[i] * np.cos(theta)
        else:
            total += amplitudes[i] * np.sin(theta)

    return total


def warmup():
    """Warm up JIT compilation"""
    angles = np.zeros(4)
    multipliers = np.zeros((2, 4))
    amplitudes = np.ones(2)
    phases = np.zeros(2)
    _ = sum_series_numba(angles, multipliers, amplitudes, phases, False)
    _ = sum_series_numba(angles, multipliers, amplitudes, phases, True)
