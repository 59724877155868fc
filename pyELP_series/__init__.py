"""
pyELP_series - Fourier series of the ELP2000-82B lunar theory

Evaluates the Main Problem, perturbation and planetary series of the
ELP2000-82B lunar ephemeris for tables of multipliers and coefficients
supplied by the caller. Every evaluator returns arcseconds.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    import numpy as np
    import pyELP_series

    # Delaunay arguments (D, l', l, F) in radians
    angles = pyELP_series.radian(np.array([297.85, 357.53, 134.96, 93.27]))

    # Longitude contribution of a Main Problem table
    dl = pyELP_series.evaluate_main_sine(angles, multipliers, coefficients)

    # Many epochs at once, angles of shape (4, n_times)
    dl = pyELP_series.evaluate_main_sine(angles_t, multipliers, coefficients)
"""

from . import config
from . import series
from . import tables
from . import utilities
from .series_numba import warmup
from .config import (
    get_backend,
    set_backend,
    use_backend,
)
from .series import (
    evaluate_main_sine,
    evaluate_main_cosine,
    evaluate_precession_series,
    evaluate_planetary_series_a,
    evaluate_planetary_series_b,
)
from .tables import (
    InvalidInputError,
    MainProblemTable,
    PerturbationTable,
    PlanetaryTable,
)
from .utilities import (
    ARCSECONDS_IN_DEGREE,
    arcsec_to_degree,
    arcsec_to_radian,
    normalize_angle,
    radian,
)

__version__ = '0.1.0'
__all__ = [
    'config',
    'series',
    'tables',
    'utilities',
    # Series
    'evaluate_main_sine',
    'evaluate_main_cosine',
    'evaluate_precession_series',
    'evaluate_planetary_series_a',
    'evaluate_planetary_series_b',
    # Tables
    'InvalidInputError',
    'MainProblemTable',
    'PerturbationTable',
    'PlanetaryTable',
    # Units
    'ARCSECONDS_IN_DEGREE',
    'arcsec_to_degree',
    'arcsec_to_radian',
    'normalize_angle',
    'radian',
    # Backend control
    'get_backend',
    'set_backend',
    'use_backend',
    'warmup',
]
