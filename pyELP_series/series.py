"""
pyELP_series.series - Fourier series of the ELP2000-82B lunar theory

The theory expresses the lunar coordinates as four families of series

    A{sin|cos}(i1 D + i2 l' + i3 l + i4 F)
    A sin(i1 zeta + i2 D + i3 l' + i4 l + i5 F + phi)
    A sin(i1 Me + i2 V + i3 T + i4 Ma + i5 J + i6 S + i7 U + i8 N
          + i9 D + i10 l + i11 F + phi)
    A sin(i1 Me + i2 V + i3 T + i4 Ma + i5 J + i6 S + i7 U
          + i8 D + i9 l + i10 l' + i11 F + phi)

The Main Problem series uses sine for longitude and latitude and cosine
for distance, so it is provided as two functions. Every function returns
its sum in arcseconds.

Delaunay arguments are always passed in the order (D, l', l, F):

    D   mean elongation of the Moon from the Sun
    l'  mean anomaly of the Sun
    l   mean anomaly of the Moon
    F   mean argument of latitude of the Moon

Angles may carry a trailing time axis, e.g. shape (4, n_times), in which
case the sum is returned for every epoch.

Reference:
    Chapront-Touze, M. and Chapront, J., "Lunar Solution ELP 2000-82B",
    Explanatory note, pp. 2-3.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import warnings
from typing import Optional, Union

import numpy as np

from .config import get_backend
from .series_numba import sum_series_numba
from .tables import (
    InvalidInputError,
    MainProblemTable,
    PerturbationTable,
    PlanetaryTable,
    as_angle_vector,
)

__all__ = [
    'evaluate_main_cosine',
    'evaluate_main_sine',
    'evaluate_planetary_series_a',
    'evaluate_planetary_series_b',
    'evaluate_precession_series',
]

# Positions of the Delaunay arguments in the input vector
_D, _LP, _L, _F = 0, 1, 2, 3

# Delaunay slots appended after the planetary longitudes
_PLANETARY_A_DELAUNAY = [_D, _L, _F]
_PLANETARY_B_DELAUNAY = [_D, _L, _LP, _F]


def _sum_series(angles: np.ndarray,
                multipliers: np.ndarray,
                amplitudes: np.ndarray,
                phases: np.ndarray,
                cosine: bool = False,
                stacklevel: int = 3) -> Union[float, np.ndarray]:
    """
    Sum A * trig(multipliers . angles + phi) over all terms

    Parameters
    ----------
    angles : np.ndarray
        Angles in slot order (radians), shape (n_slots,) or (n_slots, n_times)
    multipliers : np.ndarray
        Multipliers, shape (n_terms, n_slots)
    amplitudes : np.ndarray
        Amplitudes (arcseconds), shape (n_terms,)
    phases : np.ndarray
        Phase offsets (radians), shape (n_terms,)
    cosine : bool, default False
        Use cosine instead of sine
    stacklevel : int, default 3
        Stack level of the public caller for warnings

    Returns
    -------
    float or np.ndarray
        Sum (arcseconds), scalar or shape (n_times,)
    """
    batched = angles.ndim > 1
    backend = get_backend()

    if batched and backend == 'numba':
        warnings.warn(
            "pyELP_series: the numba backend evaluates a single epoch; "
            "using numpy for batched angles.",
            UserWarning,
            stacklevel=stacklevel
        )
    elif not batched and backend in ('auto', 'numba'):
        return float(sum_series_numba(angles, multipliers, amplitudes, phases, cosine))

    # theta[i, t] = sum_k multipliers[i, k] * angles[k, t] + phi[i]
    theta = np.tensordot(multipliers, angles, axes=(1, 0))
    if batched:
        theta += phases[:, np.newaxis]
    else:
        theta += phases

    trig = np.cos(theta) if cosine else np.sin(theta)
    result = np.tensordot(amplitudes, trig, axes=(0, 0))

    if batched:
        return result
    return float(result)


def _epoch_shape_check(label: str, a: np.ndarray, b: np.ndarray) -> None:
    if a.shape[1:] != b.shape[1:]:
        raise InvalidInputError(
            f"{label}: angle arrays disagree on the number of epochs, "
            f"got {a.shape} and {b.shape}"
        )


def _main_problem(angles, multipliers, coefficients, n, cosine):
    table = MainProblemTable.from_arrays(multipliers, coefficients, n)
    slots = as_angle_vector(angles, 4, 4, 'angles')
    phases = np.zeros(table.n_terms)
    # one frame deeper than the other series
    return _sum_series(slots, table.multipliers, table.amplitudes, phases, cosine,
                       stacklevel=4)


def evaluate_main_sine(angles,
                       multipliers,
                       coefficients,
                       n: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Sine series of the Main Problem

        sum A sin(i1 D + i2 l' + i3 l + i4 F)

    Parameters
    ----------
    angles : array_like
        Delaunay arguments (D, l', l, F) in radians, shape (4,) or (4, n_times)
    multipliers : array_like
        Integer multipliers i1..i4, shape (n, 4)
    coefficients : array_like
        A followed by the derivatives dA/ds1..dA/ds6, shape (n, 7).
        Only A enters the sum.
    n : int, optional
        Number of terms; must match the row count of both tables

    Returns
    -------
    float or np.ndarray
        Sum of the series (arcseconds)
    """
    return _main_problem(angles, multipliers, coefficients, n, cosine=False)


def evaluate_main_cosine(angles,
                         multipliers,
                         coefficients,
                         n: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Cosine series of the Main Problem, used for the distance

        sum A cos(i1 D + i2 l' + i3 l + i4 F)

    Arguments as for evaluate_main_sine.
    """
    return _main_problem(angles, multipliers, coefficients, n, cosine=True)


def evaluate_precession_series(precession,
                               angles,
                               multipliers,
                               coefficients,
                               n: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Series for Earth and Moon figure, tidal, relativistic and
    second order planetary perturbations

        sum A sin(i1 zeta + i2 D + i3 l' + i4 l + i5 F + phi)

    Parameters
    ----------
    precession : float or array_like
        Precession zeta (radians), scalar or shape (n_times,)
    angles : array_like
        Delaunay arguments (D, l', l, F) in radians, shape (4,) or (4, n_times)
    multipliers : array_like
        Integer multipliers i1..i5, shape (n, 5)
    coefficients : array_like
        Rows of (phi, A, P), shape (n, 3). P is not used.
    n : int, optional
        Number of terms; must match the row count of both tables

    Returns
    -------
    float or np.ndarray
        Sum of the series (arcseconds)
    """
    table = PerturbationTable.from_arrays(multipliers, coefficients, n)
    delaunay = as_angle_vector(angles, 4, 4, 'angles')
    zeta = np.asarray(precession, dtype=np.float64)

    if delaunay.ndim == 1 and zeta.ndim != 0:
        raise InvalidInputError(
            f"precession must be a scalar for a single epoch, got shape {zeta.shape}"
        )
    try:
        zeta = np.broadcast_to(zeta, delaunay.shape[1:])
    except ValueError as e:
        raise InvalidInputError(
            f"precession shape {zeta.shape} does not match angles {delaunay.shape}"
        ) from e

    slots = np.concatenate([zeta[np.newaxis], delaunay], axis=0)
    return _sum_series(slots, table.multipliers, table.amplitudes, table.phases)


def evaluate_planetary_series_a(planetary_angles,
                                delaunay_angles,
                                multipliers,
                                coefficients,
                                n: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Planetary perturbations, first type (no l' term)

        sum A sin(i1 Me + i2 V + i3 T + i4 Ma + i5 J + i6 S + i7 U + i8 N
                  + i9 D + i10 l + i11 F + phi)

    Parameters
    ----------
    planetary_angles : array_like
        Mean longitudes of Mercury, Venus, Earth, Mars, Jupiter, Saturn,
        Uranus and Neptune (radians), shape (8,) or (8, n_times)
    delaunay_angles : array_like
        Delaunay arguments (D, l', l, F) in radians, shape (4,) or (4, n_times)
    multipliers : array_like
        Integer multipliers i1..i11, shape (n, 11)
    coefficients : array_like
        Rows of (phi, A, P), shape (n, 3). P is not used.
    n : int, optional
        Number of terms; must match the row count of both tables

    Returns
    -------
    float or np.ndarray
        Sum of the series (arcseconds)
    """
    table = PlanetaryTable.from_arrays(multipliers, coefficients, n)
    planets = as_angle_vector(planetary_angles, 8, 8, 'planetary_angles')
    delaunay = as_angle_vector(delaunay_angles, 4, 4, 'delaunay_angles')
    _epoch_shape_check('evaluate_planetary_series_a', planets, delaunay)

    slots = np.concatenate([planets, delaunay[_PLANETARY_A_DELAUNAY]], axis=0)
    return _sum_series(slots, table.multipliers, table.amplitudes, table.phases)


def evaluate_planetary_series_b(planetary_angles,
                                delaunay_angles,
                                multipliers,
                                coefficients,
                                n: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Planetary perturbations, second type (no Neptune term)

        sum A sin(i1 Me + i2 V + i3 T + i4 Ma + i5 J + i6 S + i7 U
                  + i8 D + i9 l + i10 l' + i11 F + phi)

    Parameters
    ----------
    planetary_angles : array_like
        Mean longitudes of Mercury through Uranus (radians), shape (7,) or
        (7, n_times). An eighth row (Neptune) is accepted and ignored so
        the same vector can be passed to both planetary series.
    delaunay_angles : array_like
        Delaunay arguments (D, l', l, F) in radians, shape (4,) or (4, n_times)
    multipliers : array_like
        Integer multipliers i1..i11, shape (n, 11)
    coefficients : array_like
        Rows of (phi, A, P), shape (n, 3). P is not used.
    n : int, optional
        Number of terms; must match the row count of both tables

    Returns
    -------
    float or np.ndarray
        Sum of the series (arcseconds)
    """
    table = PlanetaryTable.from_arrays(multipliers, coefficients, n)
    planets = as_angle_vector(planetary_angles, 7, 8, 'planetary_angles')
    delaunay = as_angle_vector(delaunay_angles, 4, 4, 'delaunay_angles')
    _epoch_shape_check('evaluate_planetary_series_b', planets, delaunay)

    slots = np.concatenate([planets[:7], delaunay[_PLANETARY_B_DELAUNAY]], axis=0)
    return _sum_series(slots, table.multipliers, table.amplitudes, table.phases)
