"""
pyELP_series.tables - Typed ELP2000-82B series tables

Each table pairs a multiplier array with a coefficient array and fixes
the column layout of one family of series:

    MainProblemTable     multipliers (n, 4)   coefficients (n, 7)
                         [A, dA/ds1 ... dA/ds6]
    PerturbationTable    multipliers (n, 5)   coefficients (n, 3)
                         [phi, A, P]
    PlanetaryTable       multipliers (n, 11)  coefficients (n, 3)
                         [phi, A, P]

Arrays are copied to float64 and made read-only, so one table may be
shared between threads and reused across epochs.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

__all__ = [
    'InvalidInputError',
    'MainProblemTable',
    'PerturbationTable',
    'PlanetaryTable',
    'as_angle_vector',
]


class InvalidInputError(ValueError):
    """Raised for malformed series tables or angle vectors"""


def _as_table_array(values, n_columns: int, label: str, name: str) -> np.ndarray:
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name}: {label} is not a numeric table: {e}") from e

    # an empty list stands for an empty series
    if arr.size == 0 and arr.ndim < 2:
        arr = arr.reshape(0, n_columns)

    if arr.ndim != 2 or arr.shape[1] != n_columns:
        raise InvalidInputError(
            f"{name}: {label} must have shape (n, {n_columns}), got {arr.shape}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name}: {label} contains non-finite values")

    arr.setflags(write=False)
    return arr


def as_angle_vector(values, min_length: int, max_length: int, label: str) -> np.ndarray:
    """
    Convert angles to a float64 array of shape (k,) or (k, n_times)

    Parameters
    ----------
    values : array_like
        Angles (radians), leading axis indexes the angle slot
    min_length : int
        Minimum number of angle slots
    max_length : int
        Maximum number of angle slots
    label : str
        Name used in error messages

    Returns
    -------
    np.ndarray
        Angles (radians)
    """
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{label} is not a numeric array: {e}") from e

    if arr.ndim == 0 or not (min_length <= arr.shape[0] <= max_length):
        expected = min_length if min_length == max_length else f"{min_length}-{max_length}"
        raise InvalidInputError(
            f"{label} must have {expected} angles along the first axis, got shape {arr.shape}"
        )
    if arr.ndim > 2:
        raise InvalidInputError(f"{label} must be 1-D or 2-D, got shape {arr.shape}")
    return arr


@dataclass(frozen=True, eq=False)
class _SeriesTable:
    multipliers: np.ndarray
    coefficients: np.ndarray

    # column layout, set by subclasses
    n_multipliers = 0
    n_coefficients = 0

    @classmethod
    def from_arrays(cls, multipliers, coefficients, n: Optional[int] = None):
        """
        Validate multiplier and coefficient arrays and build a table

        Parameters
        ----------
        multipliers : array_like
            Integer multipliers, shape (n, n_multipliers)
        coefficients : array_like
            Coefficients, shape (n, n_coefficients)
        n : int, optional
            Expected number of terms (default: number of multiplier rows)

        Returns
        -------
        table
            Validated, read-only table

        Raises
        ------
        InvalidInputError
            If a shape, row count or value does not fit the layout
        """
        name = cls.__name__
        m = _as_table_array(multipliers, cls.n_multipliers, 'multipliers', name)
        c = _as_table_array(coefficients, cls.n_coefficients, 'coefficients', name)

        if not np.array_equal(m, np.round(m)):
            raise InvalidInputError(f"{name}: multipliers must be integers")
        if m.shape[0] != c.shape[0]:
            raise InvalidInputError(
                f"{name}: {m.shape[0]} multiplier rows but {c.shape[0]} coefficient rows"
            )
        if n is not None:
            if n < 0:
                raise InvalidInputError(f"{name}: number of terms must be non-negative, got {n}")
            if n != m.shape[0]:
                raise InvalidInputError(f"{name}: expected {n} terms, got {m.shape[0]}")

        return cls(m, c)

    @property
    def n_terms(self) -> int:
        return self.multipliers.shape[0]

    def __len__(self) -> int:
        return self.n_terms


@dataclass(frozen=True, eq=False)
class MainProblemTable(_SeriesTable):
    """
    Main Problem series, A{sin|cos}(i1 D + i2 l' + i3 l + i4 F)

    Attributes
    ----------
    multipliers : np.ndarray
        Multipliers of (D, l', l, F), shape (n, 4)
    coefficients : np.ndarray
        A followed by six derivatives dA/ds_i, shape (n, 7)
    """
    n_multipliers = 4
    n_coefficients = 7

    @property
    def amplitudes(self) -> np.ndarray:
        """Amplitude A (arcseconds), shape (n,)"""
        return self.coefficients[:, 0]

    @property
    def derivatives(self) -> np.ndarray:
        """Partial derivatives dA/ds_i, shape (n, 6); not part of the sum"""
        return self.coefficients[:, 1:]


@dataclass(frozen=True, eq=False)
class _PhaseAmplitudePeriodTable(_SeriesTable):
    n_coefficients = 3

    @property
    def phases(self) -> np.ndarray:
        """Phase phi (radians), shape (n,)"""
        return self.coefficients[:, 0]

    @property
    def amplitudes(self) -> np.ndarray:
        """Amplitude A (arcseconds), shape (n,)"""
        return self.coefficients[:, 1]

    @property
    def periods(self) -> np.ndarray:
        """Approximate period P (days), shape (n,); not part of the sum"""
        return self.coefficients[:, 2]


@dataclass(frozen=True, eq=False)
class PerturbationTable(_PhaseAmplitudePeriodTable):
    """
    Figure, tidal, relativistic and second order planetary series,
    A sin(i1 zeta + i2 D + i3 l' + i4 l + i5 F + phi)
    """
    n_multipliers = 5


@dataclass(frozen=True, eq=False)
class PlanetaryTable(_PhaseAmplitudePeriodTable):
    """
    Planetary perturbation series with 11 multipliers per term

    The slot order differs between the two planetary series; see
    evaluate_planetary_series_a and evaluate_planetary_series_b.
    """
    n_multipliers = 11
