"""
Angle and unit helpers for ELP2000-82B series

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import numpy as np

__all__ = [
    'ARCSECONDS_IN_DEGREE',
    'ARCSEC_TO_RAD',
    'DEG_TO_RAD',
    'arcsec_to_degree',
    'arcsec_to_radian',
    'normalize_angle',
    'radian',
]

# Constants
ARCSECONDS_IN_DEGREE = 3600.0
DEG_TO_RAD = np.pi / 180.0  # Degrees to radians
ARCSEC_TO_RAD = DEG_TO_RAD / ARCSECONDS_IN_DEGREE  # Arcseconds to radians


def radian(d):
    """
    Convert degrees to radians

    Parameters
    ----------
    d : float or np.ndarray
        Angle (degrees)

    Returns
    -------
    float or np.ndarray
        Angle (radians)
    """
    return d * DEG_TO_RAD


def arcsec_to_radian(a):
    """Convert a series result from arcseconds to radians"""
    return a * ARCSEC_TO_RAD


def arcsec_to_degree(a):
    """Convert a series result from arcseconds to degrees"""
    return a / ARCSECONDS_IN_DEGREE


def normalize_angle(theta, circle: float = 360.0):
    """
    Normalize an angle to a single rotation

    Parameters
    ----------
    theta : float or np.ndarray
        Angle to normalize
    circle : float, default 360.0
        Circle of the angle (360.0 for degrees, 2*pi for radians)

    Returns
    -------
    float or np.ndarray
        Normalized angle in range [0, circle)
    """
    return np.mod(theta, circle)
