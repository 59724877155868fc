#!/usr/bin/env python
u"""
test_utilities.py (10/2026)
"""
import pytest
import numpy as np

import pyELP_series.utilities


def test_radian():
    """
    Tests the conversion of degrees to radians
    """
    assert pyELP_series.utilities.radian(180.0) == pytest.approx(np.pi)
    assert pyELP_series.utilities.radian(0.0) == 0.0
    # test angles in degrees
    angles = np.array([-180, -90, 0, 90, 180, 270, 360])
    # expected values in radians
    exp = np.array([-np.pi, -np.pi/2, 0, np.pi/2, np.pi, 3*np.pi/2, 2*np.pi])
    test = pyELP_series.utilities.radian(angles)
    assert np.allclose(exp, test)


def test_arcsec():
    """
    Tests the conversion of series results from arcseconds
    """
    # test angles in arcseconds
    angles = np.array([-180, -90, 0, 90, 180, 270, 360])*3600.0
    exp = np.array([-np.pi, -np.pi/2, 0, np.pi/2, np.pi, 3*np.pi/2, 2*np.pi])
    test = pyELP_series.utilities.arcsec_to_radian(angles)
    assert np.allclose(exp, test)
    # arcseconds to radians
    atr = np.pi/648000.0
    assert np.allclose(exp, angles*atr)
    # arcseconds to degrees
    test = pyELP_series.utilities.arcsec_to_degree(angles)
    assert np.allclose(test, [-180, -90, 0, 90, 180, 270, 360])
    assert pyELP_series.utilities.ARCSECONDS_IN_DEGREE == 3600.0


def test_normalize_angle():
    """
    Tests the normalization of angles to between 0 and 360 degrees
    """
    # test angles
    angles = np.array([-180, -90, 0, 90, 180, 270, 360, 450])
    # expected values
    exp = np.array([180, 270, 0, 90, 180, 270, 0, 90])
    test = pyELP_series.utilities.normalize_angle(angles)
    assert np.all(exp == test)
    # radians
    test = pyELP_series.utilities.normalize_angle(3*np.pi, circle=2*np.pi)
    assert test == pytest.approx(np.pi)
