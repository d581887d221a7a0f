#!/usr/bin/env python3
"""Test suite for core constants and data structures"""

import unittest
import numpy as np
from pyrotkin.core.constants import (
    DEFAULT_DTYPE, SUPPORTED_DTYPES, SKEW_SYMMETRY_TOL,
    ROTVEC_SINGULAR_NORM, EULER_SINGULAR_COS_PITCH
)
from pyrotkin.core.data_structures import RotationUsage, SingularityThresholds


class TestConstants(unittest.TestCase):
    """Test numerical defaults"""

    def test_precisions(self):
        self.assertIs(DEFAULT_DTYPE, np.float64)
        self.assertIn(np.float32, SUPPORTED_DTYPES)
        self.assertIn(DEFAULT_DTYPE, SUPPORTED_DTYPES)

    def test_tolerances_positive(self):
        for value in (SKEW_SYMMETRY_TOL, ROTVEC_SINGULAR_NORM, EULER_SINGULAR_COS_PITCH):
            self.assertGreater(value, 0.0)
            self.assertLess(value, 1e-3)


class TestRotationUsage(unittest.TestCase):

    def test_members(self):
        self.assertEqual({u.name for u in RotationUsage}, {'ACTIVE', 'PASSIVE'})
        self.assertIsNot(RotationUsage.ACTIVE, RotationUsage.PASSIVE)


class TestSingularityThresholds(unittest.TestCase):

    def test_defaults(self):
        thresholds = SingularityThresholds()
        self.assertEqual(thresholds.rotation_vector_norm, ROTVEC_SINGULAR_NORM)
        self.assertEqual(thresholds.euler_cos_pitch, EULER_SINGULAR_COS_PITCH)

    def test_zero_allowed(self):
        thresholds = SingularityThresholds(rotation_vector_norm=0.0, euler_cos_pitch=0.0)
        self.assertEqual(thresholds.rotation_vector_norm, 0.0)


if __name__ == '__main__':
    unittest.main()
