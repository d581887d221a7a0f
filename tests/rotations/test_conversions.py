#!/usr/bin/env python3
"""Test suite for the rotation derivative to angular velocity dispatch"""

import unittest
import numpy as np
from pyrotkin.attitude.euler import euler2quat, euler_xyz2quat
from pyrotkin.attitude.quaternion import axis_angle2quat, quat2dcm, rotvec2quat
from pyrotkin.core.data_structures import RotationUsage
from pyrotkin.rotations import conversions
from pyrotkin.rotations.base import MatrixData, VectorData
from pyrotkin.rotations.conversions import (
    UnsupportedConversionError, convert, get_conversion, register_conversion,
    supported_conversions
)
from pyrotkin.rotations.representations import (
    UnitQuaternion, RotationMatrix, PassiveRotationMatrix, AngleAxis,
    RotationVector, EulerAnglesZyx, EulerAnglesXyz
)
from pyrotkin.rotations.derivatives import (
    UnitQuaternionDiff, RotationMatrixDiff, PassiveRotationMatrixDiff,
    AngleAxisDiff, RotationVectorDiff, EulerAnglesZyxDiff, EulerAnglesXyzDiff
)

STEP = 1e-6


def central_difference(func, x0, dx):
    """Derivative of func(x0 + t*dx) at t = 0"""
    return (func(x0 + STEP*dx) - func(x0 - STEP*dx)) / (2.0*STEP)


class TestDispatch(unittest.TestCase):
    """Test lookup of conversion formulas"""

    def test_supported_pairs(self):
        pairs = supported_conversions()
        self.assertEqual(len(pairs), 7)
        self.assertIn(('UnitQuaternion', 'UnitQuaternionDiff'), pairs)
        self.assertIn(('PassiveRotationMatrix', 'PassiveRotationMatrixDiff'), pairs)
        self.assertEqual(pairs, sorted(pairs))

    def test_unsupported_pair(self):
        q = UnitQuaternion.from_components(1.0, 0.0, 0.0, 0.0)
        dv = RotationVectorDiff.from_components(0.1, 0.2, 0.3)
        with self.assertRaises(UnsupportedConversionError) as context:
            convert(q, dv)
        self.assertIsInstance(context.exception, TypeError)
        self.assertIn('UnitQuaternion', str(context.exception))

    def test_active_matrix_with_passive_derivative(self):
        with self.assertRaises(TypeError):
            convert(RotationMatrix(np.eye(3)), PassiveRotationMatrixDiff(np.zeros((3, 3))))

    def test_non_rotation_arguments(self):
        with self.assertRaises(TypeError):
            convert(np.eye(3), np.zeros((3, 3)))

    def test_exact_type_lookup(self):
        """Subclasses are not matched through their base class"""
        class MyQuaternion(UnitQuaternion):
            pass

        with self.assertRaises(UnsupportedConversionError):
            get_conversion(MyQuaternion, UnitQuaternionDiff)

    def test_zyx_identity(self):
        omega = convert(EulerAnglesZyx.from_rpy(0.0, 0.0, 0.0),
                        EulerAnglesZyxDiff.from_rpy(1.0, 2.0, 3.0))
        np.testing.assert_array_equal(omega, [1.0, 2.0, 3.0])

    def test_quaternion_matches_zyx_at_identity(self):
        omega_quat = convert(UnitQuaternion.from_components(1.0, 0.0, 0.0, 0.0),
                             UnitQuaternionDiff.from_components(0.0, 0.05, 0.1, 0.15))
        omega_euler = convert(EulerAnglesZyx.from_rpy(0.0, 0.0, 0.0),
                              EulerAnglesZyxDiff.from_rpy(0.1, 0.2, 0.3))
        np.testing.assert_allclose(omega_quat, omega_euler, atol=1e-15)

    def test_zero_derivative(self):
        q = euler2quat(np.array([0.4, -0.3, 2.0]))
        C = quat2dcm(q)
        cases = [
            (UnitQuaternion(q), UnitQuaternionDiff(np.zeros(4))),
            (RotationMatrix(C.T), RotationMatrixDiff(np.zeros((3, 3)))),
            (PassiveRotationMatrix(C), PassiveRotationMatrixDiff(np.zeros((3, 3)))),
            (AngleAxis(0.8, np.array([0.0, 0.6, 0.8])), AngleAxisDiff(0.0, np.zeros(3))),
            (RotationVector.from_components(0.3, -0.6, 0.9), RotationVectorDiff(np.zeros(3))),
            (EulerAnglesZyx.from_rpy(0.4, -0.3, 2.0), EulerAnglesZyxDiff(np.zeros(3))),
            (EulerAnglesXyz.from_rpy(0.4, -0.3, 2.0), EulerAnglesXyzDiff(np.zeros(3))),
        ]
        for rotation, diff in cases:
            np.testing.assert_array_equal(convert(rotation, diff), np.zeros(3),
                                          err_msg=type(rotation).__name__)

    def test_precision_follows_rotation(self):
        rotation = EulerAnglesZyx.from_rpy(0.1, 0.2, 0.3, dtype=np.float32)
        diff = EulerAnglesZyxDiff.from_rpy(0.1, 0.2, 0.3)
        self.assertEqual(convert(rotation, diff).dtype, np.float32)
        self.assertEqual(convert(rotation.cast(np.float64), diff).dtype, np.float64)


class TestCrossRepresentation(unittest.TestCase):
    """All parameterizations of one motion give the same angular velocity"""

    def setUp(self):
        self.e0 = np.array([0.4, -0.3, 2.0])
        self.de = np.array([0.15, -0.25, 0.35])
        self.q = euler2quat(self.e0)
        self.dq = central_difference(euler2quat, self.e0, self.de)
        self.omega = convert(UnitQuaternion(self.q), UnitQuaternionDiff(self.dq))

    def test_quaternion_vs_zyx(self):
        omega = convert(EulerAnglesZyx(self.e0), EulerAnglesZyxDiff(self.de))
        np.testing.assert_allclose(omega, self.omega, atol=1e-8)

    def test_quaternion_vs_xyz(self):
        q = euler_xyz2quat(self.e0)
        dq = central_difference(euler_xyz2quat, self.e0, self.de)
        omega_quat = convert(UnitQuaternion(q), UnitQuaternionDiff(dq))
        omega = convert(EulerAnglesXyz(self.e0), EulerAnglesXyzDiff(self.de))
        np.testing.assert_allclose(omega, omega_quat, atol=1e-8)

    def test_quaternion_vs_passive_matrix(self):
        C = quat2dcm(self.q)
        dC = central_difference(lambda e: quat2dcm(euler2quat(e)), self.e0, self.de)
        omega = convert(PassiveRotationMatrix(C), PassiveRotationMatrixDiff(dC))
        np.testing.assert_allclose(omega, self.omega, atol=1e-8)

    def test_quaternion_vs_active_matrix(self):
        R = quat2dcm(self.q).T
        dR = central_difference(lambda e: quat2dcm(euler2quat(e)).T, self.e0, self.de)
        omega = convert(RotationMatrix(R), RotationMatrixDiff(dR))
        np.testing.assert_allclose(omega, self.omega, atol=1e-8)

    def test_quaternion_vs_rotation_vector(self):
        v0 = np.array([0.3, -0.6, 0.9])
        dv = np.array([0.2, 0.1, -0.4])
        q = rotvec2quat(v0)
        dq = central_difference(rotvec2quat, v0, dv)
        omega_quat = convert(UnitQuaternion(q), UnitQuaternionDiff(dq))
        omega = convert(RotationVector(v0), RotationVectorDiff(dv))
        np.testing.assert_allclose(omega, omega_quat, atol=1e-8)

    def test_quaternion_vs_angle_axis_fixed_axis(self):
        axis = np.array([1.0, 2.0, -2.0]) / 3.0
        angle, dangle = 0.9, 0.4
        q = axis_angle2quat(axis, angle)
        dq = (axis_angle2quat(axis, angle + STEP*dangle)
              - axis_angle2quat(axis, angle - STEP*dangle)) / (2.0*STEP)
        omega_quat = convert(UnitQuaternion(q), UnitQuaternionDiff(dq))
        omega = convert(AngleAxis(angle, axis), AngleAxisDiff(dangle, np.zeros(3)))
        np.testing.assert_allclose(omega, omega_quat, atol=1e-8)


class DummyRotation(VectorData):
    pass


class DummyDiff(VectorData):
    pass


class DummyPassiveDiff(MatrixData):
    usage = RotationUsage.PASSIVE


class TestRegistration(unittest.TestCase):
    """Test register_conversion"""

    def setUp(self):
        self.addCleanup(conversions._CONVERSIONS.pop, (DummyRotation, DummyDiff), None)

    def test_register_logs_and_dispatches(self):
        def _from_dummy(rotation, diff):
            return diff.data.copy()

        with self.assertLogs('pyrotkin.rotations.conversions', level='DEBUG') as captured:
            register_conversion(DummyRotation, DummyDiff)(_from_dummy)
        self.assertIn('DummyRotation', captured.output[0])

        omega = convert(DummyRotation(np.zeros(3)), DummyDiff(np.array([1.0, 2.0, 3.0])))
        np.testing.assert_array_equal(omega, [1.0, 2.0, 3.0])

    def test_diff_already_paired(self):
        with self.assertRaises(ValueError):
            register_conversion(DummyRotation, RotationVectorDiff)(lambda r, d: d.data)
        self.assertEqual(get_conversion(RotationVector, RotationVectorDiff).__name__,
                         '_from_rotation_vector')

    def test_usage_mismatch(self):
        with self.assertRaises(ValueError):
            register_conversion(DummyRotation, DummyPassiveDiff)(lambda r, d: d.data)
        self.assertNotIn(('DummyRotation', 'DummyPassiveDiff'), supported_conversions())


if __name__ == '__main__':
    unittest.main()
