#!/usr/bin/env python3
"""Test suite for euler angle and quaternion helpers against scipy"""

import unittest
import numpy as np
import pyrotkin.attitude
from scipy.spatial.transform import Rotation
from pyrotkin.attitude.euler import euler2dcm, euler2quat, euler_xyz2quat, rot_x, rot_y, rot_z
from pyrotkin.attitude.quaternion import quat2dcm, axis_angle2quat, rotvec2quat


def to_scalar_first(q_xyzw):
    return np.array([q_xyzw[3], q_xyzw[0], q_xyzw[1], q_xyzw[2]])


def assert_same_rotation(q1, q2, atol=1e-12):
    """Quaternions q and -q describe the same rotation"""
    sign = 1.0 if np.dot(q1, q2) >= 0.0 else -1.0
    np.testing.assert_allclose(q1, sign * q2, atol=atol)


class TestEulerConversions(unittest.TestCase):
    """Test euler angle conversions"""

    def setUp(self):
        self.angles = [
            np.array([0.0, 0.0, 0.0]),
            np.array([0.1, 0.2, 0.3]),
            np.array([-1.2, 0.7, 2.9]),
            np.array([2.5, -1.3, -0.4]),
        ]

    def test_euler2quat_zyx(self):
        for e in self.angles:
            roll, pitch, yaw = e
            expected = to_scalar_first(Rotation.from_euler('ZYX', [yaw, pitch, roll]).as_quat())
            assert_same_rotation(euler2quat(e), expected)

    def test_euler_xyz2quat(self):
        for e in self.angles:
            expected = to_scalar_first(Rotation.from_euler('XYZ', e).as_quat())
            assert_same_rotation(euler_xyz2quat(e), expected)

    def test_euler2dcm(self):
        for e in self.angles:
            roll, pitch, yaw = e
            expected = Rotation.from_euler('ZYX', [yaw, pitch, roll]).as_matrix()
            np.testing.assert_allclose(euler2dcm(e), expected, atol=1e-12)
            np.testing.assert_allclose(euler2dcm(e), rot_z(yaw) @ rot_y(pitch) @ rot_x(roll),
                                       atol=1e-12)

    def test_elementary_rotations(self):
        for angle in [-2.0, 0.3, 1.5]:
            np.testing.assert_allclose(rot_x(angle), Rotation.from_euler('x', angle).as_matrix(),
                                       atol=1e-12)
            np.testing.assert_allclose(rot_y(angle), Rotation.from_euler('y', angle).as_matrix(),
                                       atol=1e-12)
            np.testing.assert_allclose(rot_z(angle), Rotation.from_euler('z', angle).as_matrix(),
                                       atol=1e-12)


class TestQuaternionConversions(unittest.TestCase):
    """Test quaternion helpers"""

    def test_quat2dcm(self):
        q = np.array([0.8, 0.2, -0.4, 0.4])
        q /= np.linalg.norm(q)
        expected = Rotation.from_quat([q[1], q[2], q[3], q[0]]).as_matrix()
        np.testing.assert_allclose(quat2dcm(q), expected, atol=1e-12)

    def test_quat2dcm_matches_euler(self):
        e = np.array([0.4, -0.3, 2.0])
        np.testing.assert_allclose(quat2dcm(euler2quat(e)), euler2dcm(e), atol=1e-12)

    def test_axis_angle2quat(self):
        axis = np.array([1.0, 2.0, -2.0]) / 3.0
        q = axis_angle2quat(axis, 0.9)
        assert_same_rotation(q, to_scalar_first(Rotation.from_rotvec(0.9 * axis).as_quat()))

    def test_rotvec2quat(self):
        v = np.array([0.3, -0.6, 0.9])
        assert_same_rotation(rotvec2quat(v), to_scalar_first(Rotation.from_rotvec(v).as_quat()))

    def test_rotvec2quat_zero(self):
        np.testing.assert_array_equal(rotvec2quat(np.zeros(3)), [1.0, 0.0, 0.0, 0.0])

    def test_dtype_preserved(self):
        e = np.array([0.1, 0.2, 0.3], dtype=np.float32)
        self.assertEqual(euler2quat(e).dtype, np.float32)
        self.assertEqual(euler2dcm(e).dtype, np.float32)
        self.assertEqual(quat2dcm(euler2quat(e)).dtype, np.float32)

    def test_exported_quaternion_helpers(self):
        exported = {name for name in pyrotkin.attitude.__all__ if 'quat' in name
                    and 'rate' not in name}
        self.assertEqual(exported, {'euler2quat', 'euler_xyz2quat', 'quat2dcm',
                                    'axis_angle2quat', 'rotvec2quat'})
        for name in pyrotkin.attitude.__all__:
            self.assertTrue(hasattr(pyrotkin.attitude, name), name)


if __name__ == '__main__':
    unittest.main()
