#!/usr/bin/env python3
"""
Angular velocity of one motion computed from every supported parameterization
"""

import numpy as np
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pyrotkin.attitude import euler2quat, quat2dcm
from pyrotkin.logger import setup_logger
from pyrotkin.rotations import (
    EulerAnglesZyx, EulerAnglesZyxDiff,
    UnitQuaternion, UnitQuaternionDiff,
    RotationMatrix, RotationMatrixDiff,
    PassiveRotationMatrix, PassiveRotationMatrixDiff,
    RotationVector, RotationVectorDiff,
    LocalAngularVelocityAD, is_near_singularity, supported_conversions
)

STEP = 1e-6


def main():
    """Compare body rates of a yaw-pitch-roll motion"""
    setup_logger(level="DEBUG")

    print("=" * 70)
    print("Body-frame angular velocity example")
    print("=" * 70)

    print("\n=== Supported pairs ===")
    for rotation_name, diff_name in supported_conversions():
        print(f"  {rotation_name:24s} {diff_name}")

    # attitude and euler angle rates
    e = np.array([np.radians(10.0), np.radians(-20.0), np.radians(120.0)])
    de = np.array([0.05, -0.02, 0.30])

    # derivatives of the other parameterizations by central difference
    q = euler2quat(e)
    dq = (euler2quat(e + STEP*de) - euler2quat(e - STEP*de)) / (2*STEP)
    C = quat2dcm(q)
    dC = (quat2dcm(euler2quat(e + STEP*de)) - quat2dcm(euler2quat(e - STEP*de))) / (2*STEP)

    print("\n=== Angular velocity [rad/s] ===")
    results = {
        "Euler ZYX": LocalAngularVelocityAD.from_rotation_diff(
            EulerAnglesZyx(e), EulerAnglesZyxDiff(de)),
        "Quaternion": LocalAngularVelocityAD.from_rotation_diff(
            UnitQuaternion(q), UnitQuaternionDiff(dq)),
        "Passive matrix": LocalAngularVelocityAD.from_rotation_diff(
            PassiveRotationMatrix(C), PassiveRotationMatrixDiff(dC)),
        "Active matrix": LocalAngularVelocityAD.from_rotation_diff(
            RotationMatrix(C.T), RotationMatrixDiff(dC.T)),
    }
    for name, omega in results.items():
        print(f"  {name:16s} {omega}")

    reference = results["Euler ZYX"]
    if all(np.allclose(w.vector, reference.vector, atol=1e-8) for w in results.values()):
        print("✓ All parameterizations agree")
    else:
        print("✗ Parameterizations disagree")

    print("\n=== Singular configurations ===")
    gimbal_lock = EulerAnglesZyx.from_rpy(0.0, np.pi / 2, 0.0)
    print(f"  Euler ZYX at pitch 90 deg singular: {is_near_singularity(gimbal_lock)}")
    zero = RotationVector.from_components(0.0, 0.0, 0.0)
    print(f"  Zero rotation vector singular:      {is_near_singularity(zero)}")
    omega = LocalAngularVelocityAD.from_rotation_diff(
        zero, RotationVectorDiff.from_components(0.1, 0.0, 0.0))
    print(f"  Zero rotation vector rate:          {omega}")

    print("\n" + "=" * 70)
    print("Example completed!")
    print("=" * 70)


if __name__ == "__main__":
    main()
