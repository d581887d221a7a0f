# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Rotation representations consumed by the angular velocity conversions.

These are read-only value containers. They validate shape and precision on
construction but do not normalize or orthogonalize their data: a quaternion is
trusted to be of unit length and a matrix to be orthonormal.
"""

import numpy as np

from ..core.data_structures import RotationUsage
from .base import AngleAxisData, EulerData, MatrixData, QuaternionData, VectorData


class UnitQuaternion(QuaternionData):
    """
    Unit quaternion [w, x, y, z] of an active rotation.

    Examples
    --------
    >>> q = UnitQuaternion.from_components(1.0, 0.0, 0.0, 0.0)
    >>> float(q.w)
    1.0
    """


class RotationMatrix(MatrixData):
    """
    Rotation matrix with active usage.

    Paired with RotationMatrixDiff, the body angular velocity satisfies
    skew(w) = R @ dR^T.
    """
    usage = RotationUsage.ACTIVE

    def inverted(self) -> 'RotationMatrix':
        """Inverse rotation (the transpose)"""
        return type(self)(self.data.T)


class PassiveRotationMatrix(MatrixData):
    """
    Rotation matrix with passive usage.

    Paired with PassiveRotationMatrixDiff, the body angular velocity satisfies
    skew(w) = C^-1 @ dC.
    """
    usage = RotationUsage.PASSIVE

    def inverted(self) -> 'PassiveRotationMatrix':
        """Inverse rotation (the transpose)"""
        return type(self)(self.data.T)


class AngleAxis(AngleAxisData):
    """
    Rotation by ``angle`` (rad) about the unit vector ``axis``.

    Examples
    --------
    >>> aa = AngleAxis(np.pi / 2, np.array([0.0, 0.0, 1.0]))
    >>> aa.axis
    array([0., 0., 1.])
    """


class RotationVector(VectorData):
    """Rotation vector: rotation axis scaled by the rotation angle (rad)"""

    @property
    def angle(self):
        """Rotation angle, the vector magnitude"""
        return np.linalg.norm(self.data)


class EulerAnglesZyx(EulerData):
    """Euler angles [roll, pitch, yaw] for C = Rz(yaw) @ Ry(pitch) @ Rx(roll)"""


class EulerAnglesXyz(EulerData):
    """Euler angles [roll, pitch, yaw] for C = Rx(roll) @ Ry(pitch) @ Rz(yaw)"""
