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

"""
Quaternion kernels.

Quaternions are scalar-first arrays [w, x, y, z] representing the active rotation that
maps body coordinates into the inertial frame, i.e. v_I = q * v_B * q^-1.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def quat2dcm(q):
    """
    Convert quaternion to the corresponding rotation matrix.

    The matrix maps body coordinates into the inertial frame, so for the
    rotation vector v it equals exp(skew(v)).

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    C : ndarray, shape (3, 3)
        Rotation matrix, same dtype as q
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    C = np.empty((3, 3), dtype=q.dtype)
    C[0, 0] = w*w + x*x - y*y - z*z
    C[0, 1] = 2*(x*y - w*z)
    C[0, 2] = 2*(w*y + x*z)
    C[1, 0] = 2*(w*z + x*y)
    C[1, 1] = w*w - x*x + y*y - z*z
    C[1, 2] = 2*(y*z - w*x)
    C[2, 0] = 2*(x*z - w*y)
    C[2, 1] = 2*(y*z + w*x)
    C[2, 2] = w*w - x*x - y*y + z*z
    return C


@njit(cache=True, fastmath=True)
def axis_angle2quat(axis, angle):
    """
    Convert a unit axis and an angle into a quaternion.

    Parameters
    ----------
    axis : array_like, shape (3,)
        Unit rotation axis (not normalized here)
    angle : float
        Rotation angle in radians

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z], same dtype as axis
    """
    s = np.sin(0.5 * angle)
    q = np.empty(4, dtype=axis.dtype)
    q[0] = np.cos(0.5 * angle)
    q[1] = s * axis[0]
    q[2] = s * axis[1]
    q[3] = s * axis[2]
    return q


@njit(cache=True, fastmath=True)
def rotvec2quat(v):
    """
    Convert a rotation vector into a quaternion.

    Parameters
    ----------
    v : array_like, shape (3,)
        Rotation vector (axis scaled by angle in radians)

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z], same dtype as v
    """
    angle = np.sqrt(v[0]*v[0] + v[1]*v[1] + v[2]*v[2])
    q = np.zeros(4, dtype=v.dtype)
    q[0] = 1.0
    if angle > 0.0:
        q = axis_angle2quat(v / angle, angle)
    return q
