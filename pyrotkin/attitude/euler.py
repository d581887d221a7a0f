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
Attitude conversion from euler angles.

This module provides functions for converting from euler angles to other attitude
representations. Euler angles are always stored as [roll, pitch, yaw]; the convention
decides the order in which the elementary rotations are chained:

- 'ZYX': C = Rz(yaw) @ Ry(pitch) @ Rx(roll)
- 'XYZ': C = Rx(roll) @ Ry(pitch) @ Rz(yaw)

In both cases C maps body coordinates into the inertial frame.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def euler2dcm(e):
    """
    Convert 'ZYX' euler angles (roll-pitch-yaw) to the corresponding rotation matrix.

    Parameters
    ----------
    e : array_like, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    C : ndarray, shape (3, 3)
        Rz(yaw) @ Ry(pitch) @ Rx(roll), same dtype as e
    """
    sinP, sinT, sinS = np.sin(e[0]), np.sin(e[1]), np.sin(e[2])
    cosP, cosT, cosS = np.cos(e[0]), np.cos(e[1]), np.cos(e[2])
    C = np.empty((3, 3), dtype=e.dtype)
    C[0, 0] = cosT*cosS
    C[0, 1] = sinP*sinT*cosS - cosP*sinS
    C[0, 2] = sinT*cosP*cosS + sinS*sinP
    C[1, 0] = cosT*sinS
    C[1, 1] = sinP*sinT*sinS + cosP*cosS
    C[1, 2] = sinT*cosP*sinS - cosS*sinP
    C[2, 0] = -sinT
    C[2, 1] = cosT*sinP
    C[2, 2] = cosT*cosP
    return C


@njit(cache=True, fastmath=True)
def euler2quat(e):
    """
    Convert 'ZYX' euler angles (roll-pitch-yaw) to corresponding quaternion.

    The quaternion is computed using the half-angle formulas for
    q = q_z(yaw) * q_y(pitch) * q_x(roll).

    Parameters
    ----------
    e : array_like, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z], same dtype as e
    """
    sinX, sinY, sinZ = np.sin(0.5*e[0]), np.sin(0.5*e[1]), np.sin(0.5*e[2])
    cosX, cosY, cosZ = np.cos(0.5*e[0]), np.cos(0.5*e[1]), np.cos(0.5*e[2])
    q = np.empty(4, dtype=e.dtype)
    q[0] = cosZ*cosY*cosX + sinZ*sinY*sinX
    q[1] = cosZ*cosY*sinX - sinZ*sinY*cosX
    q[2] = cosZ*sinY*cosX + sinZ*cosY*sinX
    q[3] = sinZ*cosY*cosX - cosZ*sinY*sinX
    return q


@njit(cache=True, fastmath=True)
def euler_xyz2quat(e):
    """
    Convert 'XYZ' euler angles (roll-pitch-yaw) to corresponding quaternion.

    q = q_x(roll) * q_y(pitch) * q_z(yaw)

    Parameters
    ----------
    e : array_like, shape (3,)
        Euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z], same dtype as e
    """
    sinX, sinY, sinZ = np.sin(0.5*e[0]), np.sin(0.5*e[1]), np.sin(0.5*e[2])
    cosX, cosY, cosZ = np.cos(0.5*e[0]), np.cos(0.5*e[1]), np.cos(0.5*e[2])
    q = np.empty(4, dtype=e.dtype)
    q[0] = cosX*cosY*cosZ - sinX*sinY*sinZ
    q[1] = sinX*cosY*cosZ + cosX*sinY*sinZ
    q[2] = cosX*sinY*cosZ - sinX*cosY*sinZ
    q[3] = cosX*cosY*sinZ + sinX*sinY*cosZ
    return q


@njit(cache=True, fastmath=True)
def rot_x(phi):
    """Elementary rotation by phi (rad) about the x-axis, active"""
    c, s = np.cos(phi), np.sin(phi)
    R = np.eye(3)
    R[1, 1] = c
    R[1, 2] = -s
    R[2, 1] = s
    R[2, 2] = c
    return R


@njit(cache=True, fastmath=True)
def rot_y(theta):
    """Elementary rotation by theta (rad) about the y-axis, active"""
    c, s = np.cos(theta), np.sin(theta)
    R = np.eye(3)
    R[0, 0] = c
    R[0, 2] = s
    R[2, 0] = -s
    R[2, 2] = c
    return R


@njit(cache=True, fastmath=True)
def rot_z(psi):
    """Elementary rotation by psi (rad) about the z-axis, active"""
    c, s = np.cos(psi), np.sin(psi)
    R = np.eye(3)
    R[0, 0] = c
    R[0, 1] = -s
    R[1, 0] = s
    R[1, 1] = c
    return R
