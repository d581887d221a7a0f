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
Attitude kernels for rotation kinematics.

This module provides numba-compiled functions on plain numpy arrays:
- Skew symmetric matrices (skew, deskew, skew_asymmetry)
- Euler angle conversions ('ZYX' and 'XYZ', angles stored as [roll, pitch, yaw])
- Quaternion conversions (scalar-first [w, x, y, z])
- Attitude rate to body-frame angular velocity kernels

All rotations assume right-hand coordinate frames and map body coordinates into the
inertial frame unless stated otherwise.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

from .euler import euler2dcm, euler2quat, euler_xyz2quat, rot_x, rot_y, rot_z
from .quaternion import axis_angle2quat, quat2dcm, rotvec2quat
from .rates import (
    axis_angle_rate2omega,
    dcm_rate2omega,
    euler_xyz_rate2omega,
    euler_zyx_rate2omega,
    passive_dcm_rate2omega,
    quat_rate2omega,
    rotvec_rate2omega,
    rotvec_rate2omega_series,
)
from .skew import deskew, skew, skew_asymmetry

__all__ = [
    'skew', 'deskew', 'skew_asymmetry',
    'euler2dcm', 'euler2quat', 'euler_xyz2quat', 'rot_x', 'rot_y', 'rot_z',
    'quat2dcm', 'axis_angle2quat', 'rotvec2quat',
    'quat_rate2omega', 'dcm_rate2omega', 'passive_dcm_rate2omega',
    'axis_angle_rate2omega', 'rotvec_rate2omega', 'rotvec_rate2omega_series',
    'euler_zyx_rate2omega', 'euler_xyz_rate2omega',
]
