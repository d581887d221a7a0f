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

"""Core data structures for rotation kinematics"""

from dataclasses import dataclass
from enum import Enum

from .constants import EULER_SINGULAR_COS_PITCH, ROTVEC_SINGULAR_NORM


class RotationUsage(Enum):
    """Usage convention of a rotation or angular velocity type.

    Attributes
    ----------
    ACTIVE : int
        The rotation moves the object; the angular velocity is the physical
        rate of the body frame with respect to the inertial frame
    PASSIVE : int
        The rotation re-expresses coordinates in another frame
    """
    ACTIVE = 1
    PASSIVE = 2


@dataclass
class SingularityThresholds:
    """Thresholds used to flag parameterizations near a singular configuration.

    Attributes
    ----------
    rotation_vector_norm : float
        Rotation vectors shorter than this (rad) are considered singular
    euler_cos_pitch : float
        Euler angles whose |cos(pitch)| is below this are in gimbal lock

    Examples
    --------
    >>> thresholds = SingularityThresholds(rotation_vector_norm=1e-4)
    >>> thresholds.euler_cos_pitch
    1e-06
    """
    rotation_vector_norm: float = ROTVEC_SINGULAR_NORM
    euler_cos_pitch: float = EULER_SINGULAR_COS_PITCH

    def __post_init__(self):
        if self.rotation_vector_norm < 0.0 or self.euler_cos_pitch < 0.0:
            raise ValueError("Singularity thresholds must be non-negative")
