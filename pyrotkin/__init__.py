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
PyRotKin - Rotation kinematics library

Converts the time derivative of a rigid-body rotation, given as a unit quaternion,
rotation matrix, angle-axis, rotation vector or Euler angles, into the angular
velocity of the body expressed in its own (local) frame.
"""

__version__ = "1.0.0"
__author__ = "PyRotKin Development Team"
__title__ = "pyrotkin"
__description__ = "Body-frame angular velocity from rotation derivatives"

from .core import *
from .attitude import *
from .rotations import *
