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
Rotation values, their time derivatives and body-frame angular velocity.

- **Representations**: unit quaternion, active and passive rotation matrix,
  angle-axis, rotation vector, Euler angles ZYX and XYZ
- **Derivatives**: one time derivative type per representation
- **Conversions**: closed-form (rotation, derivative) -> angular velocity table
- **LocalAngularVelocity**: body-frame angular velocity value type
- **Singularity**: detection of singular parameterizations
"""

from .conversions import (
    UnsupportedConversionError,
    convert,
    get_conversion,
    register_conversion,
    supported_conversions,
)
from .derivatives import (
    AngleAxisDiff,
    EulerAnglesXyzDiff,
    EulerAnglesZyxDiff,
    PassiveRotationMatrixDiff,
    RotationMatrixDiff,
    RotationVectorDiff,
    UnitQuaternionDiff,
)
from .local_angular_velocity import (
    ActiveUsage,
    LocalAngularVelocity,
    LocalAngularVelocityAD,
    LocalAngularVelocityAF,
    LocalAngularVelocityPD,
    LocalAngularVelocityPF,
    PassiveUsage,
)
from .representations import (
    AngleAxis,
    EulerAnglesXyz,
    EulerAnglesZyx,
    PassiveRotationMatrix,
    RotationMatrix,
    RotationVector,
    UnitQuaternion,
)
from .singularity import is_near_singularity

__all__ = [
    'UnitQuaternion', 'RotationMatrix', 'PassiveRotationMatrix', 'AngleAxis',
    'RotationVector', 'EulerAnglesZyx', 'EulerAnglesXyz',
    'UnitQuaternionDiff', 'RotationMatrixDiff', 'PassiveRotationMatrixDiff',
    'AngleAxisDiff', 'RotationVectorDiff', 'EulerAnglesZyxDiff', 'EulerAnglesXyzDiff',
    'UnsupportedConversionError', 'register_conversion', 'get_conversion',
    'supported_conversions', 'convert',
    'LocalAngularVelocity', 'LocalAngularVelocityAD', 'LocalAngularVelocityAF',
    'LocalAngularVelocityPD', 'LocalAngularVelocityPF', 'ActiveUsage', 'PassiveUsage',
    'is_near_singularity',
]
