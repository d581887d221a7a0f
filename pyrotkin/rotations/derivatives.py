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

"""Time derivatives of the rotation representations.

Each derivative type belongs to exactly one rotation type and stores the rates
of that rotation's parameters in the same layout.
"""

from ..core.data_structures import RotationUsage
from .base import AngleAxisData, EulerData, MatrixData, QuaternionData, VectorData


class UnitQuaternionDiff(QuaternionData):
    """Quaternion rate [dw, dx, dy, dz] of a UnitQuaternion"""


class RotationMatrixDiff(MatrixData):
    """Rate of an active RotationMatrix"""
    usage = RotationUsage.ACTIVE


class PassiveRotationMatrixDiff(MatrixData):
    """Rate of a PassiveRotationMatrix"""
    usage = RotationUsage.PASSIVE


class AngleAxisDiff(AngleAxisData):
    """Angle rate (rad per time unit) and axis rate of an AngleAxis"""


class RotationVectorDiff(VectorData):
    """Rate [dv1, dv2, dv3] of a RotationVector"""


class EulerAnglesZyxDiff(EulerData):
    """Rates [droll, dpitch, dyaw] of EulerAnglesZyx"""


class EulerAnglesXyzDiff(EulerData):
    """Rates [droll, dpitch, dyaw] of EulerAnglesXyz"""
