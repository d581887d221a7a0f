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

"""Detection of parameterizations close to a singular configuration.

The conversion formulas are evaluated without guards. Callers that integrate
or filter attitudes can use this check to switch parameterization before the
rotation vector formula (small magnitude) or the Euler angle formulas (gimbal
lock) lose precision.
"""

import logging
from typing import Optional

import numpy as np

from ..core.data_structures import SingularityThresholds
from .representations import EulerAnglesXyz, EulerAnglesZyx, RotationVector

logger = logging.getLogger(__name__)


def is_near_singularity(rotation, thresholds: Optional[SingularityThresholds] = None) -> bool:
    """
    Check whether a rotation is close to a singularity of its parameterization.

    Parameters
    ----------
    rotation : rotation representation
        Rotation to check
    thresholds : SingularityThresholds, optional
        Detection thresholds, defaults from pyrotkin.core.constants

    Returns
    -------
    bool
        True for rotation vectors shorter than ``rotation_vector_norm`` and for
        Euler angles with |cos(pitch)| below ``euler_cos_pitch``. Quaternions,
        rotation matrices and angle-axis rotations are never singular.

    Examples
    --------
    >>> is_near_singularity(EulerAnglesZyx.from_rpy(0.0, np.pi / 2, 0.0))
    True
    """
    if thresholds is None:
        thresholds = SingularityThresholds()

    if isinstance(rotation, RotationVector):
        norm = float(np.linalg.norm(rotation.data))
        if norm < thresholds.rotation_vector_norm:
            logger.debug(f"Rotation vector magnitude {norm:.3e} below "
                         f"{thresholds.rotation_vector_norm:.3e}")
            return True
        return False

    if isinstance(rotation, (EulerAnglesZyx, EulerAnglesXyz)):
        cos_pitch = abs(float(np.cos(rotation.pitch)))
        if cos_pitch < thresholds.euler_cos_pitch:
            logger.debug(f"{type(rotation).__name__} in gimbal lock, "
                         f"|cos(pitch)| = {cos_pitch:.3e}")
            return True
        return False

    return False
