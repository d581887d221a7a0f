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

"""Conversion of rotation derivatives into body-frame angular velocity.

Every supported pair of rotation type and derivative type maps to its own
closed-form formula in :mod:`pyrotkin.attitude.rates`. The table is filled at
import time and looked up by exact type; there is no fallback to a base class
or to another parameterization.

Supported pairs
---------------
=======================  ===========================  ========================
Rotation                 Derivative                   Formula
=======================  ===========================  ========================
UnitQuaternion           UnitQuaternionDiff           quat_rate2omega
RotationMatrix           RotationMatrixDiff           dcm_rate2omega
PassiveRotationMatrix    PassiveRotationMatrixDiff    passive_dcm_rate2omega
AngleAxis                AngleAxisDiff                axis_angle_rate2omega
RotationVector           RotationVectorDiff           rotvec_rate2omega
EulerAnglesZyx           EulerAnglesZyxDiff           euler_zyx_rate2omega
EulerAnglesXyz           EulerAnglesXyzDiff           euler_xyz_rate2omega
=======================  ===========================  ========================
"""

import logging
from typing import Callable, overload

import numpy as np

from ..attitude.rates import (
    axis_angle_rate2omega,
    dcm_rate2omega,
    euler_xyz_rate2omega,
    euler_zyx_rate2omega,
    passive_dcm_rate2omega,
    quat_rate2omega,
    rotvec_rate2omega,
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
from .representations import (
    AngleAxis,
    EulerAnglesXyz,
    EulerAnglesZyx,
    PassiveRotationMatrix,
    RotationMatrix,
    RotationVector,
    UnitQuaternion,
)

logger = logging.getLogger(__name__)

_CONVERSIONS: dict[tuple[type, type], Callable] = {}


class UnsupportedConversionError(TypeError):
    """No angular velocity formula exists for a rotation/derivative pair"""


def register_conversion(rotation_type: type, diff_type: type) -> Callable:
    """Register the formula for one (rotation type, derivative type) pair.

    Parameters
    ----------
    rotation_type : type
        Rotation representation class
    diff_type : type
        Derivative class belonging to rotation_type

    Returns
    -------
    Callable
        Decorator storing ``func(rotation, diff) -> np.ndarray`` in the table

    Raises
    ------
    ValueError
        If diff_type is already paired with another rotation type, or if the
        two types carry different usage conventions
    """
    def decorator(func: Callable) -> Callable:
        for rot, diff in _CONVERSIONS:
            if diff is diff_type and rot is not rotation_type:
                raise ValueError(f"{diff_type.__name__} is already paired with {rot.__name__}")
        if rotation_type.usage != diff_type.usage:
            raise ValueError(f"Usage mismatch: {rotation_type.__name__} is {rotation_type.usage.name}, "
                             f"{diff_type.__name__} is {diff_type.usage.name}")

        _CONVERSIONS[(rotation_type, diff_type)] = func
        logger.debug(f"Registered conversion {rotation_type.__name__} + {diff_type.__name__} "
                     f"-> {func.__name__}")
        return func

    return decorator


def get_conversion(rotation_type: type, diff_type: type) -> Callable:
    """Look up the formula for a (rotation type, derivative type) pair.

    Raises
    ------
    UnsupportedConversionError
        If the pair is not registered
    """
    try:
        return _CONVERSIONS[(rotation_type, diff_type)]
    except KeyError:
        raise UnsupportedConversionError(
            f"No angular velocity conversion from {rotation_type.__name__} "
            f"with derivative {diff_type.__name__}") from None


def supported_conversions() -> list[tuple[str, str]]:
    """Names of all registered (rotation, derivative) pairs, sorted"""
    return sorted((rot.__name__, diff.__name__) for rot, diff in _CONVERSIONS)


@overload
def convert(rotation: UnitQuaternion, diff: UnitQuaternionDiff) -> np.ndarray: ...
@overload
def convert(rotation: RotationMatrix, diff: RotationMatrixDiff) -> np.ndarray: ...
@overload
def convert(rotation: PassiveRotationMatrix, diff: PassiveRotationMatrixDiff) -> np.ndarray: ...
@overload
def convert(rotation: AngleAxis, diff: AngleAxisDiff) -> np.ndarray: ...
@overload
def convert(rotation: RotationVector, diff: RotationVectorDiff) -> np.ndarray: ...
@overload
def convert(rotation: EulerAnglesZyx, diff: EulerAnglesZyxDiff) -> np.ndarray: ...
@overload
def convert(rotation: EulerAnglesXyz, diff: EulerAnglesXyzDiff) -> np.ndarray: ...


def convert(rotation, diff):
    """
    Body-frame angular velocity of a rotation and its time derivative.

    Parameters
    ----------
    rotation : rotation representation
        Rotation the derivative is taken at
    diff : derivative type
        Time derivative in the same parameterization as rotation

    Returns
    -------
    np.ndarray
        Angular velocity [wx, wy, wz] in the precision of rotation

    Raises
    ------
    UnsupportedConversionError
        If the pair is not supported

    Notes
    -----
    Singular configurations are not guarded; the result may contain inf or nan.
    """
    func = get_conversion(type(rotation), type(diff))
    if diff.dtype != rotation.dtype:
        diff = diff.cast(rotation.dtype)
    return func(rotation, diff)


@register_conversion(UnitQuaternion, UnitQuaternionDiff)
def _from_quaternion(rotation, diff):
    return quat_rate2omega(rotation.data, diff.data)


@register_conversion(RotationMatrix, RotationMatrixDiff)
def _from_rotation_matrix(rotation, diff):
    return dcm_rate2omega(rotation.data, diff.data)


@register_conversion(PassiveRotationMatrix, PassiveRotationMatrixDiff)
def _from_passive_rotation_matrix(rotation, diff):
    return passive_dcm_rate2omega(rotation.data, diff.data)


@register_conversion(AngleAxis, AngleAxisDiff)
def _from_angle_axis(rotation, diff):
    return axis_angle_rate2omega(rotation.axis, rotation.angle, diff.axis, diff.angle)


@register_conversion(RotationVector, RotationVectorDiff)
def _from_rotation_vector(rotation, diff):
    return rotvec_rate2omega(rotation.data, diff.data)


@register_conversion(EulerAnglesZyx, EulerAnglesZyxDiff)
def _from_euler_zyx(rotation, diff):
    return euler_zyx_rate2omega(rotation.data, diff.data)


@register_conversion(EulerAnglesXyz, EulerAnglesXyzDiff)
def _from_euler_xyz(rotation, diff):
    return euler_xyz_rate2omega(rotation.data, diff.data)
