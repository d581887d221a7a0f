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

"""Base containers shared by rotation and rotation derivative types"""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from ..core.constants import DEFAULT_DTYPE, SUPPORTED_DTYPES
from ..core.data_structures import RotationUsage

_SUPPORTED = tuple(np.dtype(t) for t in SUPPORTED_DTYPES)


def check_dtype(dtype) -> np.dtype:
    """Return dtype as a numpy dtype, raising ValueError when it is not supported."""
    dtype = np.dtype(dtype)
    if dtype not in _SUPPORTED:
        raise ValueError(f"Unsupported precision {dtype}, expected one of "
                         f"{[str(t) for t in _SUPPORTED]}")
    return dtype


def _resolve(dtype) -> np.dtype:
    return check_dtype(DEFAULT_DTYPE if dtype is None else dtype)


def check_array_and_shape(data, shape: tuple, name: str, dtype=None) -> np.ndarray:
    """
    Copy data into a floating point array and validate its shape.

    Parameters
    ----------
    data : array_like
        Input data
    shape : tuple
        Required shape
    name : str
        Name used in error messages
    dtype : optional
        Target precision. If None, float32/float64 input keeps its precision and
        anything else is converted to the default precision.

    Returns
    -------
    np.ndarray
        Validated copy of data

    Raises
    ------
    ValueError
        If the shape does not match or the precision is not supported
    """
    arr = np.array(data)
    if arr.shape != shape:
        raise ValueError(f"{name} data must have shape {shape}, got {arr.shape}")

    if dtype is None:
        if arr.dtype.kind in 'iub':
            dtype = DEFAULT_DTYPE
        else:
            dtype = arr.dtype
    return arr.astype(check_dtype(dtype), copy=True)


@dataclass(eq=False)
class ArrayData:
    """
    Fixed-shape numeric data tagged with a usage convention.

    Subclasses set the class attributes ``_shape`` and ``usage``; instances
    only store the validated array.

    Attributes
    ----------
    data : np.ndarray
        Components, copied on construction
    """
    data: np.ndarray
    _shape: ClassVar[tuple] = ()
    usage: ClassVar[RotationUsage] = RotationUsage.ACTIVE

    def __post_init__(self):
        self.data = check_array_and_shape(self.data, self._shape, type(self).__name__)

    @property
    def dtype(self) -> np.dtype:
        """Floating point precision of the components"""
        return self.data.dtype

    def cast(self, dtype):
        """Return a copy of this value in another precision"""
        return type(self)(self.data.astype(check_dtype(dtype)))


class QuaternionData(ArrayData):
    """Quaternion components stored scalar-first as [w, x, y, z]"""
    _shape = (4,)

    @classmethod
    def from_components(cls, w: float, x: float, y: float, z: float, dtype=None):
        return cls(np.array([w, x, y, z], dtype=_resolve(dtype)))

    @property
    def w(self):
        return self.data[0]

    @property
    def x(self):
        return self.data[1]

    @property
    def y(self):
        return self.data[2]

    @property
    def z(self):
        return self.data[3]

    @property
    def vector(self) -> np.ndarray:
        """Components [w, x, y, z] (copy)"""
        return self.data.copy()


class VectorData(ArrayData):
    """Three component vector [x, y, z]"""
    _shape = (3,)

    @classmethod
    def from_components(cls, x: float, y: float, z: float, dtype=None):
        return cls(np.array([x, y, z], dtype=_resolve(dtype)))

    @property
    def x(self):
        return self.data[0]

    @property
    def y(self):
        return self.data[1]

    @property
    def z(self):
        return self.data[2]

    @property
    def vector(self) -> np.ndarray:
        """Components [x, y, z] (copy)"""
        return self.data.copy()


class EulerData(ArrayData):
    """Euler angle triple stored as [roll, pitch, yaw]"""
    _shape = (3,)

    @classmethod
    def from_rpy(cls, roll: float, pitch: float, yaw: float, dtype=None):
        return cls(np.array([roll, pitch, yaw], dtype=_resolve(dtype)))

    @property
    def roll(self):
        return self.data[0]

    @property
    def pitch(self):
        return self.data[1]

    @property
    def yaw(self):
        return self.data[2]

    @property
    def vector(self) -> np.ndarray:
        """Angles [roll, pitch, yaw] (copy)"""
        return self.data.copy()


class MatrixData(ArrayData):
    """3x3 matrix"""
    _shape = (3, 3)

    @property
    def matrix(self) -> np.ndarray:
        """The 3x3 matrix (copy)"""
        return self.data.copy()


@dataclass(eq=False)
class AngleAxisData:
    """
    An angle together with an axis, or their rates.

    Attributes
    ----------
    angle : float
        Angle (rad) or angle rate, stored in the precision of the axis
    axis : np.ndarray
        Axis or axis rate, shape (3,)
    """
    angle: float
    axis: np.ndarray
    usage: ClassVar[RotationUsage] = RotationUsage.ACTIVE

    def __post_init__(self):
        self.axis = check_array_and_shape(self.axis, (3,), type(self).__name__)
        self.angle = self.axis.dtype.type(self.angle)

    @property
    def dtype(self) -> np.dtype:
        return self.axis.dtype

    def cast(self, dtype):
        """Return a copy of this value in another precision"""
        return type(self)(self.angle, self.axis.astype(check_dtype(dtype)))
