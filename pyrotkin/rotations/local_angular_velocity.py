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

"""Angular velocity expressed in the body fixed (local) frame"""

from typing import ClassVar, Generic, Literal, Optional, TypeVar, get_args, get_origin

import numpy as np

from ..core.data_structures import RotationUsage
from .base import check_array_and_shape
from .conversions import convert

ActiveUsage = Literal[RotationUsage.ACTIVE]
PassiveUsage = Literal[RotationUsage.PASSIVE]
UsageT = TypeVar("UsageT")


class LocalAngularVelocity(Generic[UsageT]):
    """
    Angular velocity of a rigid body expressed in its body fixed (local) frame.

    The velocity is the rate of the body frame B with respect to the inertial
    frame I, with coordinates in B. Only the active usage has this physical
    meaning; the passive variant exists as the companion type of the
    convention.

    Usage and precision are fixed per class, so use one of the concrete
    classes LocalAngularVelocityAD, LocalAngularVelocityAF,
    LocalAngularVelocityPD or LocalAngularVelocityPF. Values of different usage
    cannot be combined: the type parameter (ActiveUsage or PassiveUsage) lets a
    static type checker reject mixed operands, and a TypeError is raised at run
    time.

    Parameters
    ----------
    x, y, z : float, optional
        Components expressed in the body frame, zero by default

    Examples
    --------
    >>> w = LocalAngularVelocityAD(0.1, 0.2, 0.3)
    >>> w += LocalAngularVelocityAD(0.1, 0.0, 0.0)
    >>> print(w)
        0.200000     0.200000     0.300000
    """
    usage: ClassVar[Optional[RotationUsage]] = None
    dtype: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # the type parameter is what static checkers see, it must match usage
        for base in getattr(cls, '__orig_bases__', ()):
            if get_origin(base) is not LocalAngularVelocity:
                continue
            marker = get_args(get_args(base)[0])
            if marker and marker[0] is not cls.usage:
                raise TypeError(f"{cls.__name__} is declared {marker[0].name} "
                                f"but has usage {cls.usage}")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        if self.usage is None:
            raise TypeError(f"{type(self).__name__} has no usage convention, use one of "
                            "LocalAngularVelocityAD/AF/PD/PF")
        self._vector = np.array([x, y, z], dtype=self.dtype)

    @classmethod
    def zero(cls) -> 'LocalAngularVelocity':
        """Angular velocity with all components zero"""
        return cls()

    @classmethod
    def from_vector(cls, vector: np.ndarray) -> 'LocalAngularVelocity':
        """
        Create an angular velocity from a 3-vector.

        Parameters
        ----------
        vector : array_like, shape (3,)
            Components [x, y, z]; copied

        Raises
        ------
        ValueError
            If vector is not of shape (3,)
        """
        velocity = cls()
        velocity._vector = check_array_and_shape(vector, (3,), cls.__name__, dtype=cls.dtype)
        return velocity

    @classmethod
    def from_rotation_diff(cls, rotation, diff) -> 'LocalAngularVelocity':
        """
        Create the angular velocity of a rotation and its time derivative.

        Parameters
        ----------
        rotation : rotation representation
            Rotation the derivative is taken at
        diff : derivative type
            Time derivative in the same parameterization as rotation

        Returns
        -------
        LocalAngularVelocity
            Body-frame angular velocity in the precision of this class

        Raises
        ------
        TypeError
            If this class is not of active usage or the pair is not supported

        Examples
        --------
        >>> from pyrotkin.rotations import EulerAnglesZyx, EulerAnglesZyxDiff
        >>> w = LocalAngularVelocityAD.from_rotation_diff(
        ...     EulerAnglesZyx.from_rpy(0.0, 0.0, 0.0),
        ...     EulerAnglesZyxDiff.from_rpy(1.0, 2.0, 3.0))
        >>> w.vector
        array([1., 2., 3.])
        """
        if cls.usage is not RotationUsage.ACTIVE:
            raise TypeError(f"Conversions produce active angular velocities, "
                            f"{cls.__name__} is not active")
        return cls.from_vector(convert(rotation, diff))

    @property
    def x(self):
        """x-coordinate expressed in the body frame"""
        return self._vector[0]

    @property
    def y(self):
        """y-coordinate expressed in the body frame"""
        return self._vector[1]

    @property
    def z(self):
        """z-coordinate expressed in the body frame"""
        return self._vector[2]

    @property
    def vector(self) -> np.ndarray:
        """Components [x, y, z] (copy)"""
        return self._vector.copy()

    def to_implementation(self) -> np.ndarray:
        """The owned component array; changes to it change this value"""
        return self._vector

    def _check_usage(self, other):
        if not isinstance(other, LocalAngularVelocity):
            raise TypeError(f"Expected an angular velocity, got {type(other).__name__}")
        if other.usage is not self.usage:
            raise TypeError(f"Cannot combine {self.usage.name} and {other.usage.name} "
                            f"angular velocities ({type(self).__name__}, {type(other).__name__})")

    def add(self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        """Element-wise sum as a new value of this class"""
        self._check_usage(other)
        return type(self).from_vector(self._vector + other._vector)

    def subtract(self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        """Element-wise difference as a new value of this class"""
        self._check_usage(other)
        return type(self).from_vector(self._vector - other._vector)

    def accumulate_add(
            self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        """Add other in place and return self"""
        self._check_usage(other)
        self._vector += other._vector
        return self

    def accumulate_subtract(
            self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        """Subtract other in place and return self"""
        self._check_usage(other)
        self._vector -= other._vector
        return self

    def set_zero(self) -> 'LocalAngularVelocity[UsageT]':
        """Set all components to zero and return self"""
        self._vector[:] = 0
        return self

    def __add__(self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        if not isinstance(other, LocalAngularVelocity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        if not isinstance(other, LocalAngularVelocity):
            return NotImplemented
        return self.subtract(other)

    def __iadd__(self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        if not isinstance(other, LocalAngularVelocity):
            return NotImplemented
        return self.accumulate_add(other)

    def __isub__(self, other: 'LocalAngularVelocity[UsageT]') -> 'LocalAngularVelocity[UsageT]':
        if not isinstance(other, LocalAngularVelocity):
            return NotImplemented
        return self.accumulate_subtract(other)

    def __eq__(self, other):
        if not isinstance(other, LocalAngularVelocity):
            return NotImplemented
        return self.usage is other.usage and bool(np.array_equal(self._vector, other._vector))

    __hash__ = None

    def __str__(self):
        return ' '.join(f"{c:12.6f}" for c in self._vector)

    def __repr__(self):
        return f"{type(self).__name__}({float(self.x)}, {float(self.y)}, {float(self.z)})"


class LocalAngularVelocityAD(LocalAngularVelocity[ActiveUsage]):
    """Local angular velocity, active usage, double precision"""
    usage = RotationUsage.ACTIVE
    dtype = np.float64


class LocalAngularVelocityAF(LocalAngularVelocity[ActiveUsage]):
    """Local angular velocity, active usage, single precision"""
    usage = RotationUsage.ACTIVE
    dtype = np.float32


class LocalAngularVelocityPD(LocalAngularVelocity[PassiveUsage]):
    """Local angular velocity, passive usage, double precision"""
    usage = RotationUsage.PASSIVE
    dtype = np.float64


class LocalAngularVelocityPF(LocalAngularVelocity[PassiveUsage]):
    """Local angular velocity, passive usage, single precision"""
    usage = RotationUsage.PASSIVE
    dtype = np.float32
