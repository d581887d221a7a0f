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
Body-frame angular velocity from attitude rates.

Each kernel takes a rotation in one parameterization together with its time derivative
in the same parameterization and returns the angular velocity of the body with respect
to the inertial frame, expressed in body coordinates. All angles are in radians and the
output carries the time unit of the derivative.

The kernels are closed-form and do not guard singular configurations:

- rotvec_rate2omega divides by |v|^3 and breaks down for a zero rotation vector
- euler_zyx_rate2omega / euler_xyz_rate2omega lose rank at pitch = +-90 deg

Outputs are allocated with the dtype of the rotation argument and constants are
taken in that precision, so float32 input is evaluated in float32 throughout.
"""

import numpy as np
from numba import njit

from .skew import deskew, skew


@njit(cache=True)
def _one(x):
    """1 in the precision of array x"""
    return np.ones(1, dtype=x.dtype)[0]


# no fastmath: singular inputs must propagate inf/nan
@njit(cache=True, error_model='numpy')
def quat_rate2omega(q, dq):
    """
    Angular velocity from a unit quaternion and its derivative.

    w_B = 2 * H(q) @ dq with

        H = [ -x   w   z  -y ]
            [ -y  -z   w   x ]
            [ -z   y  -x   w ]

    Parameters
    ----------
    q : array_like, shape (4,)
        Unit quaternion [w, x, y, z]
    dq : array_like, shape (4,)
        Quaternion derivative [dw, dx, dy, dz]

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    H = np.empty((3, 4), dtype=q.dtype)
    H[0, 0] = -x
    H[0, 1] = w
    H[0, 2] = z
    H[0, 3] = -y
    H[1, 0] = -y
    H[1, 1] = -z
    H[1, 2] = w
    H[1, 3] = x
    H[2, 0] = -z
    H[2, 1] = y
    H[2, 2] = -x
    H[2, 3] = w

    omega = np.empty(3, dtype=q.dtype)
    for i in range(3):
        acc = H[i, 0]*dq[0] + H[i, 1]*dq[1] + H[i, 2]*dq[2] + H[i, 3]*dq[3]
        omega[i] = acc + acc
    return omega


@njit(cache=True, error_model='numpy')
def dcm_rate2omega(R, dR):
    """
    Angular velocity from an active rotation matrix and its derivative.

    skew(w_B) = R @ dR^T

    Parameters
    ----------
    R : array_like, shape (3, 3)
        Active rotation matrix
    dR : array_like, shape (3, 3)
        Time derivative of R

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity
    """
    Omega = np.zeros((3, 3), dtype=R.dtype)
    for i in range(3):
        for j in range(3):
            for k in range(3):
                Omega[i, j] += R[i, k] * dR[j, k]
    return deskew(Omega)


@njit(cache=True, error_model='numpy')
def passive_dcm_rate2omega(C, dC):
    """
    Angular velocity from a passive rotation matrix and its derivative.

    skew(w_B) = C^-1 @ dC = C^T @ dC

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Passive rotation matrix
    dC : array_like, shape (3, 3)
        Time derivative of C

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity (active usage)
    """
    Omega = np.zeros((3, 3), dtype=C.dtype)
    for i in range(3):
        for j in range(3):
            for k in range(3):
                Omega[i, j] += C[k, i] * dC[k, j]
    return deskew(Omega)


@njit(cache=True, error_model='numpy')
def axis_angle_rate2omega(axis, angle, daxis, dangle):
    """
    Angular velocity from an angle-axis rotation and its derivative.

    w = n * dtheta + dn * sin(theta) + skew(n) @ dn * (1 - cos(theta))

    Parameters
    ----------
    axis : array_like, shape (3,)
        Unit rotation axis n
    angle : float
        Rotation angle theta
    daxis : array_like, shape (3,)
        Axis derivative dn
    dangle : float
        Angle derivative dtheta

    Returns
    -------
    omega : ndarray, shape (3,)
        Angular velocity
    """
    one = _one(axis)
    s = np.sin(angle)
    c = np.cos(angle)
    N = skew(axis)
    omega = np.empty(3, dtype=axis.dtype)
    for i in range(3):
        cross_i = N[i, 0]*daxis[0] + N[i, 1]*daxis[1] + N[i, 2]*daxis[2]
        omega[i] = axis[i]*dangle + daxis[i]*s + cross_i*(one - c)
    return omega


@njit(cache=True, error_model='numpy')
def rotvec_rate2omega(v, dv):
    """
    Angular velocity from a rotation vector and its derivative.

    Expanded closed form of the exponential map derivative. With a = |v|:

        t2 = 1/a^3, t3 = cos(a), t4 = sin(a), t7 = a^2, t8 = t4*t7

    Singular for a = 0 (the result is nan). The singularity is removable: in
    float64 the result stays accurate down to a ~ 1e-15. In float32 the
    products of order a^3 lose accuracy for small a; around a = 1e-8 the
    magnitude can be off by tens of percent without any warning. Check
    small rotation vectors with pyrotkin.rotations.is_near_singularity.

    Parameters
    ----------
    v : array_like, shape (3,)
        Rotation vector [v1, v2, v3]
    dv : array_like, shape (3,)
        Rotation vector derivative [dv1, dv2, dv3]

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity
    """
    v1, v2, v3 = v[0], v[1], v[2]
    dv1, dv2, dv3 = dv[0], dv[1], dv[2]
    a = np.sqrt(v1*v1 + v2*v2 + v3*v3)

    t2 = _one(v)/(a*a*a)
    t3 = np.cos(a)
    t4 = np.sin(a)
    t5 = v1*v1
    t6 = v1*v2
    t7 = a*a
    t8 = t4*t7
    t9 = v2*v2
    t10 = v2*v3
    t11 = v1*v3
    t12 = t3*v2
    t13 = v3*v3

    omega = np.empty(3, dtype=v.dtype)
    omega[0] = (dv3*t2*(a*(t11 + t12 - v2) - t4*v1*v3)
                + dv1*t2*(t8 - t4*t5 + t5*a)
                + dv2*t2*(a*(t6 + v3 - t3*v3) - t4*v1*v2))
    omega[1] = (dv1*t2*(a*(t6 - v3 + t3*v3) - t4*v1*v2)
                + dv2*t2*(t8 - t4*t9 + t9*a)
                + dv3*t2*(a*(t10 + v1 - t3*v1) - t4*v2*v3))
    omega[2] = (dv2*t2*(a*(t10 - v1 + t3*v1) - t4*v2*v3)
                + dv1*t2*(a*(t11 - t12 + v2) - t4*v1*v3)
                + dv3*t2*(t8 - t4*t13 + t13*a))
    return omega


@njit(cache=True, error_model='numpy')
def rotvec_rate2omega_series(v, dv):
    """
    Skew-series form of rotvec_rate2omega.

    w = dv - skew(v) @ dv * (1 - cos(a))/a^2 + skew(v)^2 @ dv * (a - sin(a))/a^3

    Algebraically identical to the expanded form. It is not used for dispatch.

    Parameters
    ----------
    v : array_like, shape (3,)
        Rotation vector
    dv : array_like, shape (3,)
        Rotation vector derivative

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity
    """
    a = np.sqrt(v[0]*v[0] + v[1]*v[1] + v[2]*v[2])
    V = skew(v)
    Vdv = np.zeros(3, dtype=v.dtype)
    for i in range(3):
        for k in range(3):
            Vdv[i] += V[i, k] * dv[k]
    VVdv = np.zeros(3, dtype=v.dtype)
    for i in range(3):
        for k in range(3):
            VVdv[i] += V[i, k] * Vdv[k]

    c1 = (_one(v) - np.cos(a))/(a*a)
    c2 = (a - np.sin(a))/(a*a*a)
    omega = np.empty(3, dtype=v.dtype)
    for i in range(3):
        omega[i] = dv[i] - Vdv[i]*c1 + VVdv[i]*c2
    return omega


@njit(cache=True, error_model='numpy')
def euler_zyx_rate2omega(e, de):
    """
    Angular velocity from 'ZYX' euler angles and their rates.

    w1 = droll - dyaw*sin(pitch)
    w2 = dpitch*cos(roll) + dyaw*sin(roll)*cos(pitch)
    w3 = -dpitch*sin(roll) + dyaw*cos(roll)*cos(pitch)

    Parameters
    ----------
    e : array_like, shape (3,)
        Euler angles [roll, pitch, yaw]
    de : array_like, shape (3,)
        Euler angle rates [droll, dpitch, dyaw]

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity
    """
    phi = e[0]
    theta = e[1]
    dphi, dtheta, dpsi = de[0], de[1], de[2]
    t2 = np.sin(phi)
    t3 = np.cos(phi)
    t4 = np.cos(theta)
    omega = np.empty(3, dtype=e.dtype)
    omega[0] = dphi - dpsi*np.sin(theta)
    omega[1] = dtheta*t3 + dpsi*t2*t4
    omega[2] = -dtheta*t2 + dpsi*t3*t4
    return omega


@njit(cache=True, error_model='numpy')
def euler_xyz_rate2omega(e, de):
    """
    Angular velocity from 'XYZ' euler angles and their rates.

    w1 = dbeta*sin(gamma) + dalpha*cos(gamma)*cos(beta)
    w2 = dbeta*cos(gamma) - dalpha*cos(beta)*sin(gamma)
    w3 = dgamma + dalpha*sin(beta)

    Parameters
    ----------
    e : array_like, shape (3,)
        Euler angles [alpha, beta, gamma] = [roll, pitch, yaw]
    de : array_like, shape (3,)
        Euler angle rates [dalpha, dbeta, dgamma]

    Returns
    -------
    omega : ndarray, shape (3,)
        Body-frame angular velocity
    """
    beta = e[1]
    gamma = e[2]
    dalpha, dbeta, dgamma = de[0], de[1], de[2]
    t2 = np.cos(gamma)
    t3 = np.cos(beta)
    t4 = np.sin(gamma)
    omega = np.empty(3, dtype=e.dtype)
    omega[0] = dbeta*t4 + dalpha*t2*t3
    omega[1] = dbeta*t2 - dalpha*t3*t4
    omega[2] = dgamma + dalpha*np.sin(beta)
    return omega
