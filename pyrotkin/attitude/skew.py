"""
Skew symmetric form utilities.

This module provides functions for converting between 3-vectors and their skew symmetric
(cross product) matrices. The functions keep the floating point precision of their input,
so single precision data stays single precision.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def skew(v):
    """
    Convert vector into its skew symmetric form.

    The skew symmetric matrix of a vector v = [v1, v2, v3] is:
    [  0  -v3   v2 ]
    [ v3    0  -v1 ]
    [-v2   v1    0 ]

    so that skew(v) @ u equals the cross product v x u.

    Parameters
    ----------
    v : array_like, shape (3,)
        Input vector

    Returns
    -------
    M : ndarray, shape (3, 3)
        Skew symmetric form of input vector, same dtype as v
    """
    M = np.zeros((3, 3), dtype=v.dtype)
    M[0, 1] = -v[2]
    M[0, 2] = v[1]
    M[1, 0] = v[2]
    M[1, 2] = -v[0]
    M[2, 0] = -v[1]
    M[2, 1] = v[0]
    return M


@njit(cache=True, fastmath=True)
def deskew(M):
    """
    Convert skew symmetric form into its respective vector.

    Extracts the vector v from a skew symmetric matrix M where:
    v1 = M[2,1], v2 = M[0,2], v3 = M[1,0]

    The mirrored entries M[1,2], M[2,0], M[0,1] are not read, so any asymmetry
    of M is silently dropped.

    Parameters
    ----------
    M : array_like, shape (3, 3)
        Skew symmetric form of vector

    Returns
    -------
    v : ndarray, shape (3,)
        Output vector, same dtype as M
    """
    v = np.empty(3, dtype=M.dtype)
    v[0] = M[2, 1]
    v[1] = M[0, 2]
    v[2] = M[1, 0]
    return v


@njit(cache=True)
def skew_asymmetry(M):
    """
    Measure how far a 3x3 matrix is from being skew symmetric.

    Parameters
    ----------
    M : array_like, shape (3, 3)
        Matrix to check

    Returns
    -------
    float
        max |M + M^T|, zero for an exactly skew symmetric matrix
    """
    worst = 0.0
    for i in range(3):
        for j in range(3):
            d = abs(M[i, j] + M[j, i])
            if d > worst:
                worst = d
    return worst
