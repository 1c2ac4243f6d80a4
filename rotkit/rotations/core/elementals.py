# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Elementary rotation matrices about the coordinate axes and the skew symmetric cross product matrix.

Every routine here accepts a ``dtype`` keyword so that the matrices are formed (and the trigonometry is evaluated) at
the precision of the representation that requested them.
"""

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["rot_x", "rot_y", "rot_z", "skew"]


def _angle_terms(theta: SCALAR_OR_ARRAY, dtype: DTypeLike) -> tuple[FLOATING_ARRAY, FLOATING_ARRAY,
                                                                     FLOATING_ARRAY, FLOATING_ARRAY]:
    """
    Returns the ones, zeros, cosine, and sine arrays shaped like the flattened angle(s)
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=dtype)).flatten()

    return np.ones(theta.shape, dtype=dtype), np.zeros(theta.shape, dtype=dtype), np.cos(theta), np.sin(theta)


def rot_x(theta: SCALAR_OR_ARRAY, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function performs a right handed rotation about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    Theta should be in units of radians and can be a scalar or a vector.  If theta is a vector then each theta value
    will have a corresponding rotation matrix down the first axis of the output.  For example::

        >>> from rotkit.rotations import rot_x
        >>> rot_x([2, 0.5])
        array([[[ 1.        ,  0.        ,  0.        ],
                [ 0.        , -0.41614684, -0.90929743],
                [ 0.        ,  0.90929743, -0.41614684]],
               [[ 1.        ,  0.        ,  0.        ],
                [ 0.        ,  0.87758256, -0.47942554],
                [ 0.        ,  0.47942554,  0.87758256]]])

    :param theta: The angles to form the rotation matrix(ces) for
    :param dtype: The floating point type to form the matrix(ces) in
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    ones, zeros, ctheta, stheta = _angle_terms(theta, dtype)

    return np.vstack([ones, zeros, zeros, zeros, ctheta, -stheta, zeros, stheta, ctheta]).T.reshape(-1, 3, 3).squeeze()


def rot_y(theta: SCALAR_OR_ARRAY, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function performs a right handed rotation about the y axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :param dtype: The floating point type to form the matrix(ces) in
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    ones, zeros, ctheta, stheta = _angle_terms(theta, dtype)

    return np.vstack([ctheta, zeros, stheta, zeros, ones, zeros, -stheta, zeros, ctheta]).T.reshape(-1, 3, 3).squeeze()


def rot_z(theta: SCALAR_OR_ARRAY, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function performs a right handed rotation about the z axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :param dtype: The floating point type to form the matrix(ces) in
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    ones, zeros, ctheta, stheta = _angle_terms(theta, dtype)

    return np.vstack([ctheta, -stheta, zeros, stheta, ctheta, zeros, zeros, zeros, ones]).T.reshape(-1, 3, 3).squeeze()


def skew(vector: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    This function is vectorized, therefore you can input multiple vectors as a 3xn array where each column is an
    independent vector.  The resulting skew matrix output will be nx3x3 where the first axis stores each matrix

    :param vector: The vector to compute a skew symmetric matrix for
    :param dtype: The floating point type to form the matrix(ces) in
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    """

    vector = _check_vector_array_and_shape(vector, dtype=dtype)

    zeros = np.zeros(vector.shape[1:], dtype=dtype)

    return np.array([zeros, -vector[2], vector[1],
                     vector[2], zeros, -vector[0],
                     -vector[1], vector[0], zeros], dtype=dtype).T.reshape(-1, 3, 3).squeeze()
