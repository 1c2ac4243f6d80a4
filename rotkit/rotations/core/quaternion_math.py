# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY

from rotkit.rotations.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_inverse"]


def quaternion_normalize(quaternion: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    """
    Normalizes the quaternion(s) such that the scalar term is positive and the length is 1

    The input is not modified; a normalized copy is returned.

    :param quaternion: the quaternion(s) to normalize
    :param dtype: the floating point type of the output
    :returns: The normalized quaternions
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True, dtype=dtype)

    signs = np.sign(work_quaternion[-1])

    if np.shape(signs):
        signs[signs == 0] = 1
    else:
        signs = signs if signs != 0 else signs.dtype.type(1)

    work_quaternion *= signs/np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    return work_quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function provides the inverse of a rotation quaternion of the form ``[q_x, q_y, q_z, q_s]``.

    The inverse of a rotation quaternion is defined such that
    :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion which
    corresponds to the identity matrix (or no rotation) and :math:`\otimes` indicates quaternion multiplication.
    For a unit quaternion this corresponds to negating the vector portion of the quaternion (the conjugate):

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]\\
        \mathbf{q}^{-1}=\left[\begin{array}{c}-\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    This function is also vectorized, meaning that you can specify multiple rotation quaternions to be inversed by
    specifying each quaternion as a column.  Regardless of whether you are converting 1 or many
    quaternions the first axis must have a length of 4.

    :param quaternion: The rotation quaternion(s) to be inverted
    :param dtype: the floating point type of the output
    :return: a numpy array representing the inverse quaternion corresponding to the input quaternion
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True, dtype=dtype)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion
