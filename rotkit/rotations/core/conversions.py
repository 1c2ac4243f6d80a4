# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains core routines for converting between different rotation representations.
All routines are implemented purely on numpy arrays (or array like objects) and take a ``dtype`` keyword which sets the
floating point precision that the inputs are cast to and that all of the trigonometry is performed in.
"""


from typing import Sequence
import logging

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY, EULER_ORDERS, SCALAR_OR_ARRAY

from rotkit.rotations.core._helpers import (_check_matrix_array_and_shape,
                                            _check_quaternion_array_and_shape, _check_vector_array_and_shape)
from rotkit.rotations.core.elementals import rot_x, rot_y, rot_z, skew
from rotkit.rotations.core.quaternion_math import quaternion_normalize


__all__ = ['quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_axis_angle',
           'axis_angle_to_quaternion',
           'rotvec_to_axis_angle', 'rotvec_to_quaternion',
           'rotmat_to_quaternion', 'rotmat_to_euler_zyx', 'rotmat_to_euler_xyz',
           'euler_to_rotmat', 'euler_to_quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


GIMBAL_LOCK_THRESHOLD: float = 1 - 1e-6
"""
The absolute value of the pitch term of a rotation matrix above which the yaw and roll angles are ill-conditioned.
"""


def quaternion_to_rotvec(quaternion: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function converts a rotation quaternion into a rotation vector.

    The rotation vector is returned as a numpy array and is formed by:

    .. math::
        \theta = 2*\text{cos}^{-1}(q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\text{sin}(\theta/2)} \\
        \mathbf{v} = \theta\hat{\mathbf{x}}

    This function is also vectorized, meaning that you can specify multiple rotation quaternions to be converted to
    rotation vectors by specifying each quaternion as a column.  Regardless of whether you are converting 1 or many
    quaternions the first axis must have a length of 4.

    This function makes the output have the same number of dimensions as the input.  It also checks for cases when
    theta is nearly zero (less than 1e-15) and replaces these with the identity rotation vector [0, 0, 0].

    :param quaternion: the rotation quaternion(s) to be converted to the rotation vector(s)
    :param dtype: the floating point type to perform the conversion in
    :return: The rotation vector(s) corresponding to the input rotation quaternion(s)
    """

    angle, axis = quaternion_to_axis_angle(quaternion, dtype=dtype)

    return angle * axis


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE,
                             dtype: DTypeLike = np.float64) -> tuple[FLOATING_ARRAY, FLOATING_ARRAY]:
    r"""
    This function converts a rotation quaternion into a rotation angle and a unit rotation axis.

    .. math::
        \theta = 2*\text{cos}^{-1}(q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\text{sin}(\theta/2)}

    The scalar part is clipped to [-1, 1] before the inverse cosine to absorb rounding.  Wherever theta is less than
    1e-15 the rotation is the identity and the axis is returned as the x axis [1, 0, 0].

    This function is vectorized; quaternions are stacked as columns and the angles are returned as a 1d array with the
    axes stacked as columns.

    :param quaternion: the rotation quaternion(s) to be converted
    :param dtype: the floating point type to perform the conversion in
    :return: The rotation angle(s) in radians and the unit rotation axis(es)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion, dtype=dtype)

    # get the rotation angle from the scalar portion of the quaternion
    theta = 2 * np.arccos(np.clip(quaternion[-1, ...], -1, 1))

    small_angle_check = theta < 1e-15

    with np.errstate(invalid='ignore', divide='ignore'):
        e_vec = quaternion[:3] / np.sin(theta / 2)

    default_axis = np.array([1, 0, 0], dtype=dtype)

    if quaternion.ndim > 1:
        # replace the rotation axis wherever there is an identity quaternion
        e_vec[:, small_angle_check] = default_axis.reshape(3, 1)
        theta[small_angle_check] = 0

    elif small_angle_check:
        e_vec = default_axis
        theta = theta.dtype.type(0)

    return theta, e_vec


def quaternion_to_rotmat(quaternion: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function converts an attitude quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\mathbf{q}_v` is the vector portion of the quaternion, :math:`q_s` is the scalar portion of the
    quaternion, :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.

    This function is vectorized, meaning that you can specify multiple rotation quaternions to be converted to matrices
    by specifying each quaternion as a column.  When converting multiple quaternions, each rotation matrix
    is stacked along the first axis.  For example::

        >>> from rotkit.rotations import quaternion_to_rotmat
        >>> from numpy import sqrt
        >>> quaternion_to_rotmat([[0, 0], [1, 1/sqrt(3)], [0, 1/sqrt(3)], [0, 1/sqrt(3)]])
        array([[[-1.        ,  0.        ,  0.        ],
                [ 0.        ,  1.        ,  0.        ],
                [ 0.        ,  0.        , -1.        ]],
               [[-0.33333333, -0.66666667,  0.66666667],
                [ 0.66666667,  0.33333333,  0.66666667],
                [-0.66666667,  0.66666667,  0.33333333]]])

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :param dtype: the floating point type to perform the conversion in
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion, dtype=dtype)

    # extract the scalar and vector portion of the quaternion(s)
    qs = quaternion[-1].reshape(-1, 1, 1)
    qv = quaternion[:3].reshape(3, -1)

    # form and return the rotation matrix
    return ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3, dtype=dtype) +
            2 * np.einsum('ij,jk->jik', qv, qv.T) +
            2 * qs * skew(qv, dtype=dtype).reshape(-1, 3, 3)).squeeze()


def axis_angle_to_quaternion(angle: SCALAR_OR_ARRAY, axis: ARRAY_LIKE,
                             dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function converts a rotation angle and a unit rotation axis into a rotation quaternion.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is assumed to be unit length.  Multiple rotations can be converted at once by giving a 1d array of angles
    and stacking the axes as columns.

    :param angle: The rotation angle(s) in radians
    :param axis: The unit rotation axis(es)
    :param dtype: the floating point type to perform the conversion in
    :return: the rotation quaternion(s) (not sign normalized)
    """

    angle = np.asarray(angle, dtype=dtype)
    axis = _check_vector_array_and_shape(axis, dtype=dtype)

    half_angle = angle / 2

    scalar = np.cos(half_angle).reshape((1,) + np.shape(half_angle))

    return np.concatenate([np.sin(half_angle) * axis, scalar], axis=0)


def rotvec_to_axis_angle(rot_vec: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> tuple[FLOATING_ARRAY, FLOATING_ARRAY]:
    r"""
    This function splits a rotation vector :math:`\mathbf{v}=\theta\hat{\mathbf{x}}` into its angle and unit axis.

    .. math::
        \theta = \left\|\mathbf{v}\right\| \\
        \hat{\mathbf{x}} = \frac{\mathbf{v}}{\theta}

    Wherever theta is less than 1e-15 the rotation is the identity and the axis is returned as the x axis [1, 0, 0].

    :param rot_vec: The rotation vector(s) stacked as columns
    :param dtype: the floating point type to perform the conversion in
    :return: The rotation angle(s) and the unit axis(es)
    """

    rot_vec = _check_vector_array_and_shape(rot_vec, dtype=dtype)

    # get the rotation angle(s)
    theta = np.linalg.norm(rot_vec, axis=0)

    small_angle_check = theta < 1e-15

    with np.errstate(invalid='ignore', divide='ignore'):
        axis = rot_vec / theta

    default_axis = np.array([1, 0, 0], dtype=dtype)

    if rot_vec.ndim > 1:
        axis[:, small_angle_check] = default_axis.reshape(3, 1)
        theta[small_angle_check] = 0

    elif small_angle_check:
        axis = default_axis
        theta = theta.dtype.type(0)

    return theta, axis


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function converts a rotation vector given as a 3 element Sequence into a rotation quaternion.

    The rotation vector is first split into its angle and axis (:func:`rotvec_to_axis_angle`) and the result is then
    converted with :func:`axis_angle_to_quaternion`:

    .. math::
        \theta = \left\|\mathbf{v}\right\| \\
        \hat{\mathbf{x}} = \frac{\mathbf{v}}{\theta} \\
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    This function is also vectorized, meaning that you can specify multiple rotation vectors to be converted to
    quaternions by specifying each vector as a column.  The identity rotation vector [0, 0, 0] becomes the identity
    quaternion [0, 0, 0, 1].

    :param rot_vec: The rotation vector to convert to a rotation quaternion
    :param dtype: the floating point type to perform the conversion in
    :return: the rotation quaternion(s) corresponding to the input rotation vector(s)
    """

    return axis_angle_to_quaternion(*rotvec_to_axis_angle(rot_vec, dtype=dtype), dtype=dtype)


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function converts a rotation matrix into a unit rotation quaternion with a non-negative scalar part.

    The conversion branches on the largest of the diagonal elements and the trace of the matrix so that the
    square root is always taken of the largest quaternion component (Shepperd's method).  When the trace is largest

    .. math::
        \mathbf{q} \propto \left[\begin{array}{c} t_{32}-t_{23} \\ t_{13}-t_{31} \\ t_{21}-t_{12} \\
        1+\text{Tr}(\mathbf{T})\end{array}\right]

    and when diagonal element :math:`t_{ii}` is largest (with :math:`j, k` the cyclic successors of :math:`i`)

    .. math::
        q_i \propto 1-\text{Tr}(\mathbf{T})+2t_{ii},\quad q_j \propto t_{ji}+t_{ij},\quad
        q_k \propto t_{ki}+t_{ik},\quad q_s \propto t_{kj}-t_{jk}

    after which the result is normalized (see :func:`.quaternion_normalize`).

    This function is also vectorized, meaning that you can specify multiple rotation matrices to be converted to
    quaternions by specifying each matrix along the first axis.  A single matrix returns a 1d quaternion and a stack of
    matrices returns the quaternions as columns of a 4xn array.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :param dtype: the floating point type to perform the conversion in
    :return: the rotation quaternion(s) corresponding to the input rotation matrix(ces)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix, dtype=dtype)

    matrices = rotation_matrix.reshape(-1, 3, 3)

    diagonal = np.diagonal(matrices, axis1=-2, axis2=-1)
    trace = diagonal.sum(axis=-1)

    choice = np.argmax(np.column_stack([diagonal, trace]), axis=-1)

    quaternions = np.empty((matrices.shape[0], 4), dtype=dtype)

    # the trace is the largest term
    case = choice == 3
    mats = matrices[case]
    quaternions[case, 0] = mats[:, 2, 1] - mats[:, 1, 2]
    quaternions[case, 1] = mats[:, 0, 2] - mats[:, 2, 0]
    quaternions[case, 2] = mats[:, 1, 0] - mats[:, 0, 1]
    quaternions[case, 3] = 1 + trace[case]

    # one of the diagonal terms is the largest
    for i in range(3):
        j = (i + 1) % 3
        k = (j + 1) % 3

        case = choice == i
        mats = matrices[case]
        quaternions[case, i] = 1 - trace[case] + 2 * mats[:, i, i]
        quaternions[case, j] = mats[:, j, i] + mats[:, i, j]
        quaternions[case, k] = mats[:, k, i] + mats[:, i, k]
        quaternions[case, 3] = mats[:, k, j] - mats[:, j, k]

    quaternions = quaternion_normalize(quaternions.T, dtype=dtype)

    if rotation_matrix.ndim == 2:
        return quaternions[:, 0]

    return quaternions


def rotmat_to_euler_zyx(matrix: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function extracts the intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angles from a rotation matrix.

    The matrix is the active rotation produced by :math:`\mathbf{R}=\mathbf{R}_z(z)\mathbf{R}_y(y)\mathbf{R}_x(x)`.
    The angles are read off the rows of the transposed matrix :math:`\mathbf{R}_B=\mathbf{R}^T` whose rows are the
    basis vectors of the rotated frame.  With :math:`r_{ij}` the (1 indexed) elements of :math:`\mathbf{R}_B`

    .. math::
        z = \text{atan2}(r_{12}, r_{11}) \\
        y = -\text{sin}^{-1}(r_{13}) \\
        x = \text{atan2}(r_{23}, r_{33})

    where :math:`r_{13}` is clipped into [-1, 1] before the inverse sine.  When :math:`|r_{13}|` approaches 1 the
    rotation is in gimbal lock: only :math:`z+x` (pitch -pi/2) or :math:`z-x` (pitch +pi/2) is observable and the
    individual yaw and roll returned are ill-conditioned (but finite).  Use :func:`.euler_zyx_unique` on the result
    when a canonical triple is needed.

    This function is vectorized; stack the matrices down the first axis and the angles are returned as the columns of
    a 3xn array.  A single matrix returns a length 3 array ordered (z, y, x).

    :param matrix: The rotation matrix(ces) to convert
    :param dtype: the floating point type to perform the conversion in
    :return: The yaw, pitch, and roll angles in radians
    """

    matrix = _check_matrix_array_and_shape(matrix, dtype=dtype)

    body_matrix = matrix.swapaxes(-2, -1)

    r11 = body_matrix[..., 0, 0]
    r12 = body_matrix[..., 0, 1]
    r13 = body_matrix[..., 0, 2]
    r23 = body_matrix[..., 1, 2]
    r33 = body_matrix[..., 2, 2]

    if _LOGGER.isEnabledFor(logging.DEBUG) and np.any(np.abs(r13) > GIMBAL_LOCK_THRESHOLD):
        _LOGGER.debug('Extracting Z-Y-X Euler angles at gimbal lock; yaw and roll are ill-conditioned')

    return np.array([np.arctan2(r12, r11), -np.arcsin(np.clip(r13, -1, 1)), np.arctan2(r23, r33)], dtype=dtype)


def rotmat_to_euler_xyz(matrix: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    This function extracts the intrinsic X-Y'-Z'' Euler angles from a rotation matrix.

    The matrix is the active rotation produced by :math:`\mathbf{R}=\mathbf{R}_x(x)\mathbf{R}_y(y)\mathbf{R}_z(z)` so
    that, with :math:`t_{ij}` the (1 indexed) elements of :math:`\mathbf{R}`

    .. math::
        x = \text{atan2}(-t_{23}, t_{33}) \\
        y = \text{sin}^{-1}(t_{13}) \\
        z = \text{atan2}(-t_{12}, t_{11})

    This function is vectorized in the same way as :func:`rotmat_to_euler_zyx`.

    :param matrix: The rotation matrix(ces) to convert
    :param dtype: the floating point type to perform the conversion in
    :return: The x, y, and z angles in radians
    """

    matrix = _check_matrix_array_and_shape(matrix, dtype=dtype)

    return np.array([np.arctan2(-matrix[..., 1, 2], matrix[..., 2, 2]),
                     np.arcsin(np.clip(matrix[..., 0, 2], -1, 1)),
                     np.arctan2(-matrix[..., 0, 1], matrix[..., 0, 0])], dtype=dtype)


def euler_to_rotmat(angles: Sequence[SCALAR_OR_ARRAY] | FLOATING_ARRAY, order: EULER_ORDERS = 'xyz',
                    dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    """
    This function converts a sequence of 3 euler angles into a rotation matrix.

    The order of the rotations is specified using the `order` keyword argument which recognizes x, y, and z
    for axes of rotation.  For instance, say you have a rotation sequence of (1) rotate about x by xr, (2) rotate about
    y by yr, and (3) rotate about z by zr then you would specify order as 'xyz', and the angles as [xr, yr, zr] (order
    should correspond to the indices of angles).  The rotations are applied left to right as successive
    pre-multiplications, so 'xyz' forms :math:`\\mathbf{R}_z\\mathbf{R}_y\\mathbf{R}_x`.  This is why the intrinsic
    Z-Y'-X'' triple (z, y, x) is formed as ``euler_to_rotmat([x, y, z], 'xyz')``.

    :param angles: The euler angles
    :param order: The order to apply the rotations in
    :param dtype: the floating point type to form the matrix in
    :return: The rotation matrix formed by the euler angles
    :raises ValueError: When the ``order`` string contains a character that is not x, y, or z
    """

    rotation = np.eye(3, dtype=dtype)

    # loop through the angles and their axes and update the total rotation matrix
    for angle, axis in zip(angles, order):

        if axis.lower() == 'x':
            update = rot_x(angle, dtype=dtype)
        elif axis.lower() == 'y':
            update = rot_y(angle, dtype=dtype)
        elif axis.lower() == 'z':
            update = rot_z(angle, dtype=dtype)
        else:
            raise ValueError('Order must only include x, y, and z.  You entered a {} character'.format(axis))

        rotation = update @ rotation

    return rotation


def euler_to_quaternion(angles: Sequence[SCALAR_OR_ARRAY] | FLOATING_ARRAY, order: EULER_ORDERS = 'xyz',
                        dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    """
    This function converts Euler angles into a a rotation quaternion.

    Currently this is just done through a call to :func:`.euler_to_rotmat` followed by a call to
    :func:`.rotmat_to_quaternion`.

    :param angles: The angles to convert
    :param order: the order of the angles
    :param dtype: the floating point type to perform the conversion in
    :returns: The rotation quaternion(s)
    """

    return rotmat_to_quaternion(euler_to_rotmat(angles, order, dtype=dtype), dtype=dtype)
