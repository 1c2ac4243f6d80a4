# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the rotation matrix representation along with the optional checking of the matrices it is given.

Rotation matrices in rotkit are active operators on column vectors, that is ``R @ v`` rotates ``v``.  When a matrix is
given to :class:`RotationMatrix` it is (by default) checked to be orthonormal with a determinant of +1 to within
:attr:`RotationMatrixOptions.orthonormality_tolerance`.  The check is advisory.  It issues a warning (or raises when
:attr:`RotationMatrixOptions.raise_on_failure` is set) but never changes the stored matrix.
"""

from dataclasses import dataclass

from typing import Self

import logging

import warnings

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core.conversions import rotmat_to_quaternion
from rotkit.rotations.rotation_base import RotationBase
from rotkit.utilities.options import UserOptions


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


@dataclass
class RotationMatrixOptions(UserOptions):
    """
    This dataclass serves as one way to control the checking of matrices given to :class:`RotationMatrix`.
    """

    check_orthonormality: bool = True
    """
    A flag specifying whether matrices given to :class:`RotationMatrix` should be checked.
    """

    orthonormality_tolerance: float = 1e-6
    """
    The maximum absolute deviation allowed between :math:`\\mathbf{R}^T\\mathbf{R}` and the identity matrix and between
    the determinant of :math:`\\mathbf{R}` and 1.
    """

    raise_on_failure: bool = False
    """
    A flag specifying whether a failed check should raise a ``ValueError`` instead of issuing a warning.
    """


def check_rotation_matrix(matrix: ARRAY_LIKE, options: RotationMatrixOptions | None = None) -> bool:
    """
    Checks that a 3x3 matrix is a proper rotation (orthonormal with a determinant of +1) within a tolerance.

    A failed check issues a ``UserWarning`` (and a warning log record) unless ``options.raise_on_failure`` is set, in
    which case a ``ValueError`` is raised.  Non-finite matrices always fail.

    :param matrix: The matrix to check
    :param options: The options controlling the tolerance and the failure behaviour.  If ``None`` the defaults of
                    :class:`RotationMatrixOptions` are used.
    :return: ``True`` if the matrix passed the check, ``False`` otherwise
    :raises ValueError: If the check failed and ``options.raise_on_failure`` is ``True``
    """

    if options is None:
        options = RotationMatrixOptions()

    matrix = np.asanyarray(matrix, dtype=np.float64)

    orthonormality_error = np.abs(matrix.T @ matrix - np.eye(3)).max()
    determinant_error = abs(np.linalg.det(matrix) - 1)

    _LOGGER.debug(f'Rotation matrix orthonormality error {orthonormality_error:.3e}, '
                  f'determinant error {determinant_error:.3e}')

    if orthonormality_error <= options.orthonormality_tolerance and \
            determinant_error <= options.orthonormality_tolerance:
        return True

    message = ('The matrix is not a proper rotation matrix (orthonormality error {:.3e}, determinant error {:.3e}, '
               'tolerance {:.3e})'.format(orthonormality_error, determinant_error, options.orthonormality_tolerance))

    if options.raise_on_failure:
        raise ValueError(message)

    _LOGGER.warning(message)
    warnings.warn(message)

    return False


class RotationMatrix(RotationBase):
    """
    A rotation expressed as a 3x3 orthonormal matrix.

    The matrix is the active rotation operator, so that the rotation produced by the intrinsic Z-Y'-X'' Euler angles
    (z, y, x) is ``rot_z(z) @ rot_y(y) @ rot_x(x)``.

    The constructor accepts nothing (the identity), a 3x3 array-like, or another rotation representation.  Matrices
    given directly are checked according to ``options`` (see :func:`check_rotation_matrix`); conversions from other
    representations are not checked.

    The options are applied to the instance as the attributes :attr:`check_orthonormality`,
    :attr:`orthonormality_tolerance` and :attr:`raise_on_failure`.  Transposed and inverted copies keep them.
    """

    def __init__(self, data: ARRAY_LIKE | RotationBase | None = None, options: RotationMatrixOptions | None = None):
        """
        :param data: The 3x3 matrix or the rotation to convert
        :param options: The options controlling the check of a given matrix
        :raises ValueError: If the matrix does not have 9 elements
        """

        if options is None:
            options = RotationMatrixOptions()

        options.apply_options(self)

        self._matrix = np.eye(3, dtype=self.scalar_type)

        if isinstance(data, RotationBase):
            self.assign(data)

        elif data is not None:

            data = np.asanyarray(data, dtype=self.scalar_type)

            if data.size != 9:
                raise ValueError('The rotation matrix must be 3x3')

            data = data.reshape(3, 3)

            if self.check_orthonormality:
                check_rotation_matrix(data, options)

            self._matrix[:] = data

    @classmethod
    def _convert(cls, other: RotationBase) -> FLOATING_ARRAY:

        return np.asanyarray(other.to_rotation_matrix_array(dtype=cls.scalar_type), dtype=cls.scalar_type)

    def to_implementation(self) -> FLOATING_ARRAY:
        return self._matrix

    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        return rotmat_to_quaternion(self._matrix, dtype=self._dtype(dtype))

    def to_rotation_matrix_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        return self._matrix.astype(self._dtype(dtype))

    @property
    def matrix(self) -> FLOATING_ARRAY:
        """
        A copy of the 3x3 rotation matrix.
        """

        return self._matrix.copy()

    def transposed(self) -> Self:
        """
        Returns a new rotation matrix holding the transpose of this one.

        :return: The transposed matrix
        """

        transposed = self.copy()

        transposed._matrix[:] = self._matrix.T

        return transposed

    def inverted(self) -> Self:
        """
        Returns the inverse rotation, which for an orthonormal matrix is its transpose.

        :return: The inverse rotation
        """

        return self.transposed()


class RotationMatrixD(RotationMatrix):
    """
    A double precision rotation matrix.
    """

    scalar_type = np.float64


class RotationMatrixF(RotationMatrix):
    """
    A single precision rotation matrix.
    """

    scalar_type = np.float32
