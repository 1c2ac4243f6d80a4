# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Self

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core.conversions import euler_to_rotmat, rotmat_to_euler_xyz, rotmat_to_quaternion
from rotkit.rotations.rotation_base import RotationBase


class EulerAnglesXyz(RotationBase):
    """
    A rotation expressed as intrinsic X-Y'-Z'' Euler angles (roll, pitch, yaw about the moving axes).

    The implementation array is ``[x, y, z]`` and the rotation matrix is ``rot_x(x) @ rot_y(y) @ rot_z(z)``.

    The constructor accepts nothing (the identity), three angles, a length 3 sequence of angles, or another rotation
    representation.
    """

    def __init__(self, x: float | ARRAY_LIKE | RotationBase | None = None, y: float | None = None,
                 z: float | None = None):
        """
        :param x: The angle about the X axis, the sequence of all three angles, or the rotation to convert
        :param y: The angle about the Y' axis
        :param z: The angle about the Z'' axis
        :raises ValueError: If the angles cannot be interpreted
        """

        self._xyz = np.zeros(3, dtype=self.scalar_type)

        if isinstance(x, RotationBase):
            self.assign(x)

        elif y is not None or z is not None:

            if x is None or y is None or z is None:
                raise ValueError('All three angles must be specified')

            self._xyz[:] = [x, y, z]

        elif x is not None:
            data = np.asanyarray(x, dtype=self.scalar_type).ravel()

            if data.size != 3:
                raise ValueError('The Euler angles must be length 3')

            self._xyz[:] = data

    @classmethod
    def _convert(cls, other: RotationBase) -> FLOATING_ARRAY:

        return rotmat_to_euler_xyz(other.to_rotation_matrix_array(dtype=cls.scalar_type), dtype=cls.scalar_type)

    def to_implementation(self) -> FLOATING_ARRAY:
        return self._xyz

    def to_rotation_matrix_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        x, y, z = self._xyz

        return euler_to_rotmat([z, y, x], order='zyx', dtype=self._dtype(dtype))

    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        dtype = self._dtype(dtype)

        return rotmat_to_quaternion(self.to_rotation_matrix_array(dtype=dtype), dtype=dtype)

    @property
    def x(self) -> np.floating:
        """
        The angle about the X axis in radians.
        """
        return self._xyz[0]

    @property
    def y(self) -> np.floating:
        """
        The angle about the Y' axis in radians.
        """
        return self._xyz[1]

    @property
    def z(self) -> np.floating:
        """
        The angle about the Z'' axis in radians.
        """
        return self._xyz[2]

    def vector(self) -> FLOATING_ARRAY:
        """
        Returns a copy of the angles ordered (x, y, z).
        """

        return self._xyz.copy()

    def inverted(self) -> Self:
        """
        Returns the inverse rotation, extracted from the transposed rotation matrix.

        :return: The inverse rotation
        """

        return type(self)(rotmat_to_euler_xyz(self.to_rotation_matrix_array().T, dtype=self.scalar_type))


class EulerAnglesXyzD(EulerAnglesXyz):
    """
    Double precision intrinsic X-Y'-Z'' Euler angles.
    """

    scalar_type = np.float64


class EulerAnglesXyzF(EulerAnglesXyz):
    """
    Single precision intrinsic X-Y'-Z'' Euler angles.
    """

    scalar_type = np.float32
