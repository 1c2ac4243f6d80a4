# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Self

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core.conversions import axis_angle_to_quaternion, quaternion_to_rotvec, rotvec_to_axis_angle
from rotkit.rotations.rotation_base import RotationBase


class RotationVector(RotationBase):
    """
    A rotation expressed as a 3 element rotation vector :math:`\\mathbf{v}=\\theta\\hat{\\mathbf{x}}`.

    :math:`\\theta` is the rotation angle in radians and :math:`\\hat{\\mathbf{x}}` is the unit rotation axis.  Rotation
    vectors are not unique, as there is a long and a short vector that both represent the same rotation.
    """

    def __init__(self, data: ARRAY_LIKE | RotationBase | None = None):
        """
        :param data: The rotation vector or the rotation to convert
        :raises ValueError: If the vector is not of length 3
        """

        self._vector = np.zeros(3, dtype=self.scalar_type)

        if isinstance(data, RotationBase):
            self.assign(data)

        elif data is not None:
            data = np.asanyarray(data, dtype=self.scalar_type).ravel()

            if data.size != 3:
                raise ValueError('The rotation vector must be length 3')

            self._vector[:] = data

    @classmethod
    def _convert(cls, other: RotationBase) -> FLOATING_ARRAY:

        return quaternion_to_rotvec(other.to_quaternion_array(dtype=cls.scalar_type), dtype=cls.scalar_type)

    def to_implementation(self) -> FLOATING_ARRAY:
        return self._vector

    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        """
        Converts the rotation vector into its angle and axis and then into a unit quaternion.

        :param dtype: the floating point type to compute the quaternion in.  Defaults to :attr:`scalar_type`
        :return: The rotation quaternion
        """

        dtype = self._dtype(dtype)

        angle, axis = rotvec_to_axis_angle(self._vector, dtype=dtype)

        return axis_angle_to_quaternion(angle, axis, dtype=dtype)

    @property
    def vector(self) -> FLOATING_ARRAY:
        """
        A copy of the rotation vector.
        """

        return self._vector.copy()

    def inverted(self) -> Self:
        """
        Returns the inverse rotation, the negated rotation vector.

        :return: The inverse rotation
        """

        return type(self)(-self._vector)


class RotationVectorD(RotationVector):
    """
    A double precision rotation vector.
    """

    scalar_type = np.float64


class RotationVectorF(RotationVector):
    """
    A single precision rotation vector.
    """

    scalar_type = np.float32
