# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the unit rotation quaternion representation, the hub that most conversions in rotkit go through.
"""

from typing import Self

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core.quaternion_math import quaternion_inverse, quaternion_normalize
from rotkit.rotations.rotation_base import RotationBase


class RotationQuaternion(RotationBase):
    """
    A unit rotation quaternion of the form ``[q_x, q_y, q_z, q_s]``.

    The quaternion is :math:`\\left[\\text{sin}(\\theta/2)\\hat{\\mathbf{x}}^T, \\text{cos}(\\theta/2)\\right]^T` where
    :math:`\\hat{\\mathbf{x}}` is the unit rotation axis and :math:`\\theta` is the rotation angle.  The quaternion is
    always stored with unit length and a non-negative scalar part so that each rotation has a single quaternion (except
    for the 180 degree rotations, where both signs of the vector part have a zero scalar).

    The constructor accepts nothing (the identity), 4 components as a sequence, or another rotation representation::

        >>> from rotkit.rotations import RotationQuaternion, EulerAnglesZyx
        >>> RotationQuaternion(EulerAnglesZyx(0.5, 0, 0))
        RotationQuaternion(array([0.        , 0.        , 0.24740396, 0.96891242]))

    Components which are not unit length are normalized on construction.
    """

    def __init__(self, data: ARRAY_LIKE | RotationBase | None = None):
        """
        :param data: The quaternion components ``[q_x, q_y, q_z, q_s]`` or the rotation to convert
        :raises ValueError: If the components are not of length 4
        """

        self._quaternion = np.array([0, 0, 0, 1], dtype=self.scalar_type)

        if isinstance(data, RotationBase):
            self.assign(data)

        elif data is not None:
            data = np.asanyarray(data, dtype=self.scalar_type).ravel()

            if data.size != 4:
                raise ValueError('The quaternion must be length 4')

            self._quaternion[:] = quaternion_normalize(data, dtype=self.scalar_type)

    @classmethod
    def _convert(cls, other: RotationBase) -> FLOATING_ARRAY:

        return quaternion_normalize(other.to_quaternion_array(dtype=cls.scalar_type), dtype=cls.scalar_type)

    def to_implementation(self) -> FLOATING_ARRAY:
        return self._quaternion

    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        return self._quaternion.astype(self._dtype(dtype))

    @property
    def vector(self) -> FLOATING_ARRAY:
        """
        The vector portion of the quaternion (the first three elements).

        This property is read only.
        """

        return self._quaternion[:3].copy()

    @property
    def scalar(self) -> np.floating:
        """
        The scalar portion of the quaternion (the last element).

        This property is read only.
        """

        return self._quaternion[-1]

    def inverted(self) -> Self:
        """
        This method returns the inverse rotation as a new quaternion.

        Since the quaternion is unit length its inverse is the conjugate, which simply negates the vector portion.  See
        :func:`.quaternion_inverse`.

        :return: The inverse rotation
        """

        return type(self)(quaternion_inverse(self._quaternion, dtype=self.scalar_type))


class RotationQuaternionD(RotationQuaternion):
    """
    A double precision unit rotation quaternion.
    """

    scalar_type = np.float64


class RotationQuaternionF(RotationQuaternion):
    """
    A single precision unit rotation quaternion.
    """

    scalar_type = np.float32
