# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Self

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core.conversions import axis_angle_to_quaternion, quaternion_to_axis_angle
from rotkit.rotations.rotation_base import RotationBase


class AngleAxis(RotationBase):
    """
    A rotation expressed as an angle (in radians) about a unit axis.

    The implementation array is ``[angle, axis_x, axis_y, axis_z]``.  The identity is the zero angle about the x axis.

    The constructor accepts nothing (the identity), an angle and an axis, or another rotation representation.  The
    axis is normalized on construction.
    """

    def __init__(self, angle: float | RotationBase | None = None, axis: ARRAY_LIKE | None = None):
        """
        :param angle: The rotation angle in radians or the rotation to convert
        :param axis: The rotation axis (required when angle is a number)
        :raises ValueError: If only one of angle and axis is given as numbers or the axis has zero length
        """

        self._angle_axis = np.array([0, 1, 0, 0], dtype=self.scalar_type)

        if isinstance(angle, RotationBase):
            self.assign(angle)

        elif angle is not None or axis is not None:

            if angle is None or axis is None:
                raise ValueError('Both the angle and the axis must be specified')

            axis = np.asanyarray(axis, dtype=self.scalar_type).ravel()

            if axis.size != 3:
                raise ValueError('The axis must be length 3')

            length = np.linalg.norm(axis)

            if length == 0:
                raise ValueError('The axis must have a non-zero length')

            self._angle_axis[0] = angle
            self._angle_axis[1:] = axis / length

    @classmethod
    def _convert(cls, other: RotationBase) -> FLOATING_ARRAY:

        angle, axis = quaternion_to_axis_angle(other.to_quaternion_array(dtype=cls.scalar_type), dtype=cls.scalar_type)

        return np.hstack([angle, axis]).astype(cls.scalar_type, copy=False)

    def to_implementation(self) -> FLOATING_ARRAY:
        return self._angle_axis

    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        return axis_angle_to_quaternion(self.angle, self.axis, dtype=self._dtype(dtype))

    @property
    def angle(self) -> np.floating:
        """
        The rotation angle in radians.
        """

        return self._angle_axis[0]

    @angle.setter
    def angle(self, val: float):
        self._angle_axis[0] = val

    @property
    def axis(self) -> FLOATING_ARRAY:
        """
        The unit rotation axis.

        When setting, the axis is normalized.
        """

        return self._angle_axis[1:].copy()

    @axis.setter
    def axis(self, val: ARRAY_LIKE):
        val = np.asanyarray(val, dtype=self.scalar_type).ravel()

        length = np.linalg.norm(val)

        if val.size != 3 or length == 0:
            raise ValueError('The axis must be a non-zero length 3 vector')

        self._angle_axis[1:] = val / length

    def inverted(self) -> Self:
        """
        Returns the inverse rotation, the negated angle about the same axis.

        :return: The inverse rotation
        """

        return type(self)(-self.angle, self.axis)


class AngleAxisD(AngleAxis):
    """
    A double precision angle-axis rotation.
    """

    scalar_type = np.float64


class AngleAxisF(AngleAxis):
    """
    A single precision angle-axis rotation.
    """

    scalar_type = np.float32
