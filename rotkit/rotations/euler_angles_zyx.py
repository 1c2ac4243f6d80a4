# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angle representation of a rotation.

The triple :math:`(z, y, x)` describes a rotation first by angle :math:`z` about the body Z axis, then by :math:`y`
about the once rotated Y' axis, then by :math:`x` about the twice rotated X'' axis.  Equivalently, it is the
extrinsic X-Y-Z rotation with the angles reversed, and the rotation matrix it produces is

.. math::
    \mathbf{R} = \mathbf{R}_z(z)\mathbf{R}_y(y)\mathbf{R}_x(x)

Any real values are accepted for the three angles.  Use :meth:`.EulerAnglesZyx.get_unique` to map a triple onto the
unique triple describing the same rotation with angles in :math:`[-\pi, \pi)\times[-\pi/2, \pi/2)\times[-\pi, \pi)`
(see :func:`.euler_zyx_unique` for the details at gimbal lock).

The yaw-pitch-roll names are aliases of the same classes (:data:`EulerAnglesYpr` is :class:`EulerAnglesZyx`), as are the
passive usage names (:data:`EulerAnglesZyxPD` is :class:`EulerAnglesZyxD`); the active and passive interpretations share
the same numbers.
"""

from typing import Self

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY
from rotkit.rotations.core.canonical import euler_zyx_unique
from rotkit.rotations.core.conversions import euler_to_rotmat, quaternion_to_rotmat, rotmat_to_euler_zyx, \
    rotmat_to_quaternion
from rotkit.rotations.quaternion import RotationQuaternion, RotationQuaternionD, RotationQuaternionF
from rotkit.rotations.rotation_base import RotationBase
from rotkit.rotations.rotation_matrix import RotationMatrix


__all__ = ['EulerAnglesZyx', 'EulerAnglesZyxD', 'EulerAnglesZyxF', 'EulerAnglesZyxPD', 'EulerAnglesZyxPF',
           'EulerAnglesYpr', 'EulerAnglesYprD', 'EulerAnglesYprF', 'EulerAnglesYprPD', 'EulerAnglesYprPF']


class EulerAnglesZyx(RotationBase):
    """
    A rotation expressed as intrinsic Z-Y'-X'' Euler angles (yaw, pitch, roll).

    The angles are stored in a length 3 array of :attr:`scalar_type` in the order (z, y, x).  The class can be
    initialized in a number of ways::

        >>> from rotkit.rotations import EulerAnglesZyx, RotationMatrix
        >>> EulerAnglesZyx()  # the identity rotation
        EulerAnglesZyx(array([0., 0., 0.]))
        >>> EulerAnglesZyx(0.1, 0.2, 0.3)  # yaw, pitch, roll
        EulerAnglesZyx(array([0.1, 0.2, 0.3]))
        >>> EulerAnglesZyx([0.1, 0.2, 0.3])  # a (z, y, x) sequence
        EulerAnglesZyx(array([0.1, 0.2, 0.3]))
        >>> EulerAnglesZyx(RotationMatrix([[0, -1, 0], [1, 0, 0], [0, 0, 1]]))  # another representation
        EulerAnglesZyx(array([ 1.57079633, -0.        ,  0.        ]))

    The angles can be read and written with the :attr:`yaw`/:attr:`z`, :attr:`pitch`/:attr:`y`, and
    :attr:`roll`/:attr:`x` properties (or the equivalent ``set_*`` methods).  Converting to a string gives the three
    angles separated by single spaces in (z, y, x) order.

    The single and double precision variants are :class:`EulerAnglesZyxF` and :class:`EulerAnglesZyxD`.  This class
    itself is double precision.
    """

    _quaternion_type: type[RotationQuaternion] = RotationQuaternion
    """
    The quaternion representation with the same precision, used for the inversion.
    """

    def __init__(self, yaw: float | ARRAY_LIKE | RotationBase | None = None, pitch: float | None = None,
                 roll: float | None = None):
        """
        :param yaw: The angle about the Z axis, the (z, y, x) sequence of all three angles, or the rotation to convert
        :param pitch: The angle about the Y' axis
        :param roll: The angle about the X'' axis
        :raises ValueError: If the angles cannot be interpreted
        """

        self._zyx = np.zeros(3, dtype=self.scalar_type)

        if isinstance(yaw, RotationBase):
            self.assign(yaw)

        elif pitch is not None or roll is not None:

            if yaw is None or pitch is None or roll is None:
                raise ValueError('All three angles must be specified')

            self._zyx[:] = [yaw, pitch, roll]

        elif yaw is not None:
            data = np.asanyarray(yaw, dtype=self.scalar_type).ravel()

            if data.size != 3:
                raise ValueError('The Euler angles must be length 3')

            self._zyx[:] = data

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the identity rotation (0, 0, 0).

        :return: The identity rotation
        """

        return cls()

    @classmethod
    def _convert(cls, other: RotationBase) -> FLOATING_ARRAY:
        """
        Computes the (z, y, x) angles of another rotation in :attr:`scalar_type`.

        Euler angles of another precision are cast component by component.  Rotation matrices are converted directly
        with :func:`.rotmat_to_euler_zyx`.  Every other representation (angle-axis, rotation vector, quaternion, X-Y-Z
        Euler angles) is first expressed as a unit quaternion, whose rotation matrix is then converted.  The quaternion
        is computed at :attr:`scalar_type` from the source components cast to :attr:`scalar_type`.

        :param other: The rotation to convert
        :return: The (z, y, x) angles
        """

        if isinstance(other, EulerAnglesZyx):
            return other.to_implementation().astype(cls.scalar_type)

        if isinstance(other, RotationMatrix):
            matrix = other.to_implementation()
        else:
            matrix = quaternion_to_rotmat(other.to_quaternion_array(dtype=cls.scalar_type), dtype=cls.scalar_type)

        return rotmat_to_euler_zyx(matrix, dtype=cls.scalar_type)

    def to_implementation(self) -> FLOATING_ARRAY:
        return self._zyx

    def to_rotation_matrix_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        z, y, x = self._zyx

        return euler_to_rotmat([x, y, z], order='xyz', dtype=self._dtype(dtype))

    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        dtype = self._dtype(dtype)

        return rotmat_to_quaternion(self.to_rotation_matrix_array(dtype=dtype), dtype=dtype)

    def vector(self) -> FLOATING_ARRAY:
        """
        Returns a copy of the angles as a length 3 array ordered (z, y, x).

        :return: The Euler angles
        """

        return self._zyx.copy()

    @property
    def yaw(self) -> np.floating:
        """
        The yaw (Z) angle in radians.
        """

        return self._zyx[0]

    @yaw.setter
    def yaw(self, val: float):
        self._zyx[0] = val

    @property
    def pitch(self) -> np.floating:
        """
        The pitch (Y') angle in radians.
        """

        return self._zyx[1]

    @pitch.setter
    def pitch(self, val: float):
        self._zyx[1] = val

    @property
    def roll(self) -> np.floating:
        """
        The roll (X'') angle in radians.
        """

        return self._zyx[2]

    @roll.setter
    def roll(self, val: float):
        self._zyx[2] = val

    z = yaw
    y = pitch
    x = roll

    def set_yaw(self, yaw: float):
        """
        Sets the yaw (Z) angle in radians.
        """

        self._zyx[0] = yaw

    def set_pitch(self, pitch: float):
        """
        Sets the pitch (Y') angle in radians.
        """

        self._zyx[1] = pitch

    def set_roll(self, roll: float):
        """
        Sets the roll (X'') angle in radians.
        """

        self._zyx[2] = roll

    set_z = set_yaw
    set_y = set_pitch
    set_x = set_roll

    def set_identity(self) -> Self:
        """
        Sets the rotation to the identity (0, 0, 0).

        :return: self
        """

        self._zyx[:] = 0

        return self

    def inverted(self) -> Self:
        """
        Returns the inverse of the rotation.

        The angles are converted to a unit quaternion of the same precision, the quaternion is inverted (conjugated),
        and the result is converted back to Euler angles.

        :return: The inverse rotation
        """

        return type(self)(self._quaternion_type(self).inverted())

    def get_unique(self) -> Self:
        """
        Returns the unique Euler angles describing the same rotation.

        Yaw and roll are in [-pi, pi) and pitch in [-pi/2, pi/2).  Near gimbal lock the pitch is kept, the roll is 0
        and the yaw carries the whole free angle.  See :func:`.euler_zyx_unique`.

        :return: A new instance with the unique angles
        """

        return type(self)(euler_zyx_unique(self._zyx, dtype=self.scalar_type))

    def set_unique(self) -> Self:
        """
        Modifies the angles in place so that they are the unique angles describing the same rotation.

        See :meth:`get_unique`.

        :return: self
        """

        self._zyx[:] = euler_zyx_unique(self._zyx, dtype=self.scalar_type)

        return self


class EulerAnglesZyxD(EulerAnglesZyx):
    """
    Double precision intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angles.
    """

    scalar_type = np.float64

    _quaternion_type = RotationQuaternionD


class EulerAnglesZyxF(EulerAnglesZyx):
    """
    Single precision intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angles.
    """

    scalar_type = np.float32

    _quaternion_type = RotationQuaternionF


EulerAnglesZyxPD = EulerAnglesZyxD
"""
Double precision Euler angles used as a passive rotation.
"""

EulerAnglesZyxPF = EulerAnglesZyxF
"""
Single precision Euler angles used as a passive rotation.
"""

EulerAnglesYpr = EulerAnglesZyx
"""
The yaw-pitch-roll name of :class:`EulerAnglesZyx`.
"""

EulerAnglesYprD = EulerAnglesZyxD
EulerAnglesYprF = EulerAnglesZyxF
EulerAnglesYprPD = EulerAnglesZyxPD
EulerAnglesYprPF = EulerAnglesZyxPF
