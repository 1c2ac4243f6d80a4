# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the abstract base class shared by every rotation representation in rotkit.

A representation is a small mutable value type which owns a single numpy array (its implementation) of a fixed floating
point precision (:attr:`.RotationBase.scalar_type`).  Conversions between representations use the unit quaternion as
the hub: every representation can express itself as a unit quaternion (:meth:`.RotationBase.to_quaternion_array`) and
a rotation matrix (:meth:`.RotationBase.to_rotation_matrix_array`), and every representation knows how to build its
own implementation from any other representation (:meth:`.RotationBase._convert`).
"""

from abc import ABCMeta, abstractmethod

from typing import Self, Any

import copy

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import FLOATING_ARRAY, SCALAR_TYPE
from rotkit.rotations.core.conversions import quaternion_to_rotmat


class RotationBase(metaclass=ABCMeta):
    """
    The abstract base of all rotation representations.

    Subclasses store their data in a single numpy array of :attr:`scalar_type` returned by
    :meth:`to_implementation`.  Single and double precision variants of a representation are separate subclasses which
    only differ in :attr:`scalar_type` (for instance :class:`.EulerAnglesZyxF` and :class:`.EulerAnglesZyxD`).

    The equality operator compares the implementations bitwise for two representations of the same kind and precision.
    Use :func:`.is_similar` to check whether two representations describe the same rotation.
    """

    scalar_type: SCALAR_TYPE = np.float64
    """
    The numpy floating point type the representation is stored and computed in.
    """

    # mutable value type
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def to_implementation(self) -> FLOATING_ARRAY:
        """
        Returns the underlying numpy array for direct manipulation (recommended only for advanced users).

        :return: The array storing the representation
        """

    @abstractmethod
    def to_quaternion_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        """
        Returns the unit rotation quaternion ``[q_x, q_y, q_z, q_s]`` of this rotation.

        The stored components are cast to ``dtype`` before any trigonometry is performed, so that a conversion into a
        representation of another precision is computed at the precision of the destination.

        :param dtype: the floating point type to compute the quaternion in.  Defaults to :attr:`scalar_type`
        :return: The rotation quaternion as a length 4 array
        """

    def to_rotation_matrix_array(self, dtype: DTypeLike | None = None) -> FLOATING_ARRAY:
        """
        Returns the 3x3 active rotation matrix of this rotation.

        By default this is formed from :meth:`to_quaternion_array`.

        :param dtype: the floating point type to compute the matrix in.  Defaults to :attr:`scalar_type`
        :return: The rotation matrix
        """

        dtype = self._dtype(dtype)

        return quaternion_to_rotmat(self.to_quaternion_array(dtype=dtype), dtype=dtype)

    def _dtype(self, dtype: DTypeLike | None) -> DTypeLike:
        """
        Returns the requested dtype, or :attr:`scalar_type` if none was requested.
        """

        return self.scalar_type if dtype is None else dtype

    @classmethod
    @abstractmethod
    def _convert(cls, other: 'RotationBase') -> FLOATING_ARRAY:
        """
        Computes the implementation array of this representation (in :attr:`scalar_type`) for another rotation.

        :param other: The rotation to convert
        :return: The implementation array of the converted rotation
        """

    @classmethod
    def from_rotation(cls, other: 'RotationBase') -> Self:
        """
        Creates a new instance of this representation describing the same rotation as ``other``.

        :param other: The rotation to convert
        :return: The converted rotation
        """

        return cls().assign(other)

    def assign(self, other: 'RotationBase') -> Self:
        """
        Overwrites this representation in place with the conversion of another rotation.

        :param other: The rotation to convert
        :return: self
        :raises TypeError: if other is not a rotation representation
        """

        if not isinstance(other, RotationBase):
            raise TypeError(f'Cannot assign a {type(other).__name__} to a {type(self).__name__}')

        self.to_implementation()[...] = type(self)._convert(other)

        return self

    @abstractmethod
    def inverted(self) -> Self:
        """
        Returns the inverse of the rotation as a new instance.

        :return: The inverse rotation
        """

    def invert(self) -> Self:
        """
        Inverts the rotation in place.

        :return: self
        """

        return self.assign(self.inverted())

    def copy(self) -> Self:
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def _same_kind(self, other: Any) -> bool:
        """
        Checks whether other is the same representation at the same precision as self.
        """

        return ((isinstance(other, type(self)) or isinstance(self, type(other))) and
                other.scalar_type is self.scalar_type)

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, RotationBase) or not self._same_kind(other):
            return NotImplemented

        return bool(np.array_equal(self.to_implementation(), other.to_implementation()))

    def __repr__(self) -> str:
        return '{0}({1!r})'.format(type(self).__name__, self.to_implementation())

    def __str__(self) -> str:
        return ' '.join(str(value) for value in self.to_implementation().ravel())
