# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the check of whether two rotation representations describe the same rotation.

The equality operator of the representations compares their stored components bitwise, which says nothing about
whether, for instance, a rotation matrix and a set of Euler angles are the same rotation.  :func:`is_similar` answers
that question by bringing both rotations into the unique Z-Y'-X'' Euler angle form and comparing the angles.
"""

import logging

import numpy as np

from rotkit.rotations.core.canonical import wrap_angle
from rotkit.rotations.euler_angles_zyx import EulerAnglesZyxD
from rotkit.rotations.rotation_base import RotationBase


__all__ = ['is_similar']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def is_similar(first: RotationBase, second: RotationBase, tolerance: float = 1e-6) -> bool:
    """
    Checks whether two rotations (of any representation and precision) describe the same rotation.

    Both rotations are converted to double precision :class:`.EulerAnglesZyxD` and made unique (see
    :meth:`.EulerAnglesZyx.get_unique`).  The differences of the unique angles are wrapped into [-pi, pi), so that a yaw
    of just under pi and a yaw of -pi compare as close, and then compared against ``tolerance``.

        >>> from rotkit.rotations import EulerAnglesZyx, RotationMatrix, is_similar
        >>> from numpy import pi
        >>> is_similar(EulerAnglesZyx(0.3, 0.2, 0.1), RotationMatrix(EulerAnglesZyx(0.3 + 2*pi, 0.2, 0.1)))
        True

    :param first: The first rotation
    :param second: The second rotation
    :param tolerance: The largest absolute angle difference in radians for the rotations to be considered the same
    :return: ``True`` if the rotations are the same to within the tolerance
    :raises TypeError: If either input is not a rotation representation
    """

    for rotation in (first, second):
        if not isinstance(rotation, RotationBase):
            raise TypeError(f'Cannot compare a {type(rotation).__name__} as a rotation')

    first_unique = EulerAnglesZyxD(first).get_unique().to_implementation()
    second_unique = EulerAnglesZyxD(second).get_unique().to_implementation()

    difference = np.abs(wrap_angle(first_unique - second_unique))

    _LOGGER.debug(f'Largest unique Euler angle difference {difference.max():.3e}')

    return bool((difference <= tolerance).all())
