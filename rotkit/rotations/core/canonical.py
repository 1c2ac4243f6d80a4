# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Routines for wrapping angles and for computing the unique (canonical) intrinsic Z-Y'-X'' Euler angle triple.

Many Euler angle triples describe the same rotation.  Adding a multiple of :math:`2\pi` to any angle does not change the
rotation, the triples :math:`(z, y, x)` and :math:`(z\pm\pi, \pi-y, x\pm\pi)` are always the same rotation, and at the
gimbal lock pitches :math:`y=\pm\pi/2` only :math:`z+x` (at :math:`-\pi/2`) or :math:`z-x` (at :math:`+\pi/2`) is
observable.  :func:`euler_zyx_unique` picks one representative out of each of these classes with yaw and roll in
:math:`[-\pi, \pi)` and pitch in :math:`[-\pi/2, \pi/2)` (or just past :math:`\pm\pi/2` at gimbal lock),
assigning all of the free angle to yaw at gimbal lock.
"""

import logging

import numpy as np
from numpy.typing import DTypeLike

from rotkit._typing import ARRAY_LIKE, FLOATING_ARRAY, SCALAR_OR_ARRAY
from rotkit.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ['UNIQUE_PITCH_TOLERANCE', 'floating_point_modulo', 'wrap_angle', 'euler_zyx_unique']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


UNIQUE_PITCH_TOLERANCE: float = 1e-3
"""
The distance in radians from +/- pi/2 within which a pitch angle is treated as exactly at gimbal lock.

Changing this value changes which triples are returned by :func:`euler_zyx_unique`.
"""


def floating_point_modulo(value: SCALAR_OR_ARRAY, modulus: float) -> FLOATING_ARRAY:
    """
    Computes the positive floating point remainder of ``value`` divided by a positive ``modulus``.

    The result is in ``[0, modulus)`` for every finite input.  The two cases where
    ``value - modulus*floor(value/modulus)`` rounds onto the open end of the interval (a result equal to ``modulus``,
    or a tiny negative result that cannot be shifted by ``modulus`` without rounding to ``modulus``) are mapped to 0.

    Non-finite inputs produce non-finite outputs.

    :param value: The value(s) to take the remainder of
    :param modulus: The positive modulus
    :return: The remainder(s) in the dtype of ``value``
    """

    value = np.asanyarray(value)
    modulus = value.dtype.type(modulus)

    remainder = value - modulus * np.floor(value / modulus)

    remainder = np.where(remainder >= modulus, 0, remainder)

    shifted = modulus + remainder

    return np.where(remainder < 0, np.where(shifted == modulus, 0, shifted), remainder).astype(value.dtype, copy=False)


def wrap_angle(angle: SCALAR_OR_ARRAY) -> FLOATING_ARRAY:
    r"""
    Wraps the angle(s) into :math:`[-\pi, \pi)`.

    This is computed as ``floating_point_modulo(angle + pi, 2*pi) - pi`` in the dtype of ``angle``.

    :param angle: The angle(s) in radians to wrap
    :return: The wrapped angle(s)
    """

    angle = np.asanyarray(angle)

    pi = angle.dtype.type(np.pi)

    return floating_point_modulo(angle + pi, 2 * pi) - pi


def _shift_by_pi(angle: FLOATING_ARRAY, pi: np.floating) -> FLOATING_ARRAY:
    """
    Moves an angle in [-pi, pi) by half a turn towards the other end of the interval, staying in [-pi, pi).
    """

    shifted = np.where(angle < 0, angle + pi, angle - pi)

    # -tiny + pi can round onto pi
    return np.where(shifted >= pi, shifted - 2 * pi, shifted)


def euler_zyx_unique(angles: ARRAY_LIKE, dtype: DTypeLike = np.float64) -> FLOATING_ARRAY:
    r"""
    Computes the unique intrinsic Z-Y'-X'' Euler angle triple(s) that represent the same rotation(s) as ``angles``.

    The input is ordered (z, y, x) (yaw, pitch, roll).  The computation proceeds as follows:

    #. Every angle is wrapped into :math:`[-\pi, \pi)` using :func:`wrap_angle`.
    #. The pitch is classified into 5 bands using :data:`UNIQUE_PITCH_TOLERANCE` (:math:`\tau`):

       ===============================================  ===========================================================
       Pitch band                                       Action
       ===============================================  ===========================================================
       :math:`y < -\pi/2-\tau`                          :math:`y=-(y+\pi)` and shift yaw and roll by :math:`\pi`
       :math:`-\pi/2-\tau \le y \le -\pi/2+\tau`        :math:`z=z+x`, :math:`x=0` (gimbal lock)
       :math:`-\pi/2+\tau < y < \pi/2-\tau`             no change
       :math:`\pi/2-\tau \le y \le \pi/2+\tau`          :math:`z=z-x`, :math:`x=0` (gimbal lock)
       :math:`y > \pi/2+\tau`                           :math:`y=-(y-\pi)` and shift yaw and roll by :math:`\pi`
       ===============================================  ===========================================================

       where shifting by :math:`\pi` adds :math:`\pi` to negative angles and subtracts :math:`\pi` from the rest.
    #. The collapsed yaw at gimbal lock is wrapped into :math:`[-\pi, \pi)` again.

    The resulting yaw and roll are in :math:`[-\pi, \pi)` and the pitch is in :math:`[-\pi/2, \pi/2)` except for
    triples whose pitch is within :math:`\tau` of :math:`\pm\pi/2`, which keep their pitch (at gimbal lock the sign of
    the pitch is part of the rotation and cannot be traded for a different yaw).  Triples with a pitch within
    :math:`\tau` of, but not exactly at, :math:`\pm\pi/2` are snapped onto the gimbal lock form, which moves the
    rotation by an amount on the order of :math:`\tau` times the roll.

    This function is vectorized; stack multiple triples as the columns of a 3xn array.  All of the arithmetic is
    performed in ``dtype``.

    :param angles: The (z, y, x) triple(s) in radians
    :param dtype: the floating point type to perform the computation in
    :return: The unique triple(s) shaped like the input
    """

    zyx = _check_vector_array_and_shape(angles, dtype=dtype)

    in_shape = zyx.shape

    scalar_type = zyx.dtype.type

    pi = scalar_type(np.pi)
    half_pi = pi / 2
    tolerance = scalar_type(UNIQUE_PITCH_TOLERANCE)

    # wrap all angles into [-pi, pi)
    yaw, pitch, roll = wrap_angle(zyx.reshape(3, -1))

    below = pitch < -half_pi - tolerance
    lower_lock = (-half_pi - tolerance <= pitch) & (pitch <= -half_pi + tolerance)
    upper_lock = (half_pi - tolerance <= pitch) & (pitch <= half_pi + tolerance)
    above = pitch > half_pi + tolerance

    flipped = below | above
    locked = lower_lock | upper_lock

    if _LOGGER.isEnabledFor(logging.DEBUG) and locked.any():
        _LOGGER.debug(f'Collapsing {locked.sum()} Euler angle triple(s) at gimbal lock onto the yaw angle')

    # move the pitch back into [-pi/2, pi/2] using (z, y, x) = (z +/- pi, pi - y, x +/- pi)
    pitch = np.where(below, -(pitch + pi), np.where(above, -(pitch - pi), pitch))
    yaw = np.where(flipped, _shift_by_pi(yaw, pi), yaw)
    roll = np.where(flipped, _shift_by_pi(roll, pi), roll)

    # at gimbal lock only z + x (lower) or z - x (upper) is observable
    yaw = np.where(lower_lock, wrap_angle(yaw + roll), np.where(upper_lock, wrap_angle(yaw - roll), yaw))
    roll = np.where(locked, 0, roll)

    return np.array([yaw, pitch, roll], dtype=dtype).reshape(in_shape)
