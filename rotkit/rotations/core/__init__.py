"""
This package contains the fundamental, vectorized numpy routines for rotation calculations.

It has no dependencies on the rotation representation classes to avoid circular imports.  All functions here are pure
operations on arrays that the representations in :mod:`rotkit.rotations` use as their building blocks.
"""

import rotkit.rotations.core.canonical
import rotkit.rotations.core.conversions
import rotkit.rotations.core.elementals
import rotkit.rotations.core.quaternion_math

from rotkit.rotations.core.canonical import UNIQUE_PITCH_TOLERANCE, floating_point_modulo, wrap_angle, euler_zyx_unique

from rotkit.rotations.core.conversions import (quaternion_to_rotvec, quaternion_to_rotmat, quaternion_to_axis_angle,
                                               axis_angle_to_quaternion,
                                               rotvec_to_axis_angle, rotvec_to_quaternion,
                                               rotmat_to_quaternion, rotmat_to_euler_zyx, rotmat_to_euler_xyz,
                                               euler_to_rotmat, euler_to_quaternion)

from rotkit.rotations.core.elementals import rot_x, rot_y, rot_z, skew

from rotkit.rotations.core.quaternion_math import quaternion_normalize, quaternion_inverse

__all__ = ['UNIQUE_PITCH_TOLERANCE', 'floating_point_modulo', 'wrap_angle', 'euler_zyx_unique',
           'quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_axis_angle',
           'axis_angle_to_quaternion',
           'rotvec_to_axis_angle', 'rotvec_to_quaternion',
           'rotmat_to_quaternion', 'rotmat_to_euler_zyx', 'rotmat_to_euler_xyz',
           'euler_to_rotmat', 'euler_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_inverse']
