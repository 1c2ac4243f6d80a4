r"""
This package defines the rotation representations of rotkit and the routines for converting between them.

The representations and their storage are described as follows:

.. _rotation-representation-table:

=======================  ===============================================================================================
Representation           Description
=======================  ===============================================================================================
:class:`.EulerAnglesZyx` Intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angles :math:`(z, y, x)` with the rotation
                         matrix :math:`\mathbf{R}=\mathbf{R}_z(z)\mathbf{R}_y(y)\mathbf{R}_x(x)`.  Any triple is
                         accepted; :meth:`.EulerAnglesZyx.get_unique` gives the unique triple of the rotation.
:class:`.EulerAnglesXyz` Intrinsic X-Y'-Z'' Euler angles :math:`(x, y, z)` with the rotation matrix
                         :math:`\mathbf{R}=\mathbf{R}_x(x)\mathbf{R}_y(y)\mathbf{R}_z(z)`.
:class:`.RotationQuaternion`
                         A 4 element unit rotation quaternion of the form
                         :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                         \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                         \text{cos}(\frac{\theta}{2})\end{array}\right]`
                         where :math:`\hat{\mathbf{x}}` is the unit rotation axis and :math:`\theta` is the rotation
                         angle.  The scalar part is kept non-negative.
:class:`.AngleAxis`      A rotation angle :math:`\theta` in radians about a unit axis :math:`\hat{\mathbf{x}}`.
:class:`.RotationVector` A 3 element rotation vector of the form :math:`\mathbf{v}=\theta\hat{\mathbf{x}}`.
:class:`.RotationMatrix` A :math:`3\times 3` orthonormal matrix acting on column vectors, so that
                         :math:`\mathbf{R}\mathbf{v}` rotates :math:`\mathbf{v}`.
=======================  ===============================================================================================

Each representation comes in a single precision (``F`` suffix) and a double precision (``D`` suffix) variant.
Any representation can be constructed from any other one by passing it to the constructor, and
:func:`.is_similar` checks whether two representations describe the same rotation.

The array routines that the representations are built on are also available directly from this package (see
:mod:`rotkit.rotations.core`).
"""

import rotkit.rotations.core
import rotkit.rotations.rotation_base
import rotkit.rotations.quaternion
import rotkit.rotations.angle_axis
import rotkit.rotations.rotation_vector
import rotkit.rotations.rotation_matrix
import rotkit.rotations.euler_angles_xyz
import rotkit.rotations.euler_angles_zyx
import rotkit.rotations.comparison

from rotkit.rotations.core import *
from rotkit.rotations.rotation_base import RotationBase
from rotkit.rotations.quaternion import RotationQuaternion, RotationQuaternionD, RotationQuaternionF
from rotkit.rotations.angle_axis import AngleAxis, AngleAxisD, AngleAxisF
from rotkit.rotations.rotation_vector import RotationVector, RotationVectorD, RotationVectorF
from rotkit.rotations.rotation_matrix import (RotationMatrix, RotationMatrixD, RotationMatrixF, RotationMatrixOptions,
                                              check_rotation_matrix)
from rotkit.rotations.euler_angles_xyz import EulerAnglesXyz, EulerAnglesXyzD, EulerAnglesXyzF
from rotkit.rotations.euler_angles_zyx import (EulerAnglesZyx, EulerAnglesZyxD, EulerAnglesZyxF,
                                               EulerAnglesZyxPD, EulerAnglesZyxPF,
                                               EulerAnglesYpr, EulerAnglesYprD, EulerAnglesYprF,
                                               EulerAnglesYprPD, EulerAnglesYprPF)
from rotkit.rotations.comparison import is_similar

__all__ = ['UNIQUE_PITCH_TOLERANCE', 'floating_point_modulo', 'wrap_angle', 'euler_zyx_unique',
           'quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_axis_angle',
           'axis_angle_to_quaternion',
           'rotvec_to_axis_angle', 'rotvec_to_quaternion',
           'rotmat_to_quaternion', 'rotmat_to_euler_zyx', 'rotmat_to_euler_xyz',
           'euler_to_rotmat', 'euler_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_inverse',
           'RotationBase',
           'RotationQuaternion', 'RotationQuaternionD', 'RotationQuaternionF',
           'AngleAxis', 'AngleAxisD', 'AngleAxisF',
           'RotationVector', 'RotationVectorD', 'RotationVectorF',
           'RotationMatrix', 'RotationMatrixD', 'RotationMatrixF', 'RotationMatrixOptions', 'check_rotation_matrix',
           'EulerAnglesXyz', 'EulerAnglesXyzD', 'EulerAnglesXyzF',
           'EulerAnglesZyx', 'EulerAnglesZyxD', 'EulerAnglesZyxF', 'EulerAnglesZyxPD', 'EulerAnglesZyxPF',
           'EulerAnglesYpr', 'EulerAnglesYprD', 'EulerAnglesYprF', 'EulerAnglesYprPD', 'EulerAnglesYprPF',
           'is_similar']
