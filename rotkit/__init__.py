# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rotkit: rotation representations centred on intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angles.

The representations and the conversions between them live in :mod:`rotkit.rotations`.
"""

import rotkit.rotations

__version__ = '1.0.0'
