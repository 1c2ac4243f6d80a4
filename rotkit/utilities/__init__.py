# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides utility routines shared across rotkit.
"""

from rotkit.utilities.options import UserOptions

__all__ = ['UserOptions']
