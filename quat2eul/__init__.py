# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
quat2eul converts rotation quaternions (given as their imaginary part, as half angles, or as a full quaternion of any
length) into the euler angles of any of the 12 three axis rotation sequences.

The conversion routines live in :mod:`quat2eul.rotations`, the errors in :mod:`quat2eul.exceptions`, and the command
line front end in :mod:`quat2eul.scripts.quat2eul`.
"""

from quat2eul import exceptions, rotations

from quat2eul.exceptions import Quat2EulError, DomainError, InvalidSequenceError

__version__ = '1.0.0'

__all__ = ['exceptions', 'rotations', 'Quat2EulError', 'DomainError', 'InvalidSequenceError']
