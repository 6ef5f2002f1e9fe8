"""
This package contains the numerical building blocks for quat2eul.

Everything here works on plain numpy arrays with scalar first quaternions and has no dependencies on the result
classes in :mod:`quat2eul.rotations`, so it can be used directly when only the numbers are of interest.
"""

import quat2eul.rotations.core.conversions
import quat2eul.rotations.core.elementals
import quat2eul.rotations.core.normalization
import quat2eul.rotations.core.sequences
import quat2eul.rotations.core.singularity

from quat2eul.rotations.core.conversions import quaternion_to_euler, euler_to_quaternion

from quat2eul.rotations.core.elementals import elemental_quaternion

from quat2eul.rotations.core.normalization import (UNIT_TOLERANCE, vector_to_quaternion, half_angles_to_quaternion,
                                                   quaternion_normalize)

from quat2eul.rotations.core.sequences import RotationSequence, SequenceFamily

from quat2eul.rotations.core.singularity import SINGULARITY_MARGIN, singularity_distance, near_singularity

__all__ = ['quaternion_to_euler', 'euler_to_quaternion', 'elemental_quaternion',
           'UNIT_TOLERANCE', 'vector_to_quaternion', 'half_angles_to_quaternion', 'quaternion_normalize',
           'RotationSequence', 'SequenceFamily',
           'SINGULARITY_MARGIN', 'singularity_distance', 'near_singularity']
