"""
Routines for judging how close a set of euler angles is to gimbal lock.

A repeated-axis sequence is singular when its middle angle is 0 or pi (the first and third axes line up), a
distinct-axis sequence when its middle angle is pi/2.  Close to these configurations psi and phi are poorly determined,
so results near them should be used with caution.  Nothing here raises; the checks are advisory.
"""

import numpy as np

from quat2eul._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY
from quat2eul.rotations.core.sequences import SequenceFamily


__all__ = ['SINGULARITY_MARGIN', 'singularity_distance', 'near_singularity']


SINGULARITY_MARGIN: float = np.pi / 180
"""
The default distance (1 degree, in radians) from a singular middle angle inside which a result is flagged.
"""


def singularity_distance(theta: SCALAR_OR_ARRAY, family: SequenceFamily) -> F_SCALAR_OR_ARRAY:
    """
    Computes how far (in radians) the middle euler angle is from the singular value(s) checked for its family.

    For the repeated-axis family this is ``min(theta, pi - theta)``, for the distinct-axis family it is
    ``|theta - pi/2|``.

    :param theta: the middle euler angle(s) in radians
    :param family: the family of the sequence the angle(s) came from
    :return: the distance(s) to the nearest singularity in radians
    """

    theta = np.asarray(theta, dtype=np.float64)

    if family is SequenceFamily.REPEATED_AXIS:
        distance = np.minimum(theta, np.pi - theta)
    else:
        distance = np.abs(theta - np.pi / 2)

    return float(distance) if distance.ndim == 0 else distance


def near_singularity(theta: SCALAR_OR_ARRAY, family: SequenceFamily,
                     margin: float = SINGULARITY_MARGIN) -> bool | np.ndarray:
    """
    Checks whether the middle euler angle is within `margin` of a singularity.

    :param theta: the middle euler angle(s) in radians
    :param family: the family of the sequence the angle(s) came from
    :param margin: the distance in radians inside of which the angle is considered near a singularity
    :return: True where the angle is closer than `margin` to a singular value
    """

    check = np.asarray(singularity_distance(theta, family)) < margin

    return bool(check) if check.ndim == 0 else check
