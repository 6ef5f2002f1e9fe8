# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core routines for forming unit quaternions from partial or unnormalized input.

All routines work on plain numpy arrays with the scalar part first, ``[w, x, y, z]``, and accept either a single
quaternion/vector (1d) or several of them stored as columns (2d).
"""

import numpy as np

from quat2eul._typing import ARRAY_LIKE, DOUBLE_ARRAY
from quat2eul.exceptions import DomainError
from quat2eul.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape


__all__ = ['UNIT_TOLERANCE', 'vector_to_quaternion', 'half_angles_to_quaternion', 'quaternion_normalize']


UNIT_TOLERANCE: float = 1e-9
"""
How far the norm of a quaternion may be from 1 before it is considered to not be unit length.
"""


def _check_finite(values: DOUBLE_ARRAY):
    if not np.isfinite(values).all():
        raise DomainError('all quaternion components must be finite')


def vector_to_quaternion(vector: ARRAY_LIKE, tolerance: float = UNIT_TOLERANCE) -> DOUBLE_ARRAY:
    r"""
    This function completes a unit quaternion from its imaginary (vector) part.

    The scalar part is recovered from the unit constraint

    .. math::
        w = \sqrt{1-x^2-y^2-z^2}

    which always gives the quaternion with a non-negative scalar part.  If the squared length of the vector part
    exceeds 1 there is no real solution and a :class:`.DomainError` is raised rather than returning nan.  A radicand
    which is negative by less than `tolerance` is treated as rounding and clamped to 0.

    :param vector: the imaginary part(s) ``[x, y, z]`` of the quaternion(s), with multiple vectors as columns
    :param tolerance: how far below zero the radicand may be before it is considered invalid
    :return: the unit quaternion(s) ``[w, x, y, z]``
    :raises DomainError: if the vector part is longer than 1 or not finite
    """

    vector = _check_vector_array_and_shape(vector)

    _check_finite(vector)

    radicand = 1 - (vector * vector).sum(axis=0)

    if np.any(radicand < -tolerance):
        raise DomainError(f'the squared length of the imaginary part must not exceed 1 '
                          f'(got {float(np.max(1 - radicand)):.6g})')

    scalar = np.sqrt(np.maximum(radicand, 0))

    return np.vstack([scalar, vector]) if vector.ndim > 1 else np.hstack([scalar, vector])


def half_angles_to_quaternion(angles: ARRAY_LIKE, tolerance: float = UNIT_TOLERANCE) -> DOUBLE_ARRAY:
    r"""
    This function forms a unit quaternion whose imaginary components are the sines of half of the given angles.

    .. math::
        x = \text{sin}(\frac{a_x}{2}),\quad y = \text{sin}(\frac{a_y}{2}),\quad z = \text{sin}(\frac{a_z}{2})

    after which the scalar part is completed with :func:`vector_to_quaternion`.  A single non-zero angle gives the
    axis-angle quaternion for a rotation about that axis.  Combinations of angles whose half angle sines have a
    squared sum larger than 1 are rejected with a :class:`.DomainError`.

    :param angles: the angles ``[a_x, a_y, a_z]`` in radians, with multiple sets as columns
    :param tolerance: how far below zero the radicand may be before it is considered invalid
    :return: the unit quaternion(s) ``[w, x, y, z]``
    :raises DomainError: if the half angle sines cannot be completed into a unit quaternion
    """

    angles = _check_vector_array_and_shape(angles)

    _check_finite(angles)

    return vector_to_quaternion(np.sin(angles / 2), tolerance=tolerance)


def quaternion_normalize(quaternion: ARRAY_LIKE,
                         tolerance: float = UNIT_TOLERANCE) -> tuple[DOUBLE_ARRAY, bool, float]:
    """
    Normalizes a single quaternion to unit length if it is not already unit length.

    The quaternion is only divided by its norm when the norm differs from 1 by more than `tolerance`, so that a unit
    quaternion is returned unchanged.  Unlike some conventions the sign of the scalar part is left alone since ``q``
    and ``-q`` represent the same rotation.

    :param quaternion: the quaternion ``[w, x, y, z]`` to normalize
    :param tolerance: how far the norm may be from 1 while still being accepted as given
    :return: the unit quaternion, whether it had to be renormalized, and the norm of the input
    :raises DomainError: if the quaternion has zero length or is not finite
    :raises ValueError: if the input is not a single 4 element quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    if work_quaternion.ndim != 1:
        raise ValueError('only a single quaternion can be normalized at a time')

    _check_finite(work_quaternion)

    norm = float(np.linalg.norm(work_quaternion))

    if norm == 0:
        raise DomainError('a quaternion with zero length does not represent a rotation')

    if abs(norm - 1) <= tolerance:
        return work_quaternion, False, norm

    return work_quaternion / norm, True, norm
