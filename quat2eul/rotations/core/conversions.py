# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Core conversion routines between rotation quaternions and euler angles.

All routines are implemented purely on numpy arrays (or array like objects).  Quaternions are stored scalar first,
:math:`\mathbf{q}=[q_0, q_1, q_2, q_3]=[w, x, y, z]`, and multiple quaternions can be processed at once by storing them
as the columns of a 4xn array.

Euler angles are always returned as ``(psi, theta, phi)`` where psi is the angle about the first axis of the sequence,
theta about the second and phi about the third.  The angles compose intrinsically, so that the quaternion is

.. math::
    \mathbf{q} = \mathbf{q}_i(\psi)\otimes\mathbf{q}_j(\theta)\otimes\mathbf{q}_k(\phi)

and the direction cosine matrix taking a vector into the rotated frame is
:math:`\mathbf{R}_k(\phi)^T\mathbf{R}_j(\theta)^T\mathbf{R}_i(\psi)^T`.
"""

from typing import Callable, NamedTuple, Sequence

import numpy as np

from quat2eul._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS, F_SCALAR_OR_ARRAY, SCALAR_OR_ARRAY
from quat2eul.rotations.core._helpers import _check_quaternion_array_and_shape
from quat2eul.rotations.core.elementals import elemental_quaternion
from quat2eul.rotations.core.sequences import RotationSequence, SequenceFamily


__all__ = ['quaternion_to_euler', 'euler_to_quaternion']


_Form = Callable[[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY], DOUBLE_ARRAY]


class _EulerForms(NamedTuple):
    """
    The bilinear forms of the quaternion components that give the euler angles for one sequence.

    psi is ``atan2(psi_numerator, psi_denominator)``, phi is ``atan2(phi_numerator, phi_denominator)``, and theta is
    ``acos(theta)`` for repeated-axis sequences or ``asin(theta)`` for distinct-axis sequences.
    """

    psi_numerator: _Form
    psi_denominator: _Form
    theta: _Form
    phi_numerator: _Form
    phi_denominator: _Form


# the diagonal of the rotation matrix, shared by many of the sequences
def _diag_x(w, x, y, z):
    return w * w + x * x - y * y - z * z


def _diag_y(w, x, y, z):
    return w * w - x * x + y * y - z * z


def _diag_z(w, x, y, z):
    return w * w - x * x - y * y + z * z


_EULER_FORMS: dict[RotationSequence, _EulerForms] = {
    # repeated-axis
    RotationSequence.XYX: _EulerForms(lambda w, x, y, z: x * y + z * w,
                                      lambda w, x, y, z: y * w - x * z,
                                      _diag_x,
                                      lambda w, x, y, z: x * y - z * w,
                                      lambda w, x, y, z: x * z + y * w),
    RotationSequence.YZY: _EulerForms(lambda w, x, y, z: x * w + y * z,
                                      lambda w, x, y, z: z * w - x * y,
                                      _diag_y,
                                      lambda w, x, y, z: y * z - x * w,
                                      lambda w, x, y, z: x * y + z * w),
    RotationSequence.ZXZ: _EulerForms(lambda w, x, y, z: x * z + y * w,
                                      lambda w, x, y, z: x * w - y * z,
                                      _diag_z,
                                      lambda w, x, y, z: x * z - y * w,
                                      lambda w, x, y, z: x * w + y * z),
    RotationSequence.XZX: _EulerForms(lambda w, x, y, z: x * z - y * w,
                                      lambda w, x, y, z: x * y + z * w,
                                      _diag_x,
                                      lambda w, x, y, z: x * z + y * w,
                                      lambda w, x, y, z: z * w - x * y),
    RotationSequence.YXY: _EulerForms(lambda w, x, y, z: x * y - z * w,
                                      lambda w, x, y, z: x * w + y * z,
                                      _diag_y,
                                      lambda w, x, y, z: x * y + z * w,
                                      lambda w, x, y, z: x * w - y * z),
    RotationSequence.ZYZ: _EulerForms(lambda w, x, y, z: y * z - x * w,
                                      lambda w, x, y, z: x * z + y * w,
                                      _diag_z,
                                      lambda w, x, y, z: x * w + y * z,
                                      lambda w, x, y, z: y * w - x * z),
    # distinct-axis
    RotationSequence.XYZ: _EulerForms(lambda w, x, y, z: 2 * (x * w - y * z),
                                      _diag_z,
                                      lambda w, x, y, z: 2 * (x * z + y * w),
                                      lambda w, x, y, z: 2 * (z * w - x * y),
                                      _diag_x),
    RotationSequence.YZX: _EulerForms(lambda w, x, y, z: 2 * (y * w - x * z),
                                      _diag_x,
                                      lambda w, x, y, z: 2 * (x * y + z * w),
                                      lambda w, x, y, z: 2 * (x * w - y * z),
                                      _diag_y),
    RotationSequence.ZXY: _EulerForms(lambda w, x, y, z: 2 * (z * w - x * y),
                                      _diag_y,
                                      lambda w, x, y, z: 2 * (x * w + y * z),
                                      lambda w, x, y, z: 2 * (y * w - x * z),
                                      _diag_z),
    RotationSequence.XZY: _EulerForms(lambda w, x, y, z: 2 * (x * w + y * z),
                                      _diag_y,
                                      lambda w, x, y, z: 2 * (z * w - x * y),
                                      lambda w, x, y, z: 2 * (x * z + y * w),
                                      _diag_x),
    RotationSequence.YXZ: _EulerForms(lambda w, x, y, z: 2 * (x * z + y * w),
                                      _diag_z,
                                      lambda w, x, y, z: 2 * (x * w - y * z),
                                      lambda w, x, y, z: 2 * (x * y + z * w),
                                      _diag_y),
    RotationSequence.ZYX: _EulerForms(lambda w, x, y, z: 2 * (x * y + z * w),
                                      _diag_x,
                                      lambda w, x, y, z: 2 * (y * w - x * z),
                                      lambda w, x, y, z: 2 * (x * w + y * z),
                                      _diag_z),
}


def _as_output(value: DOUBLE_ARRAY) -> F_SCALAR_OR_ARRAY:
    return float(value) if np.ndim(value) == 0 else value


def quaternion_to_euler(quaternion: ARRAY_LIKE,
                        order: EULER_ORDERS | RotationSequence = 'xyz') -> tuple[F_SCALAR_OR_ARRAY,
                                                                                 F_SCALAR_OR_ARRAY,
                                                                                 F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a unit rotation quaternion into the 3 euler angles ``(psi, theta, phi)`` for the rotation
    sequence `order`.

    Each sequence has a fixed set of closed form expressions in the quaternion components, taken from the extraction
    of euler angles out of the direction cosine matrix written in terms of the quaternion.  For the repeated-axis
    sequences (such as ``zxz``)

    .. math::
        \psi = \text{atan2}(f_1, f_2),\quad \theta = \text{cos}^{-1}(f_3),\quad \phi = \text{atan2}(f_4, f_5)

    with theta in :math:`[0, \pi]`, while for the distinct-axis sequences (such as ``zyx``)

    .. math::
        \psi = \text{atan2}(2f_1, f_2),\quad \theta = \text{sin}^{-1}(2f_3),\quad \phi = \text{atan2}(2f_4, f_5)

    with theta in :math:`[-\pi/2, \pi/2]`.  The arguments of the inverse cosine/sine are clipped to [-1, 1] so that
    rounding in an (almost) unit quaternion does not produce nan.

    At gimbal lock only the sum or difference of psi and phi is determined.  The formulas are still evaluated and give
    one valid, but not unique, pair.  Use :func:`.singularity_distance` to find out how close a result is to this case.

    This function is vectorized, so multiple quaternions can be converted at once by specifying them as columns.

    :param quaternion: The unit quaternion(s) ``[w, x, y, z]`` to be converted to euler angles
    :param order: The rotation sequence, either its (case insensitive) name or a :class:`.RotationSequence`
    :return: The euler angles ``(psi, theta, phi)`` in radians
    :raises InvalidSequenceError: if `order` is not one of the 12 recognized sequences
    """

    sequence = RotationSequence.parse(order)

    forms = _EULER_FORMS[sequence]

    quaternion = _check_quaternion_array_and_shape(quaternion)

    w, x, y, z = quaternion

    psi = np.arctan2(forms.psi_numerator(w, x, y, z), forms.psi_denominator(w, x, y, z))
    phi = np.arctan2(forms.phi_numerator(w, x, y, z), forms.phi_denominator(w, x, y, z))

    theta_argument = np.clip(forms.theta(w, x, y, z), -1, 1)

    if sequence.family is SequenceFamily.REPEATED_AXIS:
        theta = np.arccos(theta_argument)
    else:
        theta = np.arcsin(theta_argument)

    return _as_output(psi), _as_output(theta), _as_output(phi)


def _hamilton_product(left: DOUBLE_ARRAY, right: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    # scalar first Hamilton product, column wise for 2d input
    lw, lx, ly, lz = left
    rw, rx, ry, rz = right

    return np.array([lw * rw - lx * rx - ly * ry - lz * rz,
                     lw * rx + lx * rw + ly * rz - lz * ry,
                     lw * ry - lx * rz + ly * rw + lz * rx,
                     lw * rz + lx * ry - ly * rx + lz * rw])


def euler_to_quaternion(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY,
                        order: EULER_ORDERS | RotationSequence = 'xyz') -> DOUBLE_ARRAY:
    r"""
    This function constructs the unit rotation quaternion for the euler angles ``(psi, theta, phi)`` of sequence
    `order`.

    The quaternion is the composition of the three elemental (axis-angle) quaternions, applied in sequence order

    .. math::
        \mathbf{q} = \mathbf{q}_i(\psi)\otimes\mathbf{q}_j(\theta)\otimes\mathbf{q}_k(\phi)

    where :math:`\mathbf{q}_a(\alpha)=[\text{cos}(\alpha/2), \text{sin}(\alpha/2)\hat{\mathbf{e}}_a]` and
    :math:`\otimes` is the Hamilton product.  This is the inverse of :func:`quaternion_to_euler` up to the sign of the
    quaternion.

    If each angle is an array of length n then the result is a 4xn array with each quaternion as a column.

    :param angles: The euler angles ``(psi, theta, phi)`` in radians
    :param order: The rotation sequence, either its (case insensitive) name or a :class:`.RotationSequence`
    :return: The rotation quaternion(s) ``[w, x, y, z]``
    :raises InvalidSequenceError: if `order` is not one of the 12 recognized sequences
    :raises ValueError: if there are not exactly 3 angles
    """

    sequence = RotationSequence.parse(order)

    if len(angles) != 3:
        raise ValueError(f'exactly 3 euler angles are required, got {len(angles)}')

    quaternion = None
    for axis, angle in zip(sequence.axes, angles):

        update = elemental_quaternion(axis, angle)

        quaternion = update if quaternion is None else _hamilton_product(quaternion, update)

    return quaternion
