# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This package converts rotation quaternions into euler angle sequences and back.

There are two rotation representations used in this package and their format is described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion stored scalar first,
                   :math:`\mathbf{q}=[w, x, y, z]=[\text{cos}(\frac{\theta}{2}), \text{sin}(\frac{\theta}{2})
                   \hat{\mathbf{x}}]` where :math:`\hat{\mathbf{x}}` is the unit rotation axis and :math:`\theta` is the
                   total angle to rotate about it.  Note that :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent the
                   same rotation.
euler angles       A sequence of 3 angles ``(psi, theta, phi)`` about the 3 axes of a rotation sequence such as ``zyx``.
                   psi is applied first about the first axis, then theta about the (new) second axis, then phi about
                   the (new) third axis.  There are 12 sequences, split into the repeated-axis family (``xyx``,
                   ``yzy``, ``zxz``, ``xzx``, ``yxy``, ``zyz``) and the distinct-axis family (``xyz``, ``yzx``,
                   ``zxy``, ``xzy``, ``yxz``, ``zyx``).
=================  =====================================================================================================

A conversion normally runs in three steps, each of which is available as a function:

#. :func:`normalize` validates the input and produces a unit :class:`Quaternion` (see :class:`QuaternionNormalizer`),
#. :func:`convert_to_euler` produces the :class:`EulerAngles` in radians and a :class:`SingularityNotice` (see
   :class:`EulerConverter`),
#. :func:`to_degrees` converts the angles for display.

The numerical routines underneath, which work on plain numpy arrays and are vectorized, are in
:mod:`quat2eul.rotations.core`.
"""

import quat2eul.rotations.core
import quat2eul.rotations.euler_converter
import quat2eul.rotations.normalizer
import quat2eul.rotations.representations
import quat2eul.rotations.units

from quat2eul.rotations.core import *
from quat2eul.rotations.euler_converter import EulerConverterOptions, EulerConverter, convert_to_euler
from quat2eul.rotations.normalizer import NormalizerOptions, QuaternionNormalizer, normalize
from quat2eul.rotations.representations import (Quaternion, EulerAngles, InputMode, NormalizationNotice,
                                                SingularityNotice, Normalization, EulerConversion)
from quat2eul.rotations.units import to_degrees, to_radians

__all__ = ['quaternion_to_euler', 'euler_to_quaternion', 'elemental_quaternion',
           'UNIT_TOLERANCE', 'vector_to_quaternion', 'half_angles_to_quaternion', 'quaternion_normalize',
           'RotationSequence', 'SequenceFamily',
           'SINGULARITY_MARGIN', 'singularity_distance', 'near_singularity',
           'EulerConverterOptions', 'EulerConverter', 'convert_to_euler',
           'NormalizerOptions', 'QuaternionNormalizer', 'normalize',
           'Quaternion', 'EulerAngles', 'InputMode', 'NormalizationNotice', 'SingularityNotice',
           'Normalization', 'EulerConversion',
           'to_degrees', 'to_radians']
