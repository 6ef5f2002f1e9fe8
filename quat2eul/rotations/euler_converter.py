# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`EulerConverter`, which turns unit quaternions into euler angles for one of the 12
recognized rotation sequences and judges how close the result is to gimbal lock.

The numbers come from :func:`.quaternion_to_euler`; this class adds sequence validation, the typed
:class:`.EulerConversion` result, and the advisory :class:`.SingularityNotice`.  A result close to a singularity is
still returned in full, the notice only marks it as one to use with caution.

For quick use the module level :func:`convert_to_euler` function uses a converter with the default options::

    >>> from quat2eul.rotations import Quaternion, convert_to_euler
    >>> angles, notice = convert_to_euler(Quaternion(1, 0, 0, 0), 'zyx')
    >>> angles
    EulerAngles(psi=0.0, theta=0.0, phi=0.0, degrees=False)
    >>> notice.near_singularity
    False
"""

import logging

from dataclasses import dataclass

from quat2eul.rotations.core.conversions import quaternion_to_euler
from quat2eul.rotations.core.normalization import UNIT_TOLERANCE
from quat2eul.rotations.core.sequences import RotationSequence
from quat2eul.rotations.core.singularity import SINGULARITY_MARGIN, singularity_distance
from quat2eul.rotations.representations import EulerAngles, EulerConversion, Quaternion, SingularityNotice
from quat2eul.utilities.mixin_classes import UserOptionConfigured
from quat2eul.utilities.options import UserOptions


__all__ = ['EulerConverterOptions', 'EulerConverter', 'convert_to_euler']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting questionable conversions.
"""


@dataclass
class EulerConverterOptions(UserOptions):
    """
    Options for configuring the :class:`EulerConverter`.
    """

    singularity_margin: float = SINGULARITY_MARGIN
    """
    The distance in radians from a singular middle angle inside which a result is flagged (1 degree by default).
    """

    unit_tolerance: float = UNIT_TOLERANCE
    """
    How far the norm of an input quaternion may be from 1 before a warning is logged.
    """


class EulerConverter(UserOptionConfigured[EulerConverterOptions], EulerConverterOptions):
    """
    Converts unit quaternions into euler angles ``(psi, theta, phi)`` in radians.

    The sequence is looked up once with :meth:`.RotationSequence.parse` (so names are case insensitive) and unknown
    names raise :class:`.InvalidSequenceError` before anything is computed.
    """

    def __init__(self, options: EulerConverterOptions | None = None):
        """
        :param options: the options to configure the converter with.  If ``None`` the defaults are used.
        """

        super().__init__(EulerConverterOptions, options=options)

    def check_singularity(self, theta: float, sequence: RotationSequence | str) -> SingularityNotice:
        """
        Judge how close the middle angle `theta` (radians) of `sequence` is to gimbal lock.

        For repeated-axis sequences the result is flagged when theta is within :attr:`singularity_margin` of 0 or pi,
        for distinct-axis sequences when it is within the margin of pi/2.  This never raises.

        :param theta: the middle euler angle in radians
        :param sequence: the sequence the angle belongs to
        :return: the notice describing the proximity to a singularity
        :raises InvalidSequenceError: if `sequence` is not one of the 12 recognized sequences
        """

        family = RotationSequence.parse(sequence).family

        distance = singularity_distance(theta, family)

        notice = SingularityNotice(distance < self.singularity_margin, distance, family, self.singularity_margin)

        if notice.near_singularity:
            _LOGGER.warning(notice.message)

        return notice

    def convert(self, quaternion: Quaternion, sequence: RotationSequence | str) -> EulerConversion:
        """
        Convert a unit quaternion into the euler angles of `sequence`.

        :param quaternion: the unit quaternion to convert.  Anything :meth:`.Quaternion.from_array` accepts is
                           also allowed.
        :param sequence: the rotation sequence, as a :class:`.RotationSequence` or its (case insensitive) name
        :return: the angles in radians and the singularity notice for them
        :raises InvalidSequenceError: if `sequence` is not one of the 12 recognized sequences
        """

        sequence = RotationSequence.parse(sequence)

        if not isinstance(quaternion, Quaternion):
            quaternion = Quaternion.from_array(quaternion)

        if abs(quaternion.norm - 1) > self.unit_tolerance:
            _LOGGER.warning(f'quaternion {quaternion} is not unit length (norm {quaternion.norm:g}), '
                            f'the euler angles may be meaningless')

        psi, theta, phi = quaternion_to_euler(quaternion.as_array(), sequence)

        angles = EulerAngles(psi, theta, phi)

        _LOGGER.debug(f'angles psi, theta, phi for {sequence} are {angles} rad')

        return EulerConversion(angles, self.check_singularity(theta, sequence))


def convert_to_euler(quaternion: Quaternion, sequence: RotationSequence | str) -> EulerConversion:
    """
    Convert a unit quaternion into euler angles using an :class:`EulerConverter` with default options.

    See :meth:`.EulerConverter.convert` for details.
    """

    return EulerConverter().convert(quaternion, sequence)
