# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`QuaternionNormalizer`, which turns the supported input shapes into unit quaternions.

Three shapes are understood (see :class:`.InputMode`):

* the imaginary part ``(x, y, z)`` of a unit quaternion, with the scalar part completed as
  ``w = sqrt(1 - x**2 - y**2 - z**2)``,
* three angles ``(a_x, a_y, a_z)`` in radians which are turned into the imaginary part
  ``(sin(a_x/2), sin(a_y/2), sin(a_z/2))`` before completing the scalar part the same way,
* a full quaternion ``(w, x, y, z)`` of any non-zero length which is divided by its norm if it is not unit length.

Every successful call returns a :class:`.Normalization` holding the :class:`.Quaternion` and a
:class:`.NormalizationNotice` which records which branch was taken.  Input that cannot produce a unit quaternion
raises :class:`.DomainError`.

For quick use the module level :func:`normalize` function uses a normalizer with the default options::

    >>> from quat2eul.rotations import normalize
    >>> normalize([0, 0, 0.6]).quaternion
    Quaternion(w=0.8, x=0.0, y=0.0, z=0.6)
"""

import logging

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from quat2eul.rotations.core.normalization import (UNIT_TOLERANCE, vector_to_quaternion, half_angles_to_quaternion,
                                                   quaternion_normalize)
from quat2eul.rotations.representations import InputMode, Normalization, NormalizationNotice, Quaternion
from quat2eul.utilities.mixin_classes import UserOptionConfigured
from quat2eul.utilities.options import UserOptions


__all__ = ['NormalizerOptions', 'QuaternionNormalizer', 'normalize']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting how input quaternions were normalized.
"""


_COMPONENT_COUNTS = {InputMode.IMAGINARY: 3, InputMode.ANGLES: 3, InputMode.FULL: 4}


@dataclass
class NormalizerOptions(UserOptions):
    """
    Options for configuring the :class:`QuaternionNormalizer`.
    """

    unit_tolerance: float = UNIT_TOLERANCE
    """
    How far the norm of a full quaternion may differ from 1 before it is renormalized.

    The same value bounds how far below zero ``1 - x**2 - y**2 - z**2`` may fall (from rounding) before imaginary
    input is rejected.
    """


class QuaternionNormalizer(UserOptionConfigured[NormalizerOptions], NormalizerOptions):
    """
    Validates input and turns it into a unit :class:`.Quaternion`.

    The individual input shapes have their own methods (:meth:`from_imaginary`, :meth:`from_angles`,
    :meth:`from_components`) and :meth:`normalize` dispatches to them based on an :class:`.InputMode` or on the number
    of components supplied.
    """

    def __init__(self, options: NormalizerOptions | None = None):
        """
        :param options: the options to configure the normalizer with.  If ``None`` the defaults are used.
        """

        super().__init__(NormalizerOptions, options=options)

    def from_imaginary(self, x: float, y: float, z: float) -> Normalization:
        """
        Complete a unit quaternion from its imaginary part.

        :raises DomainError: if ``x**2 + y**2 + z**2 > 1`` or a component is not finite
        """

        vector = np.array([x, y, z], dtype=np.float64)

        quaternion = Quaternion.from_array(vector_to_quaternion(vector, tolerance=self.unit_tolerance))

        notice = NormalizationNotice(InputMode.IMAGINARY, False, float(np.linalg.norm(vector)))

        _LOGGER.info(f'{notice.message}: q = {quaternion}')

        return Normalization(quaternion, notice)

    def from_angles(self, angle_x: float, angle_y: float, angle_z: float) -> Normalization:
        """
        Build a unit quaternion whose imaginary components are the sines of half of the given angles (radians).

        :raises DomainError: if the half angle sines cannot be completed into a unit quaternion or an angle is not
                             finite
        """

        angles = np.array([angle_x, angle_y, angle_z], dtype=np.float64)

        quaternion = Quaternion.from_array(half_angles_to_quaternion(angles, tolerance=self.unit_tolerance))

        # length of the half angle sines
        notice = NormalizationNotice(InputMode.ANGLES, False, float(np.linalg.norm(quaternion.as_array()[1:])))

        _LOGGER.info(f'{notice.message}: q = {quaternion}')

        return Normalization(quaternion, notice)

    def from_components(self, w: float, x: float, y: float, z: float) -> Normalization:
        """
        Normalize a full quaternion to unit length.

        A quaternion within :attr:`unit_tolerance` of unit length is accepted unchanged, otherwise it is divided by its
        norm.  The returned notice tells which happened.

        :raises DomainError: if the quaternion has zero length or a component is not finite
        """

        unit, renormalized, norm = quaternion_normalize([w, x, y, z], tolerance=self.unit_tolerance)

        quaternion = Quaternion.from_array(unit)

        notice = NormalizationNotice(InputMode.FULL, renormalized, norm)

        _LOGGER.info(f'{notice.message}: q = {quaternion}')

        return Normalization(quaternion, notice)

    def normalize(self, components: Sequence[float], mode: InputMode | str | None = None) -> Normalization:
        """
        Turn `components` into a unit quaternion according to `mode`.

        If `mode` is ``None`` it is inferred from the number of components: 3 components are treated as the imaginary
        part of a unit quaternion and 4 components as a full quaternion ``(w, x, y, z)``.  Angle input must be
        requested explicitly.

        :param components: the 3 or 4 input values
        :param mode: how to interpret the components, as an :class:`.InputMode` or its value
        :return: the unit quaternion and the notice describing how it was obtained
        :raises DomainError: if the components cannot produce a unit quaternion
        :raises ValueError: if the number of components does not fit the mode or the mode is not recognized
        """

        values = np.asarray(components, dtype=np.float64).ravel()

        if mode is None:
            if values.size == 3:
                mode = InputMode.IMAGINARY
            elif values.size == 4:
                mode = InputMode.FULL
            else:
                raise ValueError(f'expected 3 or 4 components, got {values.size}')
        else:
            mode = InputMode(mode)

        expected = _COMPONENT_COUNTS[mode]
        if values.size != expected:
            raise ValueError(f'{mode.value} input needs {expected} components, got {values.size}')

        if mode is InputMode.IMAGINARY:
            return self.from_imaginary(*values)

        elif mode is InputMode.ANGLES:
            return self.from_angles(*values)

        return self.from_components(*values)


def normalize(components: Sequence[float], mode: InputMode | str | None = None) -> Normalization:
    """
    Turn `components` into a unit quaternion using a :class:`QuaternionNormalizer` with default options.

    See :meth:`.QuaternionNormalizer.normalize` for details.
    """

    return QuaternionNormalizer().normalize(components, mode=mode)
