# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the value objects passed between the steps of a conversion.

:class:`Quaternion` and :class:`EulerAngles` carry the numbers.  :class:`NormalizationNotice` and
:class:`SingularityNotice` carry the informational diagnostics which accompany successful results; they are never
raised.  :class:`Normalization` and :class:`EulerConversion` pair a value with its notice and unpack like tuples.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple

import numpy as np

from quat2eul._typing import ARRAY_LIKE, DOUBLE_ARRAY
from quat2eul.rotations.core.sequences import SequenceFamily


__all__ = ['Quaternion', 'EulerAngles', 'InputMode', 'NormalizationNotice', 'SingularityNotice',
           'Normalization', 'EulerConversion']


@dataclass(frozen=True)
class Quaternion:
    """
    An immutable rotation quaternion ``w + xi + yj + zk`` with the scalar part first.

    Instances produced by :class:`.QuaternionNormalizer` are unit length.  Note that ``q`` and ``-q`` represent the
    same rotation.
    """

    w: float
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> 'Quaternion':
        """
        Build a quaternion from 4 values ordered ``[w, x, y, z]``.

        :raises ValueError: if data does not contain exactly 4 values
        """

        values = np.asarray(data, dtype=np.float64).ravel()

        if values.size != 4:
            raise ValueError('The quaternion must be length 4')

        return cls(*(float(value) for value in values))

    def as_array(self) -> DOUBLE_ARRAY:
        """
        The quaternion as a numpy array ``[w, x, y, z]``.
        """

        return np.array([self.w, self.x, self.y, self.z])

    @property
    def norm(self) -> float:
        """
        The euclidean length of the quaternion.
        """

        return float(np.linalg.norm(self.as_array()))

    def __iter__(self) -> Iterator[float]:
        return iter((self.w, self.x, self.y, self.z))

    def __str__(self) -> str:
        return f'[{self.w:f}, {self.x:f}, {self.y:f}, {self.z:f}]'


@dataclass(frozen=True)
class EulerAngles:
    """
    An ordered triple of euler angles.

    psi is the rotation about the first axis of the sequence and is applied first, then theta about the second axis,
    then phi about the third.  The angles are in radians unless :attr:`degrees` is set.
    """

    psi: float
    theta: float
    phi: float
    degrees: bool = False

    @property
    def unit(self) -> str:
        """
        ``'deg'`` or ``'rad'``.
        """

        return 'deg' if self.degrees else 'rad'

    def as_array(self) -> DOUBLE_ARRAY:
        return np.array([self.psi, self.theta, self.phi])

    def __iter__(self) -> Iterator[float]:
        return iter((self.psi, self.theta, self.phi))

    def __str__(self) -> str:
        return f'{self.psi:f}, {self.theta:f}, {self.phi:f}'


class InputMode(Enum):
    """
    The input shapes a quaternion can be built from.
    """

    IMAGINARY = 'imaginary'
    """
    The 3 imaginary components; the scalar part is completed from the unit constraint.
    """

    ANGLES = 'angles'
    """
    3 angles in radians whose half angle sines become the imaginary components.
    """

    FULL = 'full'
    """
    All 4 components with any non-zero length.
    """


@dataclass(frozen=True)
class NormalizationNotice:
    """
    Describes how a unit quaternion was obtained from the input.
    """

    mode: InputMode
    """
    The input shape that was used.
    """

    renormalized: bool
    """
    True if a full quaternion was divided by its norm because it was not unit length.
    """

    input_norm: float
    """
    The euclidean length of the components the unit constraint was checked on.  For angle input these are the half
    angle sines.
    """

    @property
    def message(self) -> str:
        """
        A one line human readable description of the notice.
        """

        if self.mode is InputMode.FULL:
            if self.renormalized:
                return f'quaternion renormalized from length {self.input_norm:g}'
            return 'quaternion accepted as given'

        return 'scalar part completed from the unit constraint'


@dataclass(frozen=True)
class SingularityNotice:
    """
    Reports how close a set of euler angles is to gimbal lock.
    """

    near_singularity: bool
    """
    True if the middle angle is within :attr:`margin` of a singular value; the result should be used with caution.
    """

    distance: float
    """
    The distance in radians from the middle angle to the nearest singular value.
    """

    family: SequenceFamily
    margin: float

    @property
    def message(self) -> str:
        """
        A one line human readable description of the notice.
        """

        if self.near_singularity:
            return (f'singularity check failed: theta is {self.distance:f} rad from a singularity '
                    f'(< {self.margin:f} rad), use the angles with caution')

        return 'singularity check passed'


class Normalization(NamedTuple):
    """
    The unit quaternion produced by a normalizer together with the notice describing how.
    """

    quaternion: Quaternion
    notice: NormalizationNotice


class EulerConversion(NamedTuple):
    """
    The euler angles produced by a converter together with the singularity notice for them.
    """

    angles: EulerAngles
    notice: SingularityNotice
