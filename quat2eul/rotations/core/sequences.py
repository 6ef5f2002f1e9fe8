# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the 12 recognized 3 axis rotation sequences and the two families they fall into.

A sequence names the axes that the three euler angles (psi, theta, phi) rotate about, in the order they are applied.
Sequences where the first and the last axis are the same (``xyx``, ``zyz``, ...) form the repeated-axis family, also
known as proper euler angles.  Sequences using three different axes (``xyz``, ``zyx``, ...) form the distinct-axis
family, also known as Tait-Bryan or Cardan angles.  The family decides which extraction formulas apply and where the
sequence is singular.
"""

from enum import Enum

from quat2eul.exceptions import InvalidSequenceError


__all__ = ['SequenceFamily', 'RotationSequence']


_AXIS_INDEX = {'x': 0, 'y': 1, 'z': 2}


class SequenceFamily(Enum):
    """
    The two families of 3 axis rotation sequences.
    """

    REPEATED_AXIS = 'repeated-axis'
    """
    The first and third axes are the same.  The middle angle comes from an arccosine and lies in [0, pi].
    """

    DISTINCT_AXIS = 'distinct-axis'
    """
    All three axes differ.  The middle angle comes from an arcsine and lies in [-pi/2, pi/2].
    """


class RotationSequence(Enum):
    """
    Enumeration of the recognized rotation sequences.

    The value of each member is its lower case name.  Use :meth:`parse` to turn user input (which may be upper case or
    padded with whitespace) into a member.
    """

    XYX = 'xyx'
    YZY = 'yzy'
    ZXZ = 'zxz'
    XZX = 'xzx'
    YXY = 'yxy'
    ZYZ = 'zyz'
    XYZ = 'xyz'
    YZX = 'yzx'
    ZXY = 'zxy'
    XZY = 'xzy'
    YXZ = 'yxz'
    ZYX = 'zyx'

    @classmethod
    def parse(cls, name: 'str | RotationSequence') -> 'RotationSequence':
        """
        Interpret a sequence name, ignoring case.

        :param name: The sequence name (for instance ``'ZYX'``) or a member of this enumeration
        :return: The matching member
        :raises InvalidSequenceError: if the name is not one of the 12 recognized sequences
        """

        if isinstance(name, cls):
            return name

        if not isinstance(name, str):
            raise InvalidSequenceError(f'rotation sequence must be a string, not {type(name).__name__}')

        try:
            return cls(name.strip().casefold())
        except ValueError:
            raise InvalidSequenceError(f'sequence not supported: {name!r}.  '
                                       f'Choose one of {", ".join(member.value for member in cls)}') from None

    @property
    def family(self) -> SequenceFamily:
        """
        The family this sequence belongs to.
        """

        if self.value[0] == self.value[2]:
            return SequenceFamily.REPEATED_AXIS

        return SequenceFamily.DISTINCT_AXIS

    @property
    def axes(self) -> tuple[int, int, int]:
        """
        The indices (0 for x, 1 for y, 2 for z) of the axes psi, theta, and phi rotate about.
        """

        first, second, third = (_AXIS_INDEX[axis] for axis in self.value)

        return first, second, third

    def __str__(self) -> str:
        return self.value
