"""
Conversion of :class:`.EulerAngles` between radians and degrees.
"""

import numpy as np

from quat2eul.rotations.representations import EulerAngles


__all__ = ['to_degrees', 'to_radians']


def to_degrees(angles: EulerAngles) -> EulerAngles:
    """
    Convert euler angles from radians to degrees (multiplies each angle by 180/pi).

    Angles which are already in degrees are returned unchanged.

    :param angles: the angles to convert
    :return: the angles in degrees
    """

    if angles.degrees:
        return angles

    psi, theta, phi = np.rad2deg(angles.as_array())

    return EulerAngles(float(psi), float(theta), float(phi), degrees=True)


def to_radians(angles: EulerAngles) -> EulerAngles:
    """
    Convert euler angles from degrees to radians (multiplies each angle by pi/180).

    Angles which are already in radians are returned unchanged.

    :param angles: the angles to convert
    :return: the angles in radians
    """

    if not angles.degrees:
        return angles

    psi, theta, phi = np.deg2rad(angles.as_array())

    return EulerAngles(float(psi), float(theta), float(phi))
