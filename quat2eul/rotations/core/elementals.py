import numpy as np

from quat2eul._typing import SCALAR_OR_ARRAY, DOUBLE_ARRAY


__all__ = ["elemental_quaternion"]


def elemental_quaternion(axis: int, angle: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function forms the scalar first rotation quaternion for a rotation about a single coordinate axis.

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{cos}(\frac{\theta}{2})\\
        \text{sin}(\frac{\theta}{2})\hat{\mathbf{e}}_{axis}\end{array}\right]

    If angle is an array then the result is a 4xn array with each quaternion as a column.

    :param axis: the index of the axis to rotate about (0 for x, 1 for y, 2 for z)
    :param angle: the rotation angle(s) in radians
    :return: the quaternion(s) for the elemental rotation(s)
    :raises ValueError: if axis is not 0, 1, or 2
    """

    if axis not in (0, 1, 2):
        raise ValueError(f'axis must be 0, 1, or 2, not {axis}')

    half = np.asarray(angle, dtype=np.float64) / 2

    quaternion = np.zeros((4,) + half.shape)
    quaternion[0] = np.cos(half)
    quaternion[axis + 1] = np.sin(half)

    return quaternion
