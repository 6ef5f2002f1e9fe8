import numpy as np

from quat2eul._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           first_axis_length: int | None = None,
                           max_ndim: int = 2) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if len(in_shape) > max_ndim:
        raise ValueError(f'The input must have at most {max_ndim} dimensions')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    # ensure the value is a new float array so callers never alias the input
    return np.array(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, first_axis_length=3)
