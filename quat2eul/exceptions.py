# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the errors raised by quat2eul when a conversion request cannot be satisfied.

Both errors are terminal for the request that raised them: the input that caused them will not become valid by
retrying.  Advisory conditions (a renormalized quaternion, a result close to gimbal lock) are never raised, they are
reported through the notices attached to successful results instead.
"""

__all__ = ['Quat2EulError', 'DomainError', 'InvalidSequenceError']


class Quat2EulError(ValueError):
    """
    Base class for all errors raised by quat2eul.

    This is a subclass of :class:`ValueError` so that callers which only care about bad input can keep catching
    ``ValueError``.
    """


class DomainError(Quat2EulError):
    """
    Raised when the input cannot be turned into a unit quaternion.

    This happens when the imaginary part of a quaternion is longer than 1 (the scalar part would need the square root
    of a negative number), when a full quaternion has zero length, or when any component is not finite.
    """


class InvalidSequenceError(Quat2EulError):
    """
    Raised when a rotation sequence name is not one of the 12 recognized 3 axis sequences.
    """
