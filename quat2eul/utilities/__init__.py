# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides the configuration plumbing shared by the configurable classes in quat2eul.

:mod:`.options` defines the :class:`.UserOptions` dataclass base and :mod:`.mixin_classes` provides the
:class:`.UserOptionConfigured` mixin which applies a set of options to an instance and can restore them later.
"""

from quat2eul.utilities.options import UserOptions
from quat2eul.utilities.mixin_classes import UserOptionConfigured

__all__ = ['UserOptions', 'UserOptionConfigured']
