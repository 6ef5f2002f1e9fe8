"""
This package contains helpful mixin classes to provide basic functionality throughout quat2eul.
"""

from quat2eul.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["UserOptionConfigured"]
