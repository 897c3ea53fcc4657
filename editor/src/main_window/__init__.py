"""Main window mixins"""

from .config_mixin import ConfigMixin

__all__ = ['ConfigMixin']
