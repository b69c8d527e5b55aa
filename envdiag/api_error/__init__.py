# envdiag/api_error/__init__.py
"""
Errors raised while binding configuration.
"""

from .bind_error import *
from .config_error import *
