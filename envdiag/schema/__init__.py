# envdiag/schema/__init__.py
"""
Schema declarations and key computation.
"""

from .keys import *
from .definition import *
