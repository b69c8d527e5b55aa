# envdiag/__init__.py
"""
Environment configuration binding with complete missing-variable reports.
"""

from .api_error import *
from .config import *
from .schema import *
from .binder import *
from .walker import *
from .processor import *
from .usage import *

__version__ = "0.1.0"
