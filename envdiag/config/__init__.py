# envdiag/config/__init__.py
"""
Environment sources, logging configuration and shared types.
"""

from .config_types import *
from .env_source import *
from .logging_config import *
from .structlog_config import *
