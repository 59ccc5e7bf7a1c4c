"""
Infrastructure package.

Logging and environment configuration shared by the CLI and the API.
"""

from .logging_config import setup_logging
from .config import load_environment

__all__ = ["setup_logging", "load_environment"]
