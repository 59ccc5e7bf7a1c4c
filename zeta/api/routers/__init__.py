"""
API Routers package.
"""

from . import story

__all__ = ["story"]
