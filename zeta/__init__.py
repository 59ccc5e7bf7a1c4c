"""
Zeta - guided bedtime story generation.
"""

__version__ = "1.0.0"
