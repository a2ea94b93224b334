"""
Configuration module for run options and environment defaults.
"""

from .settings import RunConfig

__all__ = ["RunConfig"]
