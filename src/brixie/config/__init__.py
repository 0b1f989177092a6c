"""
Configuration package for Brixie.

This package contains settings loading from environment variables
and .env files.
"""

from .settings import BrixieSettings, get_settings
from .env_loader import EnvFileLoader

__all__ = ["BrixieSettings", "get_settings", "EnvFileLoader"]
