"""
Schocken Configuration.

Environment variables, settings, and logging configuration.
"""

from schocken.config.log import configure_logging
from schocken.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
