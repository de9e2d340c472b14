"""
Initializes the Configuration package.

This module provides centralized access to all application settings,
constants, and configuration values across different domains.
"""

# Import from channel configuration
from .ChannelConfig import ChannelConfig, MimeTypes

# Import from global configuration
from .GlobalConfig import RegularExpressions

__all__ = [
    # Channel constants
    "ChannelConfig",
    "MimeTypes",

    # Global constants
    "RegularExpressions",
]
