"""
Utility functions for the channel tooling.

This module provides utility functions for logging setup.
"""

from .logging import setup_logging

__all__ = ["setup_logging"]
