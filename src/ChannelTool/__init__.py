"""
Command-line tooling for the channel factories.

This module provides the `channels` CLI and its configuration loader.
"""

from .ConfigLoader import ConfigLoader

__all__ = ["ConfigLoader"]
