"""
Data management module for high-level file operations.

This module provides the DataManager class which offers high-level data
operations (read/write bytes, text, JSON, YAML, CSV, Parquet) built on top of
the ChannelFactory abstraction.
"""

from .DataManager import DataManager

__all__ = ["DataManager"]
