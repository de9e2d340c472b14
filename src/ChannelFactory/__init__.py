"""
Channel factory abstraction module.

This module provides a channel factory abstraction layer that lets pipeline
sources and sinks open byte channels against different storage backends.
"""

from .base import ChannelFactory
from .channels import ReadableChannel, SeekableReadableChannel, WritableChannel
from .exceptions import ChannelError, ChannelIOError, ChannelNotFoundError
from .glob import GlobMatcher
from .local import LocalChannelFactory
from .registry import (
    get_channel_factory,
    register_channel_factory,
    register_scheme_alias,
    registered_schemes,
)

__all__ = [
    "ChannelFactory",
    "ReadableChannel",
    "SeekableReadableChannel",
    "WritableChannel",
    "ChannelError",
    "ChannelIOError",
    "ChannelNotFoundError",
    "GlobMatcher",
    "LocalChannelFactory",
    "get_channel_factory",
    "register_channel_factory",
    "register_scheme_alias",
    "registered_schemes",
]
