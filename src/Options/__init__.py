"""
Option metadata module.

This module provides the static registry of option types and the discovery
of their visible options, consumed by configuration and CLI tooling.
"""

from .Models import OptionSpec, OptionsRegistration
from .base import PipelineOptions
from .registry import get_all_option_specs, get_option_specs, property_name, register_options
from .StandardOptions import (
    STANDARD_OPTION_TYPES,
    ApplicationOptions,
    ChannelOptions,
    DebugOptions,
    LoggingOptions,
)

__all__ = [
    "OptionSpec",
    "OptionsRegistration",
    "PipelineOptions",
    "get_all_option_specs",
    "get_option_specs",
    "property_name",
    "register_options",
    "STANDARD_OPTION_TYPES",
    "ApplicationOptions",
    "ChannelOptions",
    "DebugOptions",
    "LoggingOptions",
]
