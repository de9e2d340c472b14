"""
Option types shipped with the channel tooling.

Each type lists its accessors in its registration. DebugOptions is hidden, so
discovery and the CLI never show it.
"""

from Options.base import PipelineOptions
from Options.registry import register_options


@register_options(getJobName=str, getTempLocation=str)
class ApplicationOptions(PipelineOptions):
    """Options every pipeline run carries."""


@register_options(getDefaultScheme=str, getSchemeAliases=dict, isReadSeekEfficient=bool)
class ChannelOptions(ApplicationOptions):
    """Options controlling how paths are resolved to channel factories."""


@register_options(getLogDir=str, getLogLevel=str, getLogFileName=str)
class LoggingOptions(ApplicationOptions):
    """Options controlling log output."""


@register_options(hidden=True, getDumpChannelsOnError=bool, setDumpChannelsOnError=None)
class DebugOptions(ChannelOptions):
    """Internal switches for troubleshooting; not discoverable."""


STANDARD_OPTION_TYPES = (ApplicationOptions, ChannelOptions, LoggingOptions, DebugOptions)
