"""
Channel factory registry.

This module maps path schemes to channel factory instances. Factories are
stateless, so each one is instantiated once at registration and shared by
every caller.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Type

from fsspec.core import split_protocol

from ChannelFactory.base import ChannelFactory
from ChannelFactory.local import LocalChannelFactory
from Configuration import ChannelConfig

# Registry of scheme -> channel factory instance
_FACTORY_REGISTRY: Dict[str, ChannelFactory] = {}
logger = logging.getLogger(__name__)


def register_channel_factory(scheme: str, factory_class: Type[ChannelFactory]) -> None:
    """
    Register a channel factory implementation for a scheme.

    Args:
        scheme: The scheme handled by the factory (e.g., "file", "gs")
        factory_class: The channel factory implementation class
    """
    logger.debug(f"Registering channel factory for scheme: {scheme}")
    _FACTORY_REGISTRY[scheme] = factory_class()


def register_scheme_alias(alias: str, scheme: str) -> None:
    """
    Make an alias scheme resolve to the factory of a registered scheme.

    Args:
        alias: The new scheme name
        scheme: The registered scheme it stands for

    Raises:
        ValueError: If the target scheme is not registered
    """
    if scheme not in _FACTORY_REGISTRY:
        raise ValueError(f"Cannot alias {alias} to unregistered scheme: {scheme}")

    logger.debug(f"Registering scheme alias: {alias} -> {scheme}")
    _FACTORY_REGISTRY[alias] = _FACTORY_REGISTRY[scheme]


def get_channel_factory(path: str) -> ChannelFactory:
    """
    Get the channel factory responsible for a path.

    Args:
        path: A path or pattern, optionally prefixed with 'scheme://'

    Returns:
        The registered factory for the path's scheme

    Raises:
        ValueError: If no factory is registered for the scheme
    """
    scheme, _ = split_protocol(path)
    if scheme is None:
        scheme = ChannelConfig.DEFAULT_SCHEME

    if scheme not in _FACTORY_REGISTRY:
        raise ValueError(f"No channel factory registered for scheme: {scheme}")

    return _FACTORY_REGISTRY[scheme]


def registered_schemes() -> Mapping[str, ChannelFactory]:
    """Return a read-only view of the scheme -> factory table."""
    return MappingProxyType(_FACTORY_REGISTRY)


# Register built-in channel factories
register_channel_factory(ChannelConfig.DEFAULT_SCHEME, LocalChannelFactory)
for _scheme in ChannelConfig.LOCAL_SCHEMES:
    if _scheme != ChannelConfig.DEFAULT_SCHEME:
        register_scheme_alias(_scheme, ChannelConfig.DEFAULT_SCHEME)

# Note: remote backends (e.g. "gs", "s3") would be registered here
# by the package that provides their ChannelFactory implementation
