"""
Static option registry.

This module keeps the table of option types and their accessors, and answers
which options are visible for a given set of option types. Accessors are
declared at registration time; nothing is discovered by inspecting classes.
"""

import logging
import re
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Type

from Configuration import RegularExpressions
from Options.Models import OptionSpec, OptionsRegistration
from Options.base import PipelineOptions

# Registry of option type -> registration
_OPTIONS_REGISTRY: Dict[type, OptionsRegistration] = {}
_ACCESSOR_PATTERN = re.compile(RegularExpressions.OPTION_ACCESSOR_REGEX)
logger = logging.getLogger(__name__)


def register_options(hidden: bool = False, **accessors: Optional[type]) -> Callable[[type], type]:
    """
    Class decorator registering an option type and its accessors.

    Example:
        @register_options(getTempLocation=str, isStreaming=bool)
        class MyOptions(PipelineOptions):
            ...

    Args:
        hidden: If True, the type contributes no options to discovery
        **accessors: Accessor name -> return type; None declares a void accessor

    Returns:
        The decorator, which returns the class unchanged

    Raises:
        TypeError: If the decorated class is not a PipelineOptions subclass
    """
    def decorator(options_type: type) -> type:
        if not (isinstance(options_type, type) and issubclass(options_type, PipelineOptions)):
            raise TypeError(f"{options_type!r} is not a PipelineOptions subclass")

        logger.debug(f"Registering options: {options_type.__name__} ({len(accessors)} accessors, hidden={hidden})")
        _OPTIONS_REGISTRY[options_type] = OptionsRegistration(
            options_type=options_type,
            accessors=dict(accessors),
            hidden=hidden,
        )
        return options_type

    return decorator


def property_name(accessor: str) -> Optional[str]:
    """
    Derive the property name of a getter-shaped accessor.

    The 'get' or 'is' prefix is stripped and the first remaining character
    is lower-cased: 'getJobName' -> 'jobName', 'isolate' -> 'olate',
    'get_temp' -> '_temp'.

    Args:
        accessor: The accessor name

    Returns:
        The property name, or None if the accessor is not getter-shaped
    """
    found = _ACCESSOR_PATTERN.match(accessor)
    if found is None:
        return None

    remainder = found.group("name")
    return remainder[0].lower() + remainder[1:]


def get_option_specs(options_type: Type[PipelineOptions]) -> FrozenSet[OptionSpec]:
    """
    Retrieve the visible options of an option type and all its ancestors.

    An option is visible when it is declared by a registered, non-hidden type
    in the type's MRO, its accessor is getter-shaped and its return type is
    not void.

    Args:
        options_type: A PipelineOptions subclass

    Returns:
        The set of visible option specs

    Raises:
        TypeError: If options_type is not a PipelineOptions subclass
    """
    if not (isinstance(options_type, type) and issubclass(options_type, PipelineOptions)):
        raise TypeError(f"{options_type!r} is not a PipelineOptions subclass")

    specs = set()
    for declaring_type in options_type.__mro__:
        registration = _OPTIONS_REGISTRY.get(declaring_type)
        if registration is None or registration.hidden:
            continue

        for accessor, value_type in registration.accessors.items():
            name = property_name(accessor)
            if name is None or value_type is None or value_type is type(None):
                continue
            specs.add(OptionSpec(
                declaring_type=declaring_type,
                name=name,
                accessor=accessor,
                value_type=value_type,
            ))

    return frozenset(specs)


def get_all_option_specs(options_types: Iterable[Type[PipelineOptions]]) -> FrozenSet[OptionSpec]:
    """
    Retrieve the visible options of several option types.

    Args:
        options_types: PipelineOptions subclasses

    Returns:
        The union of their visible option specs
    """
    specs = set()
    for options_type in options_types:
        specs.update(get_option_specs(options_type))
    return frozenset(specs)
