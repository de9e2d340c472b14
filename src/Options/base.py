"""
Root of the option type hierarchy.
"""


class PipelineOptions:
    """
    Base class for all option types.

    Option types describe configuration as accessors. They are registered
    with Options.registry.register_options, which records each accessor's
    name and return type. Discovery reads that table instead of inspecting
    the classes.
    """
