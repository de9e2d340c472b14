
class RegularExpressions:
    """Collection of regular expressions used throughout the application."""

    GLOB_WILDCARD_REGEX: str = r'[*?\[]'
    """Regex for detecting glob wildcard characters in a path or path segment.
       Affects: Whether a match pattern is treated as an exact path or expanded against a directory listing."""

    OPTION_ACCESSOR_REGEX: str = r'^(?:get|is)(?P<name>.+)$'
    """Regex for getter-shaped option accessors: a 'get' or 'is' prefix followed by at least one character.
       The named group holds the name after the prefix ('getJobName' -> 'JobName')."""
