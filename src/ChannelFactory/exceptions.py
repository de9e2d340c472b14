"""
Channel factory exceptions.

This module defines the errors raised by channel factory implementations.
All of them are OSError subclasses, so callers that only know about the
builtin exception hierarchy keep working.
"""


class ChannelError(OSError):
    """
    Base class for errors raised by channel factories.

    Attributes:
        path: The path (or pattern) the failing operation was applied to
        message: The error description
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message

    def __reduce__(self):
        # Pickle from the constructor arguments
        return (self.__class__, (self.path, self.message))


class ChannelNotFoundError(ChannelError, FileNotFoundError):
    """Raised when a channel is opened for reading on a path with no existing entry."""


class ChannelIOError(ChannelError):
    """
    Raised for backend failures that are not a missing entry.

    Examples are permission denial, a regular file standing where a directory
    is expected, or a directory that cannot be listed.
    """
