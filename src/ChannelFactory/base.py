"""
Base channel factory abstraction.

This module defines the abstract base class for channel factory implementations.
"""

from abc import ABC, abstractmethod
from typing import Set

from ChannelFactory.channels import ReadableChannel, WritableChannel


class ChannelFactory(ABC):
    """
    Abstract base class for channel factory implementations.

    This class defines the contract that every storage backend must satisfy
    identically, so that pipeline sources and sinks do not depend on where
    their data lives. It provides methods for creating, opening and matching
    paths, plus a capability hint for readers.
    """

    @abstractmethod
    def create(self, path: str, mime_type: str) -> WritableChannel:
        """
        Open a path for writing.

        Missing ancestor directories are created first. If the file already
        exists its previous contents are replaced by what is written.

        Args:
            path: The path of the file to write
            mime_type: A hint describing the content about to be written

        Returns:
            A WritableChannel for the file

        Raises:
            ChannelIOError: If the file cannot be created for a reason other than missing ancestors
        """
        pass

    @abstractmethod
    def open(self, path: str) -> ReadableChannel:
        """
        Open an existing path for reading.

        Args:
            path: The path of the file to read

        Returns:
            A ReadableChannel for the file

        Raises:
            ChannelNotFoundError: If no entry exists at the path
            ChannelIOError: If the entry exists but cannot be opened
        """
        pass

    @abstractmethod
    def match(self, pattern: str) -> Set[str]:
        """
        Resolve a pattern into the set of existing paths it matches.

        A pattern without wildcard characters is an exact path and matches
        at most itself. A pattern with wildcards matches the entries of its
        parent directory whose names satisfy the wildcard expression.

        Args:
            pattern: A path, optionally with glob wildcards in its segments

        Returns:
            The set of matching paths, empty if nothing matches

        Raises:
            ChannelIOError: If an existing parent directory cannot be listed
        """
        pass

    @abstractmethod
    def is_read_seek_efficient(self, path: str) -> bool:
        """
        Report whether random-access reads are efficient on this backend.

        The answer is fixed per backend. Implementations must not touch the
        storage and must not raise.

        Args:
            path: The path the caller is about to read

        Returns:
            True if callers should prefer seeking over sequential buffering
        """
        pass
