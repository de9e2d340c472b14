"""
Local filesystem implementation.

This module provides a channel factory implementation for the local file system.
"""

import logging
import os
from pathlib import Path
from typing import Set

import fsspec
from fsspec.core import split_protocol

from ChannelFactory.base import ChannelFactory
from ChannelFactory.channels import SeekableReadableChannel, WritableChannel
from ChannelFactory.exceptions import ChannelIOError, ChannelNotFoundError
from ChannelFactory.glob import GlobMatcher
from Configuration import ChannelConfig


class LocalChannelFactory(ChannelFactory):
    """
    Implementation of ChannelFactory for the local file system.

    Channels are plain files opened in binary mode. Directory listings and
    existence checks go through fsspec so the matcher works the same way it
    would against any other fsspec filesystem.
    """

    def __init__(self) -> None:
        """Initialize the local channel factory."""
        self.logger = logging.getLogger(__name__)
        self.fs = fsspec.filesystem("file")
        self.matcher = GlobMatcher(self.fs)

    def create(self, path: str, mime_type: str) -> WritableChannel:
        """
        Open a file for writing, creating missing parent directories.

        Args:
            path: The path of the file to write
            mime_type: A hint describing the content about to be written

        Returns:
            A WritableChannel over the truncated file

        Raises:
            ChannelIOError: If the directories or the file cannot be created
        """
        local_path = Path(self._to_local_path(path))
        self.logger.debug(f"Creating channel for: {local_path} ({mime_type})")

        try:
            # exist_ok makes a concurrent creation of the same ancestor a success
            local_path.parent.mkdir(parents=True, exist_ok=True)
            raw = open(local_path, "wb")
        except OSError as e:
            raise ChannelIOError(path, f"Unable to create {path}: {e}") from e

        return WritableChannel(raw, path, mime_type)

    def open(self, path: str) -> SeekableReadableChannel:
        """
        Open a file for reading.

        Args:
            path: The path of the file to read

        Returns:
            A SeekableReadableChannel over the file

        Raises:
            ChannelNotFoundError: If the file does not exist
            ChannelIOError: If the file cannot be opened
        """
        local_path = Path(self._to_local_path(path))
        self.logger.debug(f"Opening channel for: {local_path}")

        try:
            raw = open(local_path, "rb")
        except (FileNotFoundError, NotADirectoryError) as e:
            raise ChannelNotFoundError(path, f"File not found: {path}") from e
        except OSError as e:
            raise ChannelIOError(path, f"Unable to open {path}: {e}") from e

        return SeekableReadableChannel(raw, path)

    def match(self, pattern: str) -> Set[str]:
        """
        List the existing files and directories matching a pattern.

        Args:
            pattern: A path, optionally with glob wildcards (e.g., "/data/input/*.csv")

        Returns:
            The set of matching paths
        """
        self.logger.debug(f"Matching pattern: {pattern}")
        return self.matcher.match(self._to_local_path(pattern))

    def is_read_seek_efficient(self, path: str) -> bool:
        """Local files are always cheap to seek."""
        return ChannelConfig.LOCAL_READ_SEEK_EFFICIENT

    def _to_local_path(self, path: str) -> str:
        """
        Strip the scheme prefix from a path and expand a leading '~'.

        The registry decides which schemes reach this factory ('file',
        'local' and any alias of them), so the prefix is dropped unchecked.

        Args:
            path: A plain path or a 'scheme://' URI

        Returns:
            The OS path, as fsspec resolves it for listings and existence checks
        """
        _, local_path = split_protocol(path)
        return os.path.expanduser(local_path)
