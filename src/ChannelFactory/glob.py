"""
Glob pattern matching against real directory listings.

This module resolves path patterns into the set of existing entries they
match. Wildcards are segment-local: '*' never crosses a path separator.
"""

import logging
import os
import re
from typing import List, Set

from fsspec import AbstractFileSystem
from fsspec.utils import glob_translate

from ChannelFactory.exceptions import ChannelIOError
from Configuration import RegularExpressions

_WILDCARD_PATTERN = re.compile(RegularExpressions.GLOB_WILDCARD_REGEX)
RECURSIVE_WILDCARD = "**"


class GlobMatcher:
    """
    Resolves glob patterns against the entries of a filesystem.

    The pattern is split into a parent directory and a leaf pattern. The
    parent is listed and each entry name is tested against the leaf. A
    parent that itself contains wildcards is resolved first, one segment at
    a time, keeping only directories.
    """

    def __init__(self, fs: AbstractFileSystem) -> None:
        """
        Initialize the matcher.

        Args:
            fs: The fsspec filesystem used to list directories and check existence
        """
        self.fs = fs
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def has_wildcards(pattern: str) -> bool:
        """Return True if the pattern contains any glob wildcard character."""
        return _WILDCARD_PATTERN.search(pattern) is not None

    def match(self, pattern: str) -> Set[str]:
        """
        Resolve a pattern into the set of existing paths it matches.

        Args:
            pattern: A path, optionally with wildcards in any of its segments

        Returns:
            The matching paths, spelled with the same parent as the pattern

        Raises:
            ChannelIOError: If an existing parent directory cannot be listed
            ValueError: If the pattern uses '**', alone or inside a larger segment
        """
        if RECURSIVE_WILDCARD in pattern.split(os.sep):
            raise ValueError(f"Recursive '{RECURSIVE_WILDCARD}' is not supported: {pattern}")

        if not self.has_wildcards(pattern):
            self.logger.debug(f"Matching exact path: {pattern}")
            return {pattern} if self.fs.exists(pattern) else set()

        parent, leaf = os.path.split(pattern.rstrip(os.sep) or pattern)
        leaf_regex = re.compile(glob_translate(leaf))

        if self.has_wildcards(parent):
            parents = {p for p in self.match(parent) if self.fs.isdir(p)}
        else:
            parents = {parent}

        matches = set()
        for directory in parents:
            for name in self._list_names(directory):
                if leaf_regex.match(name):
                    matches.add(os.path.join(directory, name))

        self.logger.debug(f"Pattern {pattern} matched {len(matches)} entries")
        return matches

    def _list_names(self, directory: str) -> List[str]:
        """
        List the entry names of a directory.

        A directory that does not exist has no entries. Anything else that
        prevents listing is an error.
        """
        listed = directory or os.curdir
        try:
            info = self.fs.info(listed)
        except FileNotFoundError:
            return []
        except OSError as e:
            raise ChannelIOError(directory, f"Unable to list {listed}: {e}") from e

        if info["type"] != "directory":
            raise ChannelIOError(directory, f"Unable to list {listed}: not a directory")

        try:
            entries = self.fs.ls(listed, detail=False)
        except FileNotFoundError:
            # Removed between the check and the listing
            return []
        except OSError as e:
            raise ChannelIOError(directory, f"Unable to list {listed}: {e}") from e

        return [os.path.basename(entry.rstrip("/")) for entry in entries]
