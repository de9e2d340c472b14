"""
Data management abstraction module.

This module provides high-level data operations (read/write various formats)
built on top of the ChannelFactory abstraction layer.
"""

import io
import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Set

import pandas as pd
import yaml

from ChannelFactory.base import ChannelFactory
from ChannelFactory.exceptions import ChannelNotFoundError
from ChannelFactory.registry import get_channel_factory
from Configuration import ChannelConfig, MimeTypes


class DataManager:
    """
    High-level data operations over channel factories.

    This class provides methods for reading and writing various data formats
    (bytes, text, JSON, YAML, CSV, Parquet) through whichever channel factory
    is registered for each path. Read buffering follows the factory's
    seek-efficiency hint.
    """

    def __init__(self, factory: Optional[ChannelFactory] = None) -> None:
        """
        Initialize the DataManager.

        Args:
            factory: A factory to use for every path. If None, the factory is
                resolved per path from the channel factory registry.
        """
        self.factory = factory
        self.logger = logging.getLogger(__name__)

    def factory_for(self, path: str) -> ChannelFactory:
        """Return the factory responsible for a path."""
        if self.factory is not None:
            return self.factory
        return get_channel_factory(path)

    @contextmanager
    def open_reader(self, path: str, random_access: bool = False) -> Iterator[io.BufferedIOBase]:
        """
        Open a buffered reader, choosing the buffering from the seek-efficiency hint.

        Args:
            path: The path to read
            random_access: Whether the consumer needs to seek

        Yields:
            A buffered, readable stream. It is seekable when random_access is True.

        Raises:
            ChannelNotFoundError: If the path does not exist
        """
        factory = self.factory_for(path)
        channel = factory.open(path)
        try:
            if factory.is_read_seek_efficient(path) and channel.seekable():
                self.logger.debug(f"Reading {path} with random-access buffering")
                reader = io.BufferedReader(channel, buffer_size=ChannelConfig.RANDOM_ACCESS_BUFFER_SIZE)
            elif random_access:
                self.logger.debug(f"Loading {path} into memory for random access")
                reader = io.BytesIO(channel.readall())
                channel.close()
            else:
                self.logger.debug(f"Reading {path} with sequential buffering")
                reader = io.BufferedReader(channel, buffer_size=ChannelConfig.SEQUENTIAL_BUFFER_SIZE)
        except BaseException:
            channel.close()
            raise

        with reader:
            yield reader

    def read_bytes(self, path: str) -> bytes:
        """
        Read the full contents of a file.

        Raises:
            ChannelNotFoundError: If the file does not exist
        """
        self.logger.debug(f"Reading bytes: {path}")
        with self.open_reader(path) as stream:
            return stream.read()

    def write_bytes(self, data: bytes, path: str, mime_type: str = MimeTypes.BINARY) -> None:
        """Write bytes to a file, replacing any previous contents."""
        self.logger.debug(f"Writing {len(data)} bytes: {path}")
        with self.factory_for(path).create(path, mime_type) as channel:
            channel.write(data)

    def read_text(self, path: str, encoding: str = 'utf-8') -> str:
        """
        Read a text file.

        Raises:
            ChannelNotFoundError: If the file does not exist
        """
        return self.read_bytes(path).decode(encoding)

    def write_text(self, text: str, path: str, encoding: str = 'utf-8') -> None:
        """Write a text file."""
        self.write_bytes(text.encode(encoding), path, mime_type=MimeTypes.TEXT)

    def read_lines(self, path: str, encoding: str = 'utf-8') -> List[str]:
        """
        Read a text file as a list of lines without line terminators.

        Raises:
            ChannelNotFoundError: If the file does not exist
        """
        self.logger.debug(f"Reading lines: {path}")
        with self.open_reader(path) as stream:
            with io.TextIOWrapper(stream, encoding=encoding) as text:
                return text.read().splitlines()

    def read_json(self, path: str) -> Dict[str, Any]:
        """
        Read a JSON file into a dictionary.

        Args:
            path: The path of the JSON file to read

        Returns:
            A dictionary containing the data from the file
        """
        try:
            content = self.read_text(path)
        except ChannelNotFoundError:
            self.logger.debug(f"JSON file not found: {path}, returning empty dict")
            return {}

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Invalid JSON in file {path}: {e}, returning empty dict")
            return {}

    def write_json(self, data: Dict[str, Any], path: str) -> None:
        """
        Write a dictionary to a JSON file.

        Args:
            data: The dictionary to write
            path: The path where the JSON file should be written
        """
        self.logger.debug(f"Writing JSON file: {path}")
        json_str = json.dumps(data, indent=4, ensure_ascii=False)
        self.write_bytes(json_str.encode('utf-8'), path, mime_type=MimeTypes.JSON)

    def read_yaml(self, path: str) -> Dict[str, Any]:
        """
        Read a YAML file into a dictionary.

        Args:
            path: The path of the YAML file to read

        Returns:
            A dictionary containing the data from the file
        """
        try:
            content = self.read_text(path)
        except ChannelNotFoundError:
            self.logger.debug(f"YAML file not found: {path}, returning empty dict")
            return {}

        try:
            data = yaml.safe_load(content)
            return data if data else {}
        except yaml.YAMLError as e:
            self.logger.warning(f"Invalid YAML in file {path}: {e}, returning empty dict")
            return {}

    def write_yaml(self, data: Dict[str, Any], path: str) -> None:
        """
        Write a dictionary to a YAML file.

        Args:
            data: The dictionary to write
            path: The path where the YAML file should be written
        """
        self.logger.debug(f"Writing YAML file: {path}")
        yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
        self.write_bytes(yaml_str.encode('utf-8'), path, mime_type=MimeTypes.YAML)

    def read_csv(self, path: str, **kwargs) -> pd.DataFrame:
        """
        Read a CSV file into a DataFrame.

        Args:
            path: The path of the CSV file to read
            **kwargs: Additional arguments to pass to pandas read_csv

        Returns:
            A pandas DataFrame containing the data from the file
        """
        self.logger.debug(f"Reading CSV file: {path}")
        try:
            with self.open_reader(path) as stream:
                return pd.read_csv(stream, **kwargs)
        except ChannelNotFoundError:
            self.logger.debug(f"CSV file not found: {path}, returning empty DataFrame")
            return pd.DataFrame()

    def write_csv(self, df: pd.DataFrame, path: str, **kwargs) -> None:
        """
        Write a DataFrame to a CSV file.

        Args:
            df: The DataFrame to write
            path: The path where the CSV file should be written
            **kwargs: Additional arguments to pass to pandas to_csv
        """
        self.logger.debug(f"Writing CSV file: {path}")
        text_buffer = io.StringIO()
        df.to_csv(text_buffer, index=False, **kwargs)
        self.write_bytes(text_buffer.getvalue().encode('utf-8'), path, mime_type=MimeTypes.CSV)

    def read_parquet(self, path: str) -> pd.DataFrame:
        """
        Read a Parquet file into a DataFrame.

        Parquet readers seek to the footer first, so the reader is opened for
        random access.

        Args:
            path: The path of the Parquet file to read

        Returns:
            A pandas DataFrame containing the data from the file
        """
        self.logger.debug(f"Reading Parquet file: {path}")
        try:
            with self.open_reader(path, random_access=True) as stream:
                return pd.read_parquet(stream)
        except ChannelNotFoundError:
            self.logger.debug(f"Parquet file not found: {path}, returning empty DataFrame")
            return pd.DataFrame()

    def write_parquet(self, df: pd.DataFrame, path: str) -> None:
        """
        Write a DataFrame to a Parquet file.

        Args:
            df: The DataFrame to write
            path: The path where the Parquet file should be written
        """
        self.logger.debug(f"Writing Parquet file: {path}")
        buffer = io.BytesIO()
        df.to_parquet(buffer, index=False)
        self.write_bytes(buffer.getvalue(), path, mime_type=MimeTypes.PARQUET)

    def copy_file(self, source_path: str, dest_path: str, mime_type: str = MimeTypes.BINARY) -> int:
        """
        Copy a file from a source path to a destination path.

        The source and destination may live on different backends.

        Args:
            source_path: The source file path
            dest_path: The destination file path
            mime_type: The mime hint for the destination

        Returns:
            The number of bytes copied

        Raises:
            ChannelNotFoundError: If the source does not exist
        """
        self.logger.debug(f"Copying file from {source_path} to {dest_path}")

        copied = 0
        with self.open_reader(source_path) as source_stream:
            with self.factory_for(dest_path).create(dest_path, mime_type) as dest_channel:
                while True:
                    chunk = source_stream.read(ChannelConfig.COPY_CHUNK_SIZE)
                    if not chunk:
                        break
                    dest_channel.write(chunk)
                    copied += len(chunk)
        return copied

    def match(self, pattern: str) -> Set[str]:
        """Return the existing paths matching a pattern."""
        return self.factory_for(pattern).match(pattern)
