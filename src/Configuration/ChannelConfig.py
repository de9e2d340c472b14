"""
Channel factory constants and mime types.

This module contains the constants used by the channel factories, the backend
registry and the data manager.
"""


class MimeTypes:
    """Well-known mime hints passed to ChannelFactory.create."""

    TEXT = "text/plain"
    BINARY = "application/octet-stream"
    JSON = "application/json"
    YAML = "application/x-yaml"
    CSV = "text/csv"
    PARQUET = "application/vnd.apache.parquet"


class ChannelConfig:
    """Constants used by the channel factories and their callers."""

    DEFAULT_SCHEME: str = "file"
    """Scheme assumed for paths that carry no 'scheme://' prefix."""
    LOCAL_SCHEMES: tuple = ("file", "local")
    """Schemes served by the local filesystem channel factory."""
    LOCAL_READ_SEEK_EFFICIENT: bool = True
    """Seek-efficiency hint reported by the local filesystem channel factory."""

    # --- Read buffering ---
    RANDOM_ACCESS_BUFFER_SIZE: int = 64 * 1024  # 64 KB
    """Buffer size for readers on backends where seeking is cheap; small because reads jump around."""
    SEQUENTIAL_BUFFER_SIZE: int = 8 * 1024 * 1024  # 8 MB
    """Buffer size for readers on backends where seeking is expensive; large to favour streaming."""
    COPY_CHUNK_SIZE: int = 1024 * 1024  # 1 MB
    """Chunk size used when copying one channel into another."""

    # --- Configuration file ---
    SCHEME_ALIASES_YAML_KEY: str = "scheme_aliases"
    """Key in the YAML configuration file holding the alias -> scheme mapping."""
