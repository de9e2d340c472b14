import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ChannelFactory import ChannelError, ChannelNotFoundError, get_channel_factory, register_scheme_alias
from ChannelTool.ConfigLoader import ConfigLoader
from Configuration import ChannelConfig, MimeTypes
from DataManager import DataManager
from Options import STANDARD_OPTION_TYPES, get_all_option_specs
from Utils.logging import setup_logging

# Create a Typer app instance
app = typer.Typer(
    name="channels",
    help="Open, write, copy and match paths through the registered channel factories.",
    add_completion=False
)

# Get a logger instance for this module
logger = logging.getLogger(__name__)


@app.callback()
def main(
    log_dir: Annotated[Path, typer.Option(
        help="Directory to store log files. Will be created if it doesn't exist.",
        file_okay=False,
        dir_okay=True,
        writable=True,
        resolve_path=True,
        rich_help_panel="Logging Configuration"
    )] = Path("./logs"),
    log_level: Annotated[str, typer.Option(
        help="Set the logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        case_sensitive=False,
        rich_help_panel="Logging Configuration"
    )] = "INFO",
    config: Annotated[Optional[Path], typer.Option(
        help="YAML file with a 'scheme_aliases' mapping (alias -> registered scheme).",
        dir_okay=False,
        rich_help_panel="Input/Output Configuration"
    )] = None
):
    """Configures logging and scheme aliases shared by every command."""
    try:
        numeric_log_level = getattr(logging, log_level.upper(), None)
        if not isinstance(numeric_log_level, int):
            print(f"Warning: Invalid log level '{log_level}'. Defaulting to INFO.", file=sys.stderr)
            numeric_log_level = logging.INFO

        setup_logging(log_dir=str(log_dir), log_level=numeric_log_level)
        logger.debug(f"Logging initialized. Level: {log_level.upper()}, Directory: {log_dir}")
    except OSError as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.error(f"Critical error setting up logging: {e}. Switched to basicConfig.", exc_info=True)

    if config is not None:
        for alias, scheme in ConfigLoader().load_scheme_aliases(config).items():
            try:
                register_scheme_alias(alias, scheme)
            except ValueError as e:
                logger.warning(f"Skipping scheme alias from {config}: {e}")


@app.command("match")
def match_paths(
    pattern: Annotated[str, typer.Argument(help="Path or glob pattern (e.g., '/data/input/*.csv').")]
):
    """Prints the existing paths matching a pattern, one per line."""
    try:
        matches = DataManager().match(pattern)
    except (ChannelError, ValueError) as e:
        logger.error(f"Unable to match {pattern}: {e}")
        raise typer.Exit(code=1)

    for path in sorted(matches):
        typer.echo(path)
    logger.info(f"Pattern {pattern} matched {len(matches)} paths")


@app.command()
def cat(
    path: Annotated[str, typer.Argument(help="Path of the file to print.")]
):
    """Copies a file's bytes to standard output."""
    stdout = typer.get_binary_stream("stdout")
    try:
        with DataManager().open_reader(path) as stream:
            shutil.copyfileobj(stream, stdout, ChannelConfig.COPY_CHUNK_SIZE)
    except ChannelNotFoundError:
        logger.error(f"File not found: {path}")
        raise typer.Exit(code=1)
    except (ChannelError, ValueError) as e:
        logger.error(f"Unable to read {path}: {e}")
        raise typer.Exit(code=1)
    stdout.flush()


@app.command()
def write(
    path: Annotated[str, typer.Argument(help="Path of the file to write. Missing directories are created.")],
    mime_type: Annotated[str, typer.Option(
        help="Mime hint passed to the channel factory."
    )] = MimeTypes.BINARY
):
    """Writes standard input to a file, replacing any previous contents."""
    stdin = typer.get_binary_stream("stdin")
    try:
        with get_channel_factory(path).create(path, mime_type) as channel:
            shutil.copyfileobj(stdin, channel, ChannelConfig.COPY_CHUNK_SIZE)
    except (ChannelError, ValueError) as e:
        logger.error(f"Unable to write {path}: {e}")
        raise typer.Exit(code=1)
    logger.info(f"Wrote {path}")


@app.command()
def copy(
    source: Annotated[str, typer.Argument(help="Path of the file to copy.")],
    dest: Annotated[str, typer.Argument(help="Destination path, on the same or another backend.")],
    mime_type: Annotated[str, typer.Option(
        help="Mime hint passed to the destination channel factory."
    )] = MimeTypes.BINARY
):
    """Copies a file between any two registered backends."""
    try:
        copied = DataManager().copy_file(source, dest, mime_type=mime_type)
    except ChannelNotFoundError:
        logger.error(f"File not found: {source}")
        raise typer.Exit(code=1)
    except (ChannelError, ValueError) as e:
        logger.error(f"Unable to copy {source} to {dest}: {e}")
        raise typer.Exit(code=1)
    logger.info(f"Copied {copied} bytes from {source} to {dest}")


@app.command()
def options():
    """Lists the visible options of the standard option types."""
    specs = get_all_option_specs(STANDARD_OPTION_TYPES)
    for spec in sorted(specs, key=lambda s: (s.declaring_type.__name__, s.name)):
        typer.echo(spec.describe())


if __name__ == "__main__":
    app()
