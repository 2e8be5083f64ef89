"""Command line interface for shader-enums.

This module provides a command-line interface for generating Swift shader
enums from Metal sources, either once or continuously while the sources
change.
"""

import os
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional, TypeVar, cast

import typer
import watchdog.events
import watchdog.observers
from loguru import logger
from watchdog.events import FileSystemEventHandler

from shader_enums.generator import run
from shader_enums.generator.constants import DEFAULT_MODULE_NAME, SHADER_FILE_SUFFIX
from shader_enums.generator.errors import (
    DocumentReadError,
    InvalidGroupNameError,
    OutputWriteError,
    ShaderEnumError,
)
from shader_enums.sources import collect_shader_files, load_documents, write_output

# Define type variables for TypedCallable
F = TypeVar("F", bound=Callable[..., Any])

EXIT_INPUT_ERROR = 1
EXIT_WRITE_ERROR = 2


# TypedCommand decorator helper
def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="shader-enums",
    help=(
        "Generate type-safe Swift enums for Metal shader functions. "
        "Commands: generate, watch."
    ),
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr at INFO, or DEBUG when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _generate_code(
    inputs: list[Path], module_name: str, skip_unreadable: bool
) -> str:
    """Collect, read and process shader sources into Swift code.

    Args:
        inputs: Shader files and directories
        module_name: Prefix of the generated container enum
        skip_unreadable: Skip unreadable files instead of failing

    Returns:
        Generated Swift code
    """
    files = collect_shader_files(inputs)
    if not files:
        logger.warning(f"No {SHADER_FILE_SUFFIX} files found in the given inputs")
    logger.debug(f"Collected shader files: {[str(f) for f in files]}")
    return run(load_documents(files, skip_unreadable=skip_unreadable), module_name)


# Define reusable arguments and options
INPUTS_ARG = typer.Argument(
    ..., help="Metal shader files or directories to search for .metal files"
)
MODULE_OPT = typer.Option(
    DEFAULT_MODULE_NAME,
    "--module",
    "-m",
    envvar="SHADER_ENUMS_MODULE",
    help="Module name used as the prefix of the generated enum",
)
SKIP_UNREADABLE_OPT = typer.Option(
    False,
    "--skip-unreadable",
    help="Warn about and skip shader files that cannot be read",
)
VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


@typed_command(app.command("generate"))
def generate_enums(
    inputs: list[Path] = INPUTS_ARG,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output Swift file (stdout if omitted)"
    ),
    module_name: str = MODULE_OPT,
    skip_unreadable: bool = SKIP_UNREADABLE_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Generate Swift shader enums from Metal sources.

    Example: shader-enums generate Shaders/ -o ShaderEnums.generated.swift -m App
    """
    _configure_logging(verbose)

    try:
        code = _generate_code(inputs, module_name, skip_unreadable)
    except InvalidGroupNameError as e:
        logger.error(f"Invalid shader group: {e}")
        raise typer.Exit(EXIT_INPUT_ERROR) from e
    except DocumentReadError as e:
        logger.error(f"Failed to read shader sources: {e}")
        raise typer.Exit(EXIT_INPUT_ERROR) from e

    if output is None:
        typer.echo(code, nl=False)
        return

    try:
        write_output(output, code)
    except OutputWriteError as e:
        logger.error(str(e))
        raise typer.Exit(EXIT_WRITE_ERROR) from e


class ShaderChangeHandler(FileSystemEventHandler):  # type: ignore
    """Event handler flagging changes to shader files."""

    def __init__(self) -> None:
        self.needs_regenerate = False

    def on_any_event(self, event: watchdog.events.FileSystemEvent) -> None:
        """Handle file system events.

        Args:
            event: File system event
        """
        if event.is_directory or event.event_type in ("opened", "closed_no_write"):
            return
        paths = [event.src_path, getattr(event, "dest_path", "")]
        if any(os.fsdecode(p).endswith(SHADER_FILE_SUFFIX) for p in paths if p):
            logger.info(f"Detected {event.event_type} event for {event.src_path}")
            self.needs_regenerate = True


def _regenerate(
    inputs: list[Path], output: Path, module_name: str, skip_unreadable: bool
) -> bool:
    """Regenerate the output file, logging instead of raising on failure.

    Returns:
        True if the output was written
    """
    try:
        write_output(output, _generate_code(inputs, module_name, skip_unreadable))
    except ShaderEnumError as e:
        logger.error(f"Generation failed: {e}")
        return False
    return True


@typed_command(app.command("watch"))
def watch_sources(
    inputs: list[Path] = INPUTS_ARG,
    output: Path = typer.Option(..., "--output", "-o", help="Output Swift file"),
    module_name: str = MODULE_OPT,
    skip_unreadable: bool = SKIP_UNREADABLE_OPT,
    verbose: bool = VERBOSE_OPT,
    interval: float = typer.Option(
        0.5, "--interval", help="Seconds between checks for changes"
    ),
) -> None:
    """Watch Metal sources and regenerate the enums on every change.

    Example: shader-enums watch Shaders/ -o ShaderEnums.generated.swift
    """
    _configure_logging(verbose)

    try:
        collect_shader_files(inputs)
    except DocumentReadError as e:
        logger.error(f"Cannot watch shader sources: {e}")
        raise typer.Exit(EXIT_INPUT_ERROR) from e

    handler = ShaderChangeHandler()
    observer = watchdog.observers.Observer()
    for path in inputs:
        abs_path = os.path.abspath(path)
        if os.path.isdir(abs_path):
            observer.schedule(handler, path=abs_path, recursive=True)
        else:
            # Watch the file's directory, not the file itself
            directory = os.path.dirname(abs_path)
            observer.schedule(handler, path=directory, recursive=False)

    _regenerate(inputs, output, module_name, skip_unreadable)
    try:
        observer.start()
    except OSError as e:
        logger.error(f"Cannot watch shader sources: {e}")
        raise typer.Exit(EXIT_INPUT_ERROR) from e
    logger.info("Watching shader sources for changes (Ctrl+C to stop)...")

    try:
        while True:
            time.sleep(interval)
            if handler.needs_regenerate:
                handler.needs_regenerate = False
                _regenerate(inputs, output, module_name, skip_unreadable)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, stopping...")
    finally:
        observer.stop()
        observer.join()


if __name__ == "__main__":
    app()
