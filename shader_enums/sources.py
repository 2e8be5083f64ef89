"""
Shader source discovery, loading and output writing.

This is the only part of the package that touches the filesystem. It turns
command-line paths into source documents and writes the generated Swift file
without ever leaving a partially written file behind.
"""

import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

from shader_enums.generator.constants import SHADER_FILE_SUFFIX
from shader_enums.generator.errors import DocumentReadError, OutputWriteError
from shader_enums.generator.models import SourceDocument


def collect_shader_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand input paths into a sorted list of shader files.

    Files are taken as given. Directories are searched recursively for
    `.metal` files.

    Args:
        paths: Files and directories to collect from

    Returns:
        De-duplicated, sorted list of shader file paths

    Raises:
        DocumentReadError: If a path does not exist
    """
    files: set[Path] = set()
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            found = {p for p in path.rglob(f"*{SHADER_FILE_SUFFIX}") if p.is_file()}
            logger.debug(f"Collected {len(found)} shader file(s) from {path}")
            files.update(found)
        elif path.exists():
            files.add(path)
        else:
            raise DocumentReadError(str(path), "no such file or directory")
    return sorted(files)


def load_documents(
    paths: Iterable[str | Path], skip_unreadable: bool = False
) -> Iterator[SourceDocument]:
    """Read shader files as source documents.

    Args:
        paths: Shader files to read
        skip_unreadable: Log and skip files that cannot be read instead of
            failing

    Yields:
        One document per readable file, with the path as its origin

    Raises:
        DocumentReadError: If a file cannot be read and skip_unreadable is False
    """
    for path in paths:
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            if not skip_unreadable:
                raise DocumentReadError(str(path), str(e)) from e
            logger.warning(f"Skipping unreadable shader source {path}: {e}")
            continue
        yield SourceDocument(origin=str(path), content=content)


def write_output(path: str | Path, text: str) -> None:
    """Write generated code, replacing the target file atomically.

    Args:
        path: Output file path; missing parent directories are created
        text: Generated code

    Raises:
        OutputWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            os.unlink(tmp_name)
            raise
    except OSError as e:
        raise OutputWriteError(str(path), str(e)) from e

    logger.info(f"Shader enums written to {path}")
