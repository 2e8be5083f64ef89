"""
Shader enum generation pipeline.

This module provides the top-level interface for turning Metal shader sources
into generated Swift enums: comments are stripped, declarations extracted,
groups resolved and the merged result emitted.
"""

from collections.abc import Iterable

from loguru import logger

from shader_enums.generator.emitter import generate
from shader_enums.generator.errors import (
    DocumentReadError,
    InvalidGroupNameError,
    OutputWriteError,
    ShaderEnumError,
)
from shader_enums.generator.extractor import extract
from shader_enums.generator.groups import (
    GroupKind,
    GroupTable,
    ShaderGroup,
    resolve_groups,
)
from shader_enums.generator.models import (
    Declaration,
    MarkerComment,
    Qualifier,
    SourceDocument,
)
from shader_enums.generator.scanner import strip_comments

DocumentInput = SourceDocument | tuple[str, str]


def _as_document(document: DocumentInput) -> SourceDocument:
    if isinstance(document, SourceDocument):
        return document
    origin, content = document
    return SourceDocument(origin=origin, content=content)


def process_document(document: DocumentInput) -> GroupTable:
    """Run the per-document part of the pipeline.

    Args:
        document: Source document or (origin, content) tuple

    Returns:
        The document's functions grouped by group

    Raises:
        InvalidGroupNameError: If a marker comment names an invalid group
    """
    document = _as_document(document)
    declarations, markers = extract(strip_comments(document.content))
    logger.debug(
        f"{document.origin}: {len(declarations)} declarations, "
        f"{len(markers)} group markers"
    )
    return resolve_groups(declarations, markers, document_id=document.origin)


def run(documents: Iterable[DocumentInput], module_name: str) -> str:
    """Generate Swift shader enums from a set of shader sources.

    All documents are processed before anything is generated, so an error in
    any of them means no output at all.

    Args:
        documents: Source documents or (origin, content) tuples
        module_name: Prefix of the generated container enum

    Returns:
        Generated Swift source

    Raises:
        InvalidGroupNameError: If a marker comment names an invalid group
        DocumentReadError: Passed through from a document loader
    """
    table = GroupTable()
    count = 0
    for document in documents:
        table.merge(process_document(document))
        count += 1

    if not table:
        logger.warning(f"No shader functions found in {count} document(s)")
    else:
        logger.info(
            f"Found {sum(len(names) for _, names in table)} shader function(s) "
            f"in {len(table)} group(s) across {count} document(s)"
        )

    return generate(table, module_name)


__all__ = [
    "Declaration",
    "DocumentReadError",
    "GroupKind",
    "GroupTable",
    "InvalidGroupNameError",
    "MarkerComment",
    "OutputWriteError",
    "Qualifier",
    "ShaderEnumError",
    "ShaderGroup",
    "SourceDocument",
    "extract",
    "generate",
    "process_document",
    "resolve_groups",
    "run",
    "strip_comments",
]
