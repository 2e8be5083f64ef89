"""
Data models and structures for the shader enum generator.

This module contains the dataclass definitions used throughout the pipeline
to represent source documents, marker comments and discovered declarations.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SourceDocument:
    """Shader source text together with where it came from.

    Attributes:
        origin: Identifier used in diagnostics, usually the file path
        content: Raw shader source
    """

    origin: str
    content: str


class Qualifier(Enum):
    """Function qualifiers marking a shader entry point."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"
    KERNEL = "kernel"
    COMPUTE = "compute"


@dataclass(frozen=True)
class MarkerComment:
    """A `//MTLShaderGroup: Name` line found in comment-stripped source.

    Attributes:
        line: 0-based line number in the comment-stripped text
        group_name: Raw group name candidate following the prefix
    """

    line: int
    group_name: str


@dataclass(frozen=True)
class Declaration:
    """A top-level shader function declaration.

    Attributes:
        qualifier: Role qualifier the declaration starts with
        name: Function name
        line: 0-based line of the qualifier in the comment-stripped text
    """

    qualifier: Qualifier
    name: str
    line: int
