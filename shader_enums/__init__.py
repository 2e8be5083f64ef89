from shader_enums.generator import (
    Declaration,
    DocumentReadError,
    GroupKind,
    GroupTable,
    InvalidGroupNameError,
    MarkerComment,
    OutputWriteError,
    Qualifier,
    ShaderEnumError,
    ShaderGroup,
    SourceDocument,
    extract,
    generate,
    process_document,
    resolve_groups,
    run,
    strip_comments,
)

__version__ = "0.1.0"


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
