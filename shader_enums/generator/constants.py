"""
Constants and predefined values for the shader enum generator.

This module holds the fixed strings shared by the scanner, extractor and
emitter, including the marker comment prefix, the generated file header and
the Swift keywords that need escaping when used as enum case names.
"""

# Marker comment overriding the group of the declarations that follow it
MARKER_PREFIX = "MTLShaderGroup:"
MARKER_COMMENT = f"//{MARKER_PREFIX}"

# Qualifier keywords recognized at the start of a top-level declaration
QUALIFIER_KEYWORDS = ("vertex", "fragment", "kernel", "compute")

# Display names of the qualifier-derived groups
VERTEX_GROUP_NAME = "MTLVertexShader"
FRAGMENT_GROUP_NAME = "MTLFragmentShader"
COMPUTE_GROUP_NAME = "MTLComputeShader"
UNKNOWN_GROUP_NAME = "MTLUnknownShader"

# Generated output
NO_SHADERS_SENTINEL = "// No shaders found.\n"
GENERATED_HEADER = "// Generated by ShaderEnumGenerator"
SWIFT_IMPORT = "import Metal"
CONTAINER_SUFFIX = "Shaders"
LIBRARY_TYPE = "MTLLibrary"
FUNCTION_TYPE = "MTLFunction"
INDENT = "    "

# Caller-facing defaults
DEFAULT_MODULE_NAME = "ShaderEnumGenerator"
SHADER_FILE_SUFFIX = ".metal"
UNKNOWN_DOCUMENT = "<unknown>"

# Swift keywords that cannot be used as a bare identifier
SWIFT_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        # Declarations
        "associatedtype",
        "class",
        "deinit",
        "enum",
        "extension",
        "fileprivate",
        "func",
        "import",
        "init",
        "inout",
        "internal",
        "let",
        "open",
        "operator",
        "private",
        "precedencegroup",
        "protocol",
        "public",
        "rethrows",
        "static",
        "struct",
        "subscript",
        "typealias",
        "var",
        # Statements
        "break",
        "case",
        "catch",
        "continue",
        "default",
        "defer",
        "do",
        "else",
        "fallthrough",
        "for",
        "guard",
        "if",
        "in",
        "repeat",
        "return",
        "switch",
        "throw",
        "where",
        "while",
        # Expressions and types
        "Any",
        "as",
        "await",
        "false",
        "is",
        "nil",
        "self",
        "Self",
        "super",
        "throws",
        "true",
        "try",
    }
)

# Names a nested Swift type cannot take, even in backticks
SWIFT_RESERVED_TYPE_NAMES: frozenset[str] = frozenset({"Type", "Protocol"})
