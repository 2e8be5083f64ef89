"""
Exceptions and error handling for the shader enum generator.

This module defines the exceptions raised while turning shader sources into
generated enums. The core pipeline never exits the process; callers such as
the command-line interface decide how to report these errors.
"""


class ShaderEnumError(Exception):
    """Base class for all errors raised by the shader enum generator."""


class InvalidGroupNameError(ShaderEnumError):
    """Exception raised when a marker comment names an invalid group.

    Group names become Swift type names, so they may only contain basic Latin
    letters. The error records where the offending marker was found.

    Examples:
        >>> raise InvalidGroupNameError("Shaders.metal", 3, "Lighting_2", "_")
        InvalidGroupNameError: Invalid shader group name 'Lighting_2' in
        Shaders.metal at line 4: unexpected character '_'
    """

    def __init__(
        self,
        document_id: str,
        line: int,
        group_name: str,
        character: str | None,
        reason: str | None = None,
    ):
        """Initialize the exception with the location of the bad marker.

        Args:
            document_id: Origin of the document containing the marker
            line: 0-based line of the marker in the comment-stripped source
            group_name: The group name as written in the marker
            character: First invalid character, or None if the name has none
            reason: Explanation overriding the one derived from `character`
        """
        self.document_id = document_id
        self.line = line
        self.group_name = group_name
        self.character = character

        if reason is None:
            if character is None:
                reason = "group name must not be empty"
            else:
                reason = f"unexpected character {character!r}"
        self.reason = reason

        super().__init__(
            f"Invalid shader group name {group_name!r} in {document_id} "
            f"at line {line + 1}: {reason}"
        )


class DocumentReadError(ShaderEnumError):
    """Exception raised when an input document cannot be found or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read shader source {path}: {reason}")


class OutputWriteError(ShaderEnumError):
    """Exception raised when the generated file cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output to {path}: {reason}")
