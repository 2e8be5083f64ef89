"""Tests for the generator errors module."""

import pytest

from shader_enums.generator.errors import (
    DocumentReadError,
    InvalidGroupNameError,
    OutputWriteError,
    ShaderEnumError,
)


def test_invalid_group_name_message():
    """Test that the message names the document, line and character."""
    # Act
    error = InvalidGroupNameError("Shaders.metal", 3, "Lighting_2", "_")

    # Assert
    message = str(error)
    assert "Shaders.metal" in message
    assert "line 4" in message
    assert "'Lighting_2'" in message
    assert "'_'" in message


def test_empty_group_name_message():
    """Test the message for a name with no characters at all."""
    error = InvalidGroupNameError("a.metal", 0, " ", None)
    assert "must not be empty" in str(error)


def test_group_name_message_with_explicit_reason():
    """Test that an explicit reason replaces the derived one."""
    error = InvalidGroupNameError("a.metal", 1, "Type", None, reason="reserved")

    assert str(error).endswith("at line 2: reserved")
    assert error.reason == "reserved"


@pytest.mark.parametrize(
    "error",
    [
        InvalidGroupNameError("a.metal", 0, "x_", "_"),
        DocumentReadError("a.metal", "permission denied"),
        OutputWriteError("out.swift", "disk full"),
    ],
)
def test_error_inheritance(error):
    """Test that all errors share the package base class."""
    assert isinstance(error, ShaderEnumError)
    assert isinstance(error, Exception)


def test_document_read_error_message():
    """Test that read errors carry the path and reason."""
    error = DocumentReadError("a.metal", "permission denied")
    assert error.path == "a.metal"
    assert str(error) == "Cannot read shader source a.metal: permission denied"
