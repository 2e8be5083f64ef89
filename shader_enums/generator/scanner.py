"""
Comment removal for Metal shader sources.

This module strips line and block comments from shader source text while
leaving string literals and `//MTLShaderGroup:` marker comments untouched,
then normalizes the result so that later stages see a canonical text.
"""

from enum import Enum, auto

from shader_enums.generator.constants import MARKER_PREFIX

STRING_DELIMITERS = ('"', "'")


class ScanState(Enum):
    """States of the comment scanner."""

    CODE = auto()
    IN_STRING = auto()
    IN_LINE_COMMENT = auto()
    IN_BLOCK_COMMENT = auto()


def _line_end(text: str, start: int) -> int:
    """Return the index of the newline ending the line at `start`, or len(text)."""
    end = text.find("\n", start)
    return len(text) if end == -1 else end


def _is_marker(text: str, start: int) -> bool:
    """Check whether the rest of a `//` comment starting before `start` is a marker."""
    return text[start : _line_end(text, start)].lstrip().startswith(MARKER_PREFIX)


def _is_digit_separator(text: str, i: int) -> bool:
    """Check whether the quote at `i` separates digits of a number like `1'000`."""
    start = i
    while start > 0 and (text[start - 1].isalnum() or text[start - 1] in "_."):
        start -= 1
    if start == i or not text[start].isdigit():
        return False
    return i + 1 < len(text) and text[i + 1].isalnum()


def normalize_lines(text: str) -> str:
    """Strip trailing whitespace from every line and drop the empty ones.

    Args:
        text: Text to normalize

    Returns:
        Lines joined with a single newline, without a trailing newline
    """
    lines = (line.rstrip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def strip_comments(text: str) -> str:
    """Remove all comments from shader source except marker comments.

    Line (`//`, `///`) and block (`/* ... */`) comments are removed in a single
    pass. Quoted strings are copied verbatim, including anything that looks
    like a comment inside them. A `//` comment whose text starts with the
    `MTLShaderGroup:` prefix is kept as written. Block comments do not nest.
    A quote inside a number (`1'000`, `0xFF'FF`) is a digit separator, not
    the start of a literal.

    The scanner never fails: an unterminated string or block comment simply
    runs to the end of the input.

    Args:
        text: Raw shader source

    Returns:
        Comment-free source with trailing whitespace and blank lines removed
    """
    out: list[str] = []
    state = ScanState.CODE
    delimiter = ""
    i = 0
    n = len(text)

    while i < n:
        if state is ScanState.CODE:
            ch = text[i]
            pair = text[i : i + 2]
            if ch in STRING_DELIMITERS and not _is_digit_separator(text, i):
                state = ScanState.IN_STRING
                delimiter = ch
                out.append(ch)
                i += 1
            elif pair == "//":
                if _is_marker(text, i + 2):
                    end = _line_end(text, i)
                    out.append(text[i:end])
                    i = end
                else:
                    state = ScanState.IN_LINE_COMMENT
                    i += 2
            elif pair == "/*":
                state = ScanState.IN_BLOCK_COMMENT
                i += 2
            else:
                out.append(ch)
                i += 1

        elif state is ScanState.IN_STRING:
            ch = text[i]
            if ch == "\\":
                # The escaped character never closes the string
                out.append(text[i : i + 2])
                i += 2
                continue
            out.append(ch)
            i += 1
            if ch == delimiter:
                state = ScanState.CODE

        elif state is ScanState.IN_LINE_COMMENT:
            # Drop everything up to the newline, which is kept
            i = _line_end(text, i)
            state = ScanState.CODE

        else:
            end = text.find("*/", i)
            i = n if end == -1 else end + 2
            state = ScanState.CODE

    return normalize_lines("".join(out))
