"""
Declaration extraction for comment-stripped Metal shader sources.

This module tokenizes comment-stripped source text and finds top-level shader
function declarations, i.e. a role qualifier at the start of a line followed
by a return type, the function name and an opening parenthesis. Group marker
comments are located in the same pass.
"""

import re
from collections.abc import Iterator
from enum import Enum, auto
from itertools import islice
from typing import NamedTuple

from loguru import logger

from shader_enums.generator.constants import MARKER_PREFIX, QUALIFIER_KEYWORDS
from shader_enums.generator.models import Declaration, MarkerComment, Qualifier


class TokenKind(Enum):
    """Kinds of tokens produced by the signature tokenizer."""

    NEWLINE = auto()
    SKIP = auto()
    COMMENT = auto()
    STRING = auto()
    ATTRIBUTE = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    LPAREN = auto()
    TYPE_PUNCT = auto()
    OTHER = auto()


class Token(NamedTuple):
    """A token with the 0-based line it starts on."""

    kind: TokenKind
    value: str
    line: int
    first_on_line: bool


# Order matters: earlier alternatives win at the same position
TOKEN_SPECIFICATION: list[tuple[TokenKind, str]] = [
    (TokenKind.NEWLINE, r"\n"),
    (TokenKind.SKIP, r"[ \t\r\f\v]+"),
    (TokenKind.COMMENT, r"//[^\n]*"),
    (TokenKind.STRING, r'"(?:\\.|[^"\\])*"?|\'(?:\\.|[^\'\\])*\'?'),
    (TokenKind.ATTRIBUTE, r"\[\[.*?\]\]"),
    (TokenKind.IDENTIFIER, r"[A-Za-z_]\w*"),
    (TokenKind.NUMBER, r"\d(?:[\w.]|'(?=\w))*"),
    (TokenKind.LPAREN, r"\("),
    (TokenKind.TYPE_PUNCT, r"::|[<>,:*&]"),
    (TokenKind.OTHER, r"."),
]
TOKEN_RE = re.compile(
    "|".join(f"(?P<{kind.name}>{pattern})" for kind, pattern in TOKEN_SPECIFICATION),
    re.DOTALL,
)

# Tokens allowed between the qualifier and the opening parenthesis
SIGNATURE_TOKENS = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.NUMBER,
        TokenKind.ATTRIBUTE,
        TokenKind.TYPE_PUNCT,
    }
)


def tokenize(text: str) -> Iterator[Token]:
    """Split comment-stripped source into tokens, dropping whitespace.

    Args:
        text: Comment-stripped shader source

    Yields:
        Tokens in source order, each tagged with its starting line
    """
    line = 0
    first_on_line = True
    for match in TOKEN_RE.finditer(text):
        kind = TokenKind[match.lastgroup or "OTHER"]
        value = match.group()
        if kind is TokenKind.NEWLINE:
            line += 1
            first_on_line = True
            continue
        if kind is TokenKind.SKIP:
            continue
        yield Token(kind, value, line, first_on_line)
        first_on_line = False
        # Strings and attributes may span lines
        line += value.count("\n")


def find_markers(text: str) -> list[MarkerComment]:
    """Find group marker comments, one per line at most.

    Args:
        text: Comment-stripped shader source

    Returns:
        Markers in line order with their raw group name candidates
    """
    markers: list[MarkerComment] = []
    for index, line in enumerate(text.split("\n")):
        stripped = line.strip()
        if not stripped.startswith("//"):
            continue
        rest = stripped[2:].lstrip()
        if rest.startswith(MARKER_PREFIX):
            marker = MarkerComment(line=index, group_name=rest[len(MARKER_PREFIX) :])
            logger.debug(f"Found group marker at line {index}: {marker.group_name!r}")
            markers.append(marker)
    return markers


def _match_declaration(tokens: list[Token], start: int) -> Declaration | None:
    """Try to read a declaration whose qualifier is at `tokens[start]`."""
    qualifier = tokens[start]
    signature: list[Token] = []
    for token in islice(tokens, start + 1, None):
        if token.kind is TokenKind.LPAREN:
            break
        if token.kind not in SIGNATURE_TOKENS:
            return None
        signature.append(token)
    else:
        return None

    # The name is the identifier right before "(", preceded by a return type
    if not signature or signature[-1].kind is not TokenKind.IDENTIFIER:
        return None
    name = signature.pop().value
    if not name or not any(t.kind is TokenKind.IDENTIFIER for t in signature):
        return None

    return Declaration(
        qualifier=Qualifier(qualifier.value), name=name, line=qualifier.line
    )


def extract(text: str) -> tuple[list[Declaration], list[MarkerComment]]:
    """Extract shader function declarations and group markers.

    Args:
        text: Comment-stripped shader source

    Returns:
        Tuple of (declarations in source order, markers in line order)
    """
    tokens = list(tokenize(text))
    declarations: list[Declaration] = []

    for index, token in enumerate(tokens):
        if (
            token.kind is TokenKind.IDENTIFIER
            and token.first_on_line
            and token.value in QUALIFIER_KEYWORDS
        ):
            declaration = _match_declaration(tokens, index)
            if declaration is not None:
                logger.debug(
                    f"Collected declaration: {declaration.name}, "
                    f"qualifier: {declaration.qualifier.value}, "
                    f"line: {declaration.line}"
                )
                declarations.append(declaration)

    return declarations, find_markers(text)
