"""Indented code block generation."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from shader_enums.generator.constants import INDENT


@dataclass
class CodeBlock:
    """Manages Swift code block generation."""

    indent_level: int = 0
    lines: list[str] = field(default_factory=list)

    @contextmanager
    def block(self, header: str) -> Iterator[None]:
        """Context manager for a braced block opened on the header line."""
        self.add_line(f"{header} {{")
        self.indent_level += 1
        try:
            yield
        finally:
            self.indent_level -= 1
            self.add_line("}")

    def add_line(self, line: str = "") -> None:
        """Add line with proper indentation; never adds two blank lines in a row."""
        if not line:
            if self.lines and self.lines[-1]:
                self.lines.append("")
            return

        self.lines.append(f"{INDENT * self.indent_level}{line}")

    def get_code(self) -> str:
        """Get generated code, terminated by a newline."""
        return "\n".join(self.lines) + "\n"
