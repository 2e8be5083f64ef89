"""Swift code emitter that generates shader enums from a group table."""

from shader_enums.generator.code_block import CodeBlock
from shader_enums.generator.constants import (
    CONTAINER_SUFFIX,
    FUNCTION_TYPE,
    GENERATED_HEADER,
    LIBRARY_TYPE,
    NO_SHADERS_SENTINEL,
    SWIFT_IMPORT,
    SWIFT_RESERVED_WORDS,
)
from shader_enums.generator.groups import GroupTable


def swift_identifier(name: str) -> str:
    """Escape a case or type name that collides with a Swift keyword."""
    if name in SWIFT_RESERVED_WORDS:
        return f"`{name}`"
    return name


class SwiftEmitter:
    """Generates Swift enums and MTLLibrary accessors for a module."""

    def __init__(self, module_name: str):
        self.module_name = module_name

    @property
    def container_name(self) -> str:
        return f"{self.module_name}{CONTAINER_SUFFIX}"

    def emit(self, table: GroupTable) -> str:
        """Generate the complete Swift source for a group table."""
        if not table:
            return NO_SHADERS_SENTINEL

        code = CodeBlock()
        code.add_line(GENERATED_HEADER)
        code.add_line()
        code.add_line(SWIFT_IMPORT)
        code.add_line()

        with code.block(f"public enum {self.container_name}"):
            for index, (group, names) in enumerate(table):
                if index:
                    code.add_line()
                enum_name = swift_identifier(group.display_name)
                with code.block(f"public enum {enum_name}: String, CaseIterable"):
                    for name in names:
                        code.add_line(f'case {swift_identifier(name)} = "{name}"')

        for group in table.groups():
            code.add_line()
            enum_name = swift_identifier(group.display_name)
            self._emit_accessor(code, f"{self.container_name}.{enum_name}")

        return code.get_code()

    def _emit_accessor(self, code: CodeBlock, enum_name: str) -> None:
        with code.block(f"extension {LIBRARY_TYPE}"):
            signature = (
                f"public func makeFunction(_ shader: {enum_name}) -> {FUNCTION_TYPE}?"
            )
            with code.block(signature):
                code.add_line("makeFunction(name: shader.rawValue)")


def generate(table: GroupTable, module_name: str) -> str:
    """Generate Swift enums for the functions in a group table.

    Args:
        table: Function names collected per group
        module_name: Prefix of the outer container enum

    Returns:
        Generated Swift source, or the "no shaders found" line for an empty table
    """
    return SwiftEmitter(module_name).emit(table)
