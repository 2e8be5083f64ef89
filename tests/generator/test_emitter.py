"""Tests for the Swift code emitter."""

from shader_enums.generator.code_block import CodeBlock
from shader_enums.generator.emitter import SwiftEmitter, generate, swift_identifier
from shader_enums.generator.groups import GroupTable, ShaderGroup
from shader_enums.generator.models import Qualifier


def _table(*entries):
    table = GroupTable()
    for group, name in entries:
        table.add(group, name)
    return table


def test_empty_table_gives_sentinel():
    """Test that an empty table produces only the sentinel line."""
    assert generate(GroupTable(), "Mod") == "// No shaders found.\n"


def test_generate_full_output():
    """Test the complete generated file for two default groups."""
    # Arrange
    table = _table(
        (ShaderGroup.for_qualifier(Qualifier.VERTEX), "v1"),
        (ShaderGroup.for_qualifier(Qualifier.FRAGMENT), "f1"),
    )

    # Act
    code = generate(table, "Mod")

    # Assert
    assert code == (
        "// Generated by ShaderEnumGenerator\n"
        "\n"
        "import Metal\n"
        "\n"
        "public enum ModShaders {\n"
        "    public enum MTLFragmentShader: String, CaseIterable {\n"
        '        case f1 = "f1"\n'
        "    }\n"
        "\n"
        "    public enum MTLVertexShader: String, CaseIterable {\n"
        '        case v1 = "v1"\n'
        "    }\n"
        "}\n"
        "\n"
        "extension MTLLibrary {\n"
        "    public func makeFunction(_ shader: ModShaders.MTLFragmentShader)"
        " -> MTLFunction? {\n"
        "        makeFunction(name: shader.rawValue)\n"
        "    }\n"
        "}\n"
        "\n"
        "extension MTLLibrary {\n"
        "    public func makeFunction(_ shader: ModShaders.MTLVertexShader)"
        " -> MTLFunction? {\n"
        "        makeFunction(name: shader.rawValue)\n"
        "    }\n"
        "}\n"
    )


def test_members_are_sorted():
    """Test that enum members are sorted by name, uppercase first."""
    # Arrange
    group = ShaderGroup.custom("Post")
    table = _table((group, "blur"), (group, "Bloom"), (group, "aberration"))

    # Act
    code = generate(table, "App")

    # Assert
    bloom = code.index('case Bloom = "Bloom"')
    aberration = code.index('case aberration = "aberration"')
    blur = code.index('case blur = "blur"')
    assert bloom < aberration < blur


def test_custom_groups_are_nested_in_container():
    """Test that custom groups become nested enums with their own name."""
    table = _table((ShaderGroup.custom("Lighting"), "k1"))
    code = generate(table, "Renderer")

    assert "public enum RendererShaders {" in code
    assert "    public enum Lighting: String, CaseIterable {" in code
    assert "makeFunction(_ shader: RendererShaders.Lighting)" in code


def test_reserved_words_are_escaped():
    """Test that Swift keywords are escaped in case names but not raw values."""
    table = _table((ShaderGroup.for_qualifier(Qualifier.KERNEL), "repeat"))
    code = generate(table, "Mod")

    assert 'case `repeat` = "repeat"' in code


def test_keyword_group_names_are_escaped():
    """Test that a keyword group name is escaped in its enum and accessor."""
    # Arrange
    table = _table(
        (ShaderGroup.custom("enum"), "k"),
        (ShaderGroup.custom("Self"), "v"),
    )

    # Act
    code = generate(table, "App")

    # Assert
    assert "    public enum `enum`: String, CaseIterable {" in code
    assert "    public enum `Self`: String, CaseIterable {" in code
    assert "makeFunction(_ shader: AppShaders.`enum`) -> MTLFunction?" in code
    assert "makeFunction(_ shader: AppShaders.`Self`) -> MTLFunction?" in code
    assert "public enum enum" not in code
    assert "AppShaders.enum)" not in code


def test_swift_identifier():
    """Test escaping of individual names."""
    assert swift_identifier("func") == "`func`"
    assert swift_identifier("funcs") == "funcs"


def test_container_name():
    """Test that the container is the module name with a fixed suffix."""
    assert SwiftEmitter("MyApp").container_name == "MyAppShaders"


class TestCodeBlock:
    """Test cases for CodeBlock."""

    def test_nested_blocks(self):
        """Test indentation of nested braced blocks."""
        # Arrange
        code = CodeBlock()

        # Act
        with code.block("outer"):
            with code.block("inner"):
                code.add_line("body")

        # Assert
        assert code.get_code() == "outer {\n    inner {\n        body\n    }\n}\n"

    def test_blank_lines_are_not_repeated(self):
        """Test that consecutive blank lines collapse and none lead the output."""
        code = CodeBlock()
        code.add_line()
        code.add_line("a")
        code.add_line()
        code.add_line()
        code.add_line("b")

        assert code.lines == ["a", "", "b"]
