from enum_editor.core import BlockSpan, BraceCounting, describe_failure, find_declaration, locate


def test_locate_enum_inside_namespace(namespace_lines):
    span = locate("Color", namespace_lines)

    assert span == BlockSpan(decl_line=2, open_line=3, close_line=6)
    assert len(span) == 5


def test_locate_matches_whole_word_only():
    lines = [
        "enum ColorMode",
        "{",
        "    A,",
        "}",
        "enum Color",
        "{",
        "    B,",
        "}",
    ]

    assert locate("Color", lines) == BlockSpan(4, 5, 7)
    assert locate("ColorMode", lines) == BlockSpan(0, 1, 3)
    assert locate("Colo", lines) is None


def test_locate_missing_enum_returns_none(namespace_lines):
    assert locate("Shape", namespace_lines) is None
    assert describe_failure("Shape", namespace_lines) == "Enum 'Shape' not found"


def test_declaration_without_opening_brace_is_not_found():
    lines = ["public enum Color", "    Red,"]

    assert find_declaration("Color", lines) == 0
    assert locate("Color", lines) is None
    assert "malformed" in describe_failure("Color", lines)


def test_unbalanced_block_is_not_found():
    lines = ["public enum Color", "{", "    Red,"]

    assert locate("Color", lines) is None
    assert "closing brace" in describe_failure("Color", lines)


def test_access_modifiers_and_attributes():
    lines = [
        "    [Flags] public enum Perm",
        "    {",
        "        Read = 1,",
        "    }",
        "    internal enum Small : byte",
        "    {",
        "        One,",
        "    }",
    ]

    assert locate("Perm", lines) == BlockSpan(0, 1, 3)
    assert locate("Small", lines) == BlockSpan(4, 5, 7)


def test_commented_out_declaration_is_ignored():
    lines = [
        "// enum Color",
        "enum Other",
        "{",
        "}",
    ]

    assert find_declaration("Color", lines) is None


def test_single_line_enum():
    lines = ["public enum Dir { Up, Down }", "class X {}"]

    assert locate("Dir", lines) == BlockSpan(0, 0, 0)
    assert locate("Dir", lines, BraceCounting.PER_LINE) == BlockSpan(0, 0, 0)


def test_brace_in_comment_per_character_vs_per_line():
    lines = [
        "enum A",
        "{",
        "    X, // {",
        "}",
    ]

    assert locate("A", lines, BraceCounting.PER_CHARACTER) == BlockSpan(0, 1, 3)
    # Построчный счётчик видит '{' в комментарии и не находит конец блока
    assert locate("A", lines, BraceCounting.PER_LINE) is None


def test_code_after_block_does_not_affect_span():
    lines = [
        "enum A",
        "{",
        "    X,",
        "}",
        "class B { void F() {",
        "} }",
    ]

    assert locate("A", lines, BraceCounting.PER_LINE) == BlockSpan(0, 1, 3)
    assert locate("A", lines, BraceCounting.PER_CHARACTER) == BlockSpan(0, 1, 3)
