from enum_editor.core import (
    BlockSpan, BraceCounting, EditorConfig, EnumEntry, RewriteStatus,
    delete_block, find_insert_indent, insert_block, locate, scan, update_block
)


def test_insert_into_empty_document():
    result = insert_block("Shape", [EnumEntry("Square")], [])

    assert result.success
    assert result.lines == ["", "public enum Shape", "{", "    Square,", "}"]


def test_delete_keeps_non_blank_previous_line(namespace_lines):
    result = delete_block("Color", namespace_lines)

    assert result.success
    assert result.span == BlockSpan(2, 3, 6)
    assert result.lines == ["namespace N", "{", "}"]


def test_delete_removes_blank_line_before_block():
    lines = [
        "class X",
        "{",
        "    int a;",
        "",
        "    enum E",
        "    {",
        "        A,",
        "    }",
        "}",
    ]

    result = delete_block("E", lines)

    assert result.lines == ["class X", "{", "    int a;", "}"]
    assert locate("E", result.lines) is None


def test_update_uses_supplied_order(namespace_lines):
    entries = [EnumEntry("Green", "2", "ok"), EnumEntry("Red")]

    result = update_block("Color", entries, namespace_lines)

    assert result.success
    assert result.lines == [
        "namespace N",
        "{",
        "    public enum Color",
        "    {",
        "        Green = 2, //ok",
        "        Red,",
        "    }",
        "}",
    ]


def test_update_skips_blank_names(namespace_lines):
    entries = [EnumEntry("Red"), EnumEntry("  ", "4"), EnumEntry("Blue", " ", " ")]

    result = update_block("Color", entries, namespace_lines)

    assert result.lines[4:6] == ["        Red,", "        Blue,"]


def test_update_is_idempotent(unity_lines):
    entries = [EnumEntry("Red"), EnumEntry("Blue", "7", " primary")]

    once = update_block("Color", entries, unity_lines).lines
    twice = update_block("Color", entries, once).lines

    assert once == twice


def test_update_does_not_touch_other_blocks(unity_lines):
    state_span = locate("State", unity_lines)
    color_span = locate("Color", unity_lines)

    result = update_block("Color", [EnumEntry("Only")], unity_lines)

    assert result.lines[:color_span.decl_line] == unity_lines[:color_span.decl_line]
    new_state_span = locate("State", result.lines)
    assert new_state_span == state_span
    assert result.lines[-1] == unity_lines[-1]
    assert scan(result.lines)["Color"].entry_names() == ["Only"]


def test_update_does_not_touch_following_blocks(unity_lines):
    state_span = locate("State", unity_lines)
    color_span = locate("Color", unity_lines)

    entries = [EnumEntry("Idle"), EnumEntry("Running", "5", " fast"), EnumEntry("Jumping")]
    result = update_block("State", entries, unity_lines)

    # State вырос на одну строку, всё после него сдвинулось без изменений
    shift = 1
    assert result.lines[:state_span.decl_line] == unity_lines[:state_span.decl_line]
    assert result.lines[state_span.close_line + 1 + shift:] == unity_lines[state_span.close_line + 1:]
    new_color_span = locate("Color", result.lines)
    assert new_color_span.decl_line == color_span.decl_line + shift
    assert scan(result.lines)["Color"] == scan(unity_lines)["Color"]


def test_update_keeps_attributes_on_declaration_line():
    lines = [
        "namespace N",
        "{",
        "    [Flags] public enum Perm",
        "    {",
        "        Read = 1,",
        "        Write = 2,",
        "    }",
        "}",
    ]

    result = update_block("Perm", [EnumEntry("Read", "1"), EnumEntry("Write", "2")], lines)

    assert result.lines == lines


def test_update_keeps_several_attributes():
    lines = ["[Flags][Serializable] internal enum Perm { Read = 1 }"]

    result = update_block("Perm", [EnumEntry("Read", "1")], lines)

    assert result.lines[0] == "[Flags][Serializable] public enum Perm"


def test_not_found_returns_input_unchanged(namespace_lines):
    original = list(namespace_lines)

    updated = update_block("Shape", [EnumEntry("Square")], namespace_lines)
    deleted = delete_block("Shape", namespace_lines)

    assert updated.status is RewriteStatus.NOT_FOUND
    assert deleted.status is RewriteStatus.NOT_FOUND
    assert not updated.success
    assert updated.lines is namespace_lines
    assert deleted.lines == original
    assert "not found" in updated.error


def test_operations_do_not_mutate_input(namespace_lines):
    original = list(namespace_lines)

    update_block("Color", [EnumEntry("A")], namespace_lines)
    insert_block("Shape", [EnumEntry("B")], namespace_lines)
    delete_block("Color", namespace_lines)

    assert namespace_lines == original


def test_insert_then_scan_round_trip(namespace_lines):
    entries = [EnumEntry("Square"), EnumEntry("", "3"), EnumEntry("Circle", "2", "round")]

    result = insert_block("Shape", entries, namespace_lines)

    assert result.lines[len(namespace_lines):] == [
        "",
        "    public enum Shape",
        "    {",
        "        Square,",
        "        Circle = 2, //round",
        "    }",
    ]
    assert scan(result.lines)["Shape"].entries == [EnumEntry("Square"), EnumEntry("Circle", "2", "round")]


def test_insert_existing_name_is_refused(namespace_lines):
    result = insert_block("Color", [EnumEntry("X")], namespace_lines)

    assert result.status is RewriteStatus.ALREADY_EXISTS
    assert result.lines is namespace_lines


def test_find_insert_indent_variants():
    assert find_insert_indent([]) == ""
    assert find_insert_indent(["class A", "{", "}"]) == ""
    assert find_insert_indent(["namespace Game.Data;", "", "class A {}"]) == ""
    assert find_insert_indent(["namespace A", "{", "}", "  namespace B {", "  }"]) == "      "
    # namespace внутри класса не считается
    assert find_insert_indent(["class A", "{", "    namespace B", "    {", "    }", "}"]) == ""


def test_custom_indent_and_modifier():
    config = EditorConfig(indent_unit="\t", access_modifier="internal")

    result = insert_block("Shape", [EnumEntry("Square")], ["namespace N {", "}"], config)

    assert result.lines[3:] == ["\tinternal enum Shape", "\t{", "\t\tSquare,", "\t}"]


def test_legacy_brace_counting_config():
    lines = ["enum A", "{", "    X, // {", "}"]
    legacy = EditorConfig(brace_counting=BraceCounting.PER_LINE)

    assert update_block("A", [EnumEntry("Y")], lines, legacy).status is RewriteStatus.NOT_FOUND
    assert update_block("A", [EnumEntry("Y")], lines).success
