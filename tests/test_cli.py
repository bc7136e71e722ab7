from enum_editor.cli import main, parse_entry_specs
from enum_editor.core import EnumEntry, InvalidNameError

import pytest


def test_list_enums(canonical_file, capsys):
    assert main([str(canonical_file), "--list", "-v"]) == 0

    out = capsys.readouterr().out
    assert "Enums in" in out
    assert "enum Color (2)" in out
    assert "Green = 2" in out


def test_show_unknown_enum(canonical_file, capsys):
    assert main([str(canonical_file), "--show", "Shape"]) == 1
    assert "not found" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "Nope.cs")]) == 1
    assert "does not exist" in capsys.readouterr().out


def test_create_with_entries(canonical_file):
    code = main([
        str(canonical_file), "--create", "Shape",
        "--entry", "Square", "--entry", "Circle = 2 //round"
    ])

    assert code == 0
    text = canonical_file.read_text(encoding="utf-8")
    assert "    public enum Shape\n    {\n        Square,\n        Circle = 2, //round\n    }\n" in text


def test_create_invalid_name_leaves_file(canonical_file, capsys):
    before = canonical_file.read_text(encoding="utf-8")

    assert main([str(canonical_file), "--create", "1Shape"]) == 1
    assert "Invalid enum name" in capsys.readouterr().out
    assert canonical_file.read_text(encoding="utf-8") == before


def test_set_reorders_entries(canonical_file):
    assert main([str(canonical_file), "--set", "Color", "-e", "Green = 2 //ok", "-e", "Red"]) == 0

    lines = canonical_file.read_text(encoding="utf-8").splitlines()
    start = lines.index("    public enum Color")
    assert lines[start + 2:start + 4] == ["        Green = 2, //ok", "        Red,"]


def test_append_rejects_existing_entry(canonical_file, capsys):
    assert main([str(canonical_file), "--append", "Color", "-e", "Red"]) == 1
    assert "already exists" in capsys.readouterr().out


def test_delete_dry_run(canonical_file, capsys):
    before = canonical_file.read_text(encoding="utf-8")

    assert main([str(canonical_file), "--delete", "Color", "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "Dry run" in out
    assert "Deleted: Color" in out
    assert canonical_file.read_text(encoding="utf-8") == before


def test_delete_unknown_enum(canonical_file):
    assert main([str(canonical_file), "--delete", "Ghost"]) == 1


def test_parse_entry_specs():
    assert parse_entry_specs(["A", "B = 3 // x"]) == [EnumEntry("A"), EnumEntry("B", "3", " x")]

    with pytest.raises(InvalidNameError):
        parse_entry_specs(["A", "A"])
    with pytest.raises(InvalidNameError):
        parse_entry_specs(["not valid;"])


def test_log_goes_to_stderr_and_log_file(canonical_file, tmp_path, capsys):
    log_path = tmp_path / "editor.log"

    assert main([str(canonical_file), "--list", "-v", "--log-file", str(log_path)]) == 0

    captured = capsys.readouterr()
    assert "Loaded 1 enums" in captured.err
    assert "Loaded 1 enums" not in captured.out
    assert "enum_editor.core.session - INFO - Loaded 1 enums" in log_path.read_text(encoding="utf-8")
