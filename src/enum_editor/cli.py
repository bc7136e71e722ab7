#!/usr/bin/env python3
"""
Enum Editor - Command Line Interface
Командная строка для редактирования перечислений в C# файлах

Использование:
    enum-editor Assets/Scripts/Types.cs --list -v
    enum-editor Types.cs --create Shape --entry Square --entry "Circle = 2 //round"
    enum-editor Types.cs --delete Shape
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .core import (
    BraceCounting, EditorConfig, EnumBlock, EnumEntry, EnumFile,
    InvalidNameError, SaveResult, is_valid_identifier, parse_entry
)
from .logging_config import setup_logging
from .utils import format_lines
from .version import get_version_string


def parse_entry_specs(specs: Sequence[str]) -> List[EnumEntry]:
    """Разбирает аргументы --entry вида 'Name = Value //comment'"""
    entries = []
    for spec in specs:
        entry = parse_entry(spec)
        if entry is None or not is_valid_identifier(entry.name):
            raise InvalidNameError(f"Invalid entry: {spec!r}")
        if any(e.name == entry.name for e in entries):
            raise InvalidNameError(f"Duplicate entry name: {entry.name!r}")
        entries.append(entry)
    return entries


def print_block(block: EnumBlock, verbose: bool = True):
    print(f"  • enum {block.name} ({len(block.entries)})")
    if not verbose:
        return
    for entry in block.entries:
        line = f"      {entry.name}"
        if entry.value:
            line += f" = {entry.value}"
        if entry.comment:
            line += f"  //{entry.comment}"
        print(line)


def print_save_result(result: SaveResult, path: Path, dry_run: bool):
    if dry_run:
        if result.changed:
            print(format_lines(result.lines))
        print("\nDry run: file not written")
    elif result.changed:
        print(f"\nSaved: {path}")
    else:
        print("\nNo changes detected to save")

    for label, names in (("Deleted", result.deleted), ("Updated", result.updated),
                         ("Added", result.inserted), ("Not found", result.missing)):
        if names:
            print(f"   {label}: {', '.join(names)}")
    for error in result.errors:
        print(f"   Error: {error}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"{get_version_string()} - редактирование enum в C# файлах без полного разбора",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s Types.cs --list -v
  %(prog)s Types.cs --show Color
  %(prog)s Types.cs --create Shape --entry Square --entry "Circle = 2 //round"
  %(prog)s Types.cs --set Color --entry Green --entry Red --dry-run
  %(prog)s Types.cs --delete Shape
        """
    )

    parser.add_argument('file', help='Путь к C# файлу')

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        '-l', '--list',
        action='store_true',
        help='Показать список перечислений (по умолчанию)'
    )
    actions.add_argument('--show', metavar='NAME', help='Показать элементы перечисления')
    actions.add_argument('--create', metavar='NAME', help='Создать новое перечисление')
    actions.add_argument('--delete', metavar='NAME', help='Удалить перечисление')
    actions.add_argument('--set', metavar='NAME', help='Заменить элементы перечисления')
    actions.add_argument('--append', metavar='NAME', help='Добавить элементы в конец перечисления')

    parser.add_argument(
        '-e', '--entry',
        action='append',
        default=[],
        metavar='SPEC',
        help='Элемент: Name, "Name = 3", "Name = 3 //comment" (можно повторять)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Показать результат без записи в файл'
    )
    parser.add_argument(
        '--legacy-braces',
        action='store_true',
        help='Считать скобки построчно (совместимость со старыми файлами)'
    )
    parser.add_argument(
        '--only-changed',
        action='store_true',
        help='Перезаписывать только изменённые перечисления'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=4,
        help='Размер отступа в пробелах (по умолчанию: 4)'
    )
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Дописывать лог в файл'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Подробный вывод'
    )

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    path = Path(args.file)
    if not path.is_file():
        print(f"Error: file does not exist: {path}")
        return 1

    config = EditorConfig(
        indent_unit=" " * args.indent,
        brace_counting=BraceCounting.PER_LINE if args.legacy_braces else BraceCounting.PER_CHARACTER,
        rewrite_unchanged=not args.only_changed
    )
    enum_file = EnumFile(path, config)

    try:
        enum_file.load()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {path}: {e}")
        return 1

    # Просмотр
    if args.show:
        if args.show not in enum_file.blocks:
            print(f"Error: enum '{args.show}' not found")
            return 1
        print_block(enum_file.get_block(args.show))
        return 0

    if not (args.create or args.delete or args.set or args.append):
        print(f"Enums in {path}: {len(enum_file.blocks)}")
        for block in enum_file.blocks.values():
            print_block(block, args.verbose)
        return 0

    # Изменения
    try:
        entries = parse_entry_specs(args.entry)

        if args.create:
            block = enum_file.create_block(args.create)
            if entries:
                block.entries = entries
        elif args.delete:
            if args.delete not in enum_file.blocks:
                print(f"Error: enum '{args.delete}' not found")
                return 1
            enum_file.remove_block(args.delete)
        else:
            name = args.set or args.append
            if name not in enum_file.blocks:
                print(f"Error: enum '{name}' not found")
                return 1
            block = enum_file.get_block(name)
            if args.set:
                enum_file.set_entries(name, entries)
            else:
                for entry in entries:
                    if entry.name in block.entry_names():
                        raise InvalidNameError(f"Entry '{entry.name}' already exists in '{name}'")
                    block.entries.append(entry)
    except InvalidNameError as e:
        print(f"Error: {e}")
        return 1

    try:
        result = enum_file.preview() if args.dry_run else enum_file.save()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot write {path}: {e}")
        return 1

    print_save_result(result, path, args.dry_run)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
