"""
Block Locator
Поиск границ объявления перечисления по счётчику вложенности скобок

Полный разбор C# не выполняется: строки просматриваются сверху вниз,
скобки считаются без учёта строковых литералов и многострочных комментариев.
"""

import re
from typing import Optional, Sequence, Tuple

from .model import BlockSpan, BraceCounting


DECLARATION_PREFIX = r'^(\s*)(?:\[[^\]]*\]\s*)*(?:(?:public|private|internal|protected)\s+)*enum\s+'
DECLARATION_PATTERN = re.compile(DECLARATION_PREFIX + r'(\w+)\s*(\{)?')
ATTRIBUTES_PATTERN = re.compile(r'^\s*((?:\[[^\]]*\]\s*)*)')


def declaration_attributes(line: str) -> str:
    """Атрибуты перед объявлением в той же строке: '[Flags]', '[Flags, Serializable]'"""
    return ATTRIBUTES_PATTERN.match(line).group(1).strip()


def declaration_pattern(name: str) -> 're.Pattern':
    """Шаблон объявления конкретного перечисления (имя целым словом)"""
    return re.compile(DECLARATION_PREFIX + re.escape(name) + r'\b')


def find_comment_pos(line: str) -> int:
    """Находит позицию '//' вне кавычек"""
    in_quotes = False
    for i, char in enumerate(line):
        if char == '"' and (i == 0 or line[i-1] != '\\'):
            in_quotes = not in_quotes
        elif char == '/' and not in_quotes and line[i+1:i+2] == '/':
            return i
    return -1


def code_part(line: str) -> str:
    """Строка без хвостового комментария"""
    pos = find_comment_pos(line)
    return line[:pos] if pos >= 0 else line


def count_braces(line: str) -> Tuple[int, int]:
    """Количество открывающих и закрывающих скобок в коде строки"""
    code = code_part(line)
    return code.count('{'), code.count('}')


def _has_open(line: str, counting: BraceCounting) -> bool:
    if counting is BraceCounting.PER_LINE:
        return '{' in line
    return count_braces(line)[0] > 0


def _delta(line: str, counting: BraceCounting) -> int:
    if counting is BraceCounting.PER_LINE:
        # Старое поведение: каждая строка меняет счётчик не более чем на единицу
        return int('{' in line) - int('}' in line)
    opens, closes = count_braces(line)
    return opens - closes


def find_declaration(name: str, lines: Sequence[str]) -> Optional[int]:
    """Индекс первой строки с объявлением перечисления"""
    pattern = declaration_pattern(name)
    for i, line in enumerate(lines):
        if pattern.match(line):
            return i
    return None


def _find_open_brace(lines: Sequence[str], start: int, counting: BraceCounting) -> Optional[int]:
    for i in range(start, len(lines)):
        if _has_open(lines[i], counting):
            return i
    return None


def _find_close_brace(lines: Sequence[str], start: int, counting: BraceCounting) -> Optional[int]:
    level = 0
    for i in range(start, len(lines)):
        level += _delta(lines[i], counting)
        if level <= 0:
            return i
    return None


def locate(
    name: str,
    lines: Sequence[str],
    counting: BraceCounting = BraceCounting.PER_CHARACTER
) -> Optional[BlockSpan]:
    """
    Находит блок перечисления

    Returns:
        BlockSpan с индексами объявления, '{' и '}' либо None,
        если объявления нет или закрывающая скобка не найдена.
    """
    decl_line = find_declaration(name, lines)
    if decl_line is None:
        return None

    open_line = _find_open_brace(lines, decl_line, counting)
    if open_line is None:
        return None

    close_line = _find_close_brace(lines, open_line, counting)
    if close_line is None:
        return None

    return BlockSpan(decl_line, open_line, close_line)


def describe_failure(
    name: str,
    lines: Sequence[str],
    counting: BraceCounting = BraceCounting.PER_CHARACTER
) -> str:
    """Текст причины, по которой locate() вернул None"""
    decl_line = find_declaration(name, lines)
    if decl_line is None:
        return f"Enum '{name}' not found"
    if _find_open_brace(lines, decl_line, counting) is None:
        return f"Enum '{name}' is malformed: no opening brace after line {decl_line + 1}"
    return f"Enum '{name}' is malformed: no matching closing brace"

