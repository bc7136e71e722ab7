"""
Document Scanner
Построение модели перечислений за один проход по файлу

Каждая строка внутри перечисления классифицируется (LineKind), поэтому
пропуск нераспознанных строк - отдельная ветка, а не молчаливый промах regex.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .locator import DECLARATION_PATTERN, code_part, count_braces
from .model import EnumBlock, EnumEntry


logger = logging.getLogger(__name__)


# Name = Value, // comment
ENTRY_PATTERN = re.compile(r'^(\w+)\s*(?:=\s*([^,]+?))?\s*,?\s*(?://(.*))?$')
DIRECTIVE_PATTERN = re.compile(r'^(?:using|import)\s+[^(]*;$')


class LineKind(Enum):
    ENTRY = "entry"
    SKIP = "skip"               # пустая строка, комментарий, '{'
    SCOPE_END = "scope_end"
    UNRECOGNIZED = "unrecognized"
    OUTSIDE = "outside"


@dataclass
class LineClass:
    kind: LineKind
    entries: List[EnumEntry] = field(default_factory=list)

    @property
    def entry(self) -> Optional[EnumEntry]:
        return self.entries[0] if self.entries else None


def parse_entry(text: str) -> Optional[EnumEntry]:
    """Разбирает строку 'Name = Value, // comment'"""
    match = ENTRY_PATTERN.match(text.strip())
    if not match:
        return None
    name, value, comment = match.groups()
    return EnumEntry(
        name=name,
        value=value.strip() if value else "",
        comment=comment.rstrip() if comment else ""
    )


def _inline_entries(body: str) -> List[EnumEntry]:
    """Элементы, записанные через запятую в одной строке"""
    entries = []
    for piece in body.split(','):
        piece = piece.strip()
        if not piece:
            continue
        entry = parse_entry(piece)
        if entry:
            entries.append(entry)
        else:
            logger.debug(f"Dropped inline fragment: {piece!r}")
    return entries


def _line_entries(code: str) -> List[EnumEntry]:
    """
    Элементы строки тела: один 'Name = Value,' или список 'A, B = 2, C,'

    Список принимается только если разбирается каждый его фрагмент.
    """
    entry = parse_entry(code)
    if entry is not None:
        return [entry]
    code = code_part(code)
    if ',' not in code.strip().rstrip(','):
        return []
    pieces = [p.strip() for p in code.split(',') if p.strip()]
    entries = [parse_entry(p) for p in pieces]
    if all(entries):
        return entries
    return []


def classify_line(line: str, depth: int, body_depth: int) -> LineClass:
    """
    Классифицирует строку внутри перечисления

    Args:
        line: Строка файла
        depth: Глубина вложенности после этой строки
        body_depth: Глубина, на которой объявлено перечисление
    """
    stripped = line.strip()
    code = code_part(stripped)

    if depth <= body_depth:
        if '}' not in code:
            return LineClass(LineKind.OUTSIDE)
        # "Last }" - элемент перед закрывающей скобкой
        head = code[:code.index('}')].strip()
        return LineClass(LineKind.SCOPE_END, _line_entries(head) if head else [])

    if not stripped or stripped.startswith('//') or stripped == '{':
        return LineClass(LineKind.SKIP)

    entries = _line_entries(stripped)
    if not entries:
        return LineClass(LineKind.UNRECOGNIZED)
    return LineClass(LineKind.ENTRY, entries)


def scan(lines: Sequence[str]) -> 'OrderedDict[str, EnumBlock]':
    """
    Находит все перечисления и их элементы

    Порядок в результате совпадает с порядком первого появления в файле.
    При повторном объявлении побеждает последнее.
    """
    blocks: 'OrderedDict[str, EnumBlock]' = OrderedDict()
    scopes: List[Tuple[EnumBlock, int]] = []
    depth = 0

    for line_num, line in enumerate(lines, 1):
        stripped = line.strip()
        if DIRECTIVE_PATTERN.match(stripped):
            continue

        opens, closes = count_braces(stripped)
        depth_before = depth
        depth += opens - closes

        decl_match = DECLARATION_PATTERN.match(line)
        if decl_match:
            name = decl_match.group(2)
            if name in blocks:
                logger.warning(f"Enum '{name}' declared again at line {line_num}, keeping the later one")
            block = EnumBlock(name)
            blocks[name] = block

            if opens:
                code = code_part(stripped)
                body = code[code.index('{') + 1:]
                if depth <= depth_before:
                    # enum A { X, Y }
                    if '}' in body:
                        body = body[:body.rfind('}')]
                    block.entries.extend(_inline_entries(body))
                    continue
                block.entries.extend(_inline_entries(body))

            scopes.append((block, depth_before))
            continue

        if not scopes:
            continue

        block, body_depth = scopes[-1]
        result = classify_line(line, depth, body_depth)

        block.entries.extend(result.entries)

        if result.kind is LineKind.SCOPE_END:
            scopes.pop()
        elif result.kind is LineKind.UNRECOGNIZED:
            logger.debug(f"Line {line_num} in enum '{block.name}' ignored: {stripped!r}")

    if scopes:
        logger.warning(f"Enum '{scopes[-1][0].name}' is not closed before end of file")

    return blocks


def scan_text(text: str) -> 'OrderedDict[str, EnumBlock]':
    return scan(text.splitlines())
