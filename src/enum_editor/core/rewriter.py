"""
Enum Rewriter
Замена, добавление и удаление блоков перечислений в списке строк

Все функции возвращают новый список строк и не изменяют входной.
При неудаче возвращается исходная последовательность без изменений.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .locator import count_braces, declaration_attributes, describe_failure, locate
from .model import BlockSpan, EditorConfig, EnumEntry, render_block


NAMESPACE_PATTERN = re.compile(r'^(\s*)namespace\s+[\w.]+\s*(;|\{)?')
INDENT_PATTERN = re.compile(r'^(\s*)')


class RewriteStatus(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"           # нет объявления или скобки не сбалансированы
    ALREADY_EXISTS = "already_exists"


@dataclass
class RewriteResult:
    """Результат операции над строками"""
    lines: Sequence[str]
    status: RewriteStatus = RewriteStatus.OK
    error: str = ""
    span: Optional[BlockSpan] = None

    @property
    def success(self) -> bool:
        return self.status is RewriteStatus.OK


def _not_found(name: str, lines: Sequence[str], config: EditorConfig) -> RewriteResult:
    return RewriteResult(
        lines=lines,
        status=RewriteStatus.NOT_FOUND,
        error=describe_failure(name, lines, config.brace_counting)
    )


def update_block(
    name: str,
    entries: Sequence[EnumEntry],
    lines: Sequence[str],
    config: Optional[EditorConfig] = None
) -> RewriteResult:
    """
    Заменяет существующий блок сгенерированным текстом

    Отступ и атрибуты ([Flags]) берутся из строки объявления,
    порядок элементов - из entries.
    """
    config = config or EditorConfig()
    span = locate(name, lines, config.brace_counting)
    if span is None:
        return _not_found(name, lines, config)

    decl = lines[span.decl_line]
    indent = INDENT_PATTERN.match(decl).group(1)
    new_block = render_block(name, entries, indent, config, declaration_attributes(decl))

    new_lines = list(lines[:span.decl_line]) + new_block + list(lines[span.close_line + 1:])
    return RewriteResult(lines=new_lines, span=span)


def find_insert_indent(lines: Sequence[str], config: Optional[EditorConfig] = None) -> str:
    """
    Отступ для нового блока

    Последний namespace верхнего уровня даёт свой отступ плюс один уровень;
    file-scoped namespace (namespace X;) - свой отступ без добавки.
    """
    config = config or EditorConfig()
    target_indent = ""
    depth = 0

    for line in lines:
        depth_before = depth
        opens, closes = count_braces(line)
        depth += opens - closes

        if depth_before != 0:
            continue
        match = NAMESPACE_PATTERN.match(line)
        if match:
            if match.group(2) == ';':
                target_indent = match.group(1)
            else:
                target_indent = match.group(1) + config.indent_unit

    return target_indent


def insert_block(
    name: str,
    entries: Sequence[EnumEntry],
    lines: Sequence[str],
    config: Optional[EditorConfig] = None
) -> RewriteResult:
    """Добавляет новый блок в конец файла после пустой строки"""
    config = config or EditorConfig()
    existing = locate(name, lines, config.brace_counting)
    if existing is not None:
        return RewriteResult(
            lines=lines,
            status=RewriteStatus.ALREADY_EXISTS,
            error=f"Enum '{name}' already exists at line {existing.decl_line + 1}",
            span=existing
        )

    indent = find_insert_indent(lines, config)
    new_block = render_block(name, entries, indent, config)

    start = len(lines) + 1
    new_lines = list(lines) + [""] + new_block
    span = BlockSpan(start, start + 1, len(new_lines) - 1)
    return RewriteResult(lines=new_lines, span=span)


def delete_block(
    name: str,
    lines: Sequence[str],
    config: Optional[EditorConfig] = None
) -> RewriteResult:
    """Удаляет блок и пустую строку перед ним, если она есть"""
    config = config or EditorConfig()
    span = locate(name, lines, config.brace_counting)
    if span is None:
        return _not_found(name, lines, config)

    head: List[str] = list(lines[:span.decl_line])
    if head and not head[-1].strip():
        head.pop()

    new_lines = head + list(lines[span.close_line + 1:])
    return RewriteResult(lines=new_lines, span=span)
