"""
Enum model
Модель данных: перечисления, их элементы и генерация текста блока
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence


IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


class BraceCounting(Enum):
    """Режим подсчёта скобок при поиске границ блока"""
    PER_LINE = "per_line"             # старое поведение: одна строка = максимум +1/-1
    PER_CHARACTER = "per_character"   # каждая скобка вне комментария


class InvalidNameError(ValueError):
    """Имя не является идентификатором или уже занято"""


@dataclass
class EditorConfig:
    """Настройки генерации текста"""
    indent_unit: str = "    "
    access_modifier: str = "public"
    brace_counting: BraceCounting = BraceCounting.PER_CHARACTER
    rewrite_unchanged: bool = True   # False: при сохранении трогать только изменённые


def is_valid_identifier(name: Optional[str]) -> bool:
    if not name or not name.strip():
        return False
    return IDENTIFIER_PATTERN.match(name) is not None


@dataclass
class EnumEntry:
    """Элемент перечисления: имя, значение и комментарий как сырой текст"""
    name: str
    value: str = ""
    comment: str = ""

    def to_line(self, indent: str) -> str:
        value_part = f" = {self.value.strip()}" if self.value and self.value.strip() else ""
        comment_part = f" //{self.comment}" if self.comment and self.comment.strip() else ""
        return f"{indent}{self.name}{value_part},{comment_part}"


@dataclass(frozen=True)
class BlockSpan:
    """Границы блока в списке строк (индексы с нуля, включительно)"""
    decl_line: int
    open_line: int
    close_line: int

    def __len__(self) -> int:
        return self.close_line - self.decl_line + 1


@dataclass
class EnumBlock:
    """Перечисление с упорядоченным списком элементов"""
    name: str
    entries: List[EnumEntry] = field(default_factory=list)

    def entry_names(self) -> List[str]:
        return [e.name for e in self.entries]

    def add_entry(self, name: str = "NewValue", value: str = "", comment: str = "") -> EnumEntry:
        """Добавляет элемент; при совпадении имени добавляет числовой суффикс"""
        if not is_valid_identifier(name):
            raise InvalidNameError(f"Invalid entry name: {name!r}")
        existing = set(self.entry_names())
        candidate = name
        suffix = 1
        while candidate in existing:
            candidate = f"{name}{suffix}"
            suffix += 1
        entry = EnumEntry(candidate, value, comment)
        self.entries.append(entry)
        return entry

    def remove_entry(self, index: int) -> EnumEntry:
        return self.entries.pop(index)

    def rename_entry(self, index: int, new_name: str) -> None:
        entry = self.entries[index]
        if new_name == entry.name:
            return
        if not is_valid_identifier(new_name):
            raise InvalidNameError(f"Invalid entry name: {new_name!r}")
        if any(e is not entry and e.name == new_name for e in self.entries):
            raise InvalidNameError(f"Duplicate entry name: {new_name!r}")
        entry.name = new_name

    def move_entry(self, index: int, offset: int) -> int:
        """Сдвигает элемент, возвращает новый индекс"""
        target = max(0, min(len(self.entries) - 1, index + offset))
        if target != index:
            entry = self.entries.pop(index)
            self.entries.insert(target, entry)
        return target

    def clone(self) -> 'EnumBlock':
        return EnumBlock(self.name, [EnumEntry(e.name, e.value, e.comment) for e in self.entries])


def render_block(
    name: str,
    entries: Sequence[EnumEntry],
    indent: str = "",
    config: Optional[EditorConfig] = None,
    attributes: str = ""
) -> List[str]:
    """
    Генерирует текст блока: объявление, '{', элементы, '}'

    Элементы с пустым именем пропускаются.
    attributes ставятся перед модификатором доступа, например '[Flags]'.
    """
    config = config or EditorConfig()
    header = f"{config.access_modifier} enum {name}" if config.access_modifier else f"enum {name}"
    if attributes:
        header = f"{attributes} {header}"
    lines = [f"{indent}{header}", f"{indent}{{"]
    entry_indent = indent + config.indent_unit
    for entry in entries:
        if not entry.name or not entry.name.strip():
            continue
        lines.append(entry.to_line(entry_indent))
    lines.append(f"{indent}}}")
    return lines
