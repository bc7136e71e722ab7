"""
Edit Session
Отложенные изменения и сохранение их в файл одной транзакцией

Порядок сохранения: удаление -> обновление существующих -> добавление новых.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Set

from .model import EditorConfig, EnumBlock, EnumEntry, InvalidNameError, is_valid_identifier
from .rewriter import RewriteStatus, delete_block, insert_block, update_block
from .scanner import scan
from ..utils import SourceText, read_source, write_source


logger = logging.getLogger(__name__)


DEFAULT_ENTRY_NAME = "DefaultValue"


@dataclass
class PendingChanges:
    """Имена новых перечислений и перечислений, помеченных на удаление"""
    new_names: Set[str] = field(default_factory=set)
    deleted_names: Set[str] = field(default_factory=set)

    def clear(self):
        self.new_names.clear()
        self.deleted_names.clear()

    def is_empty(self) -> bool:
        return not self.new_names and not self.deleted_names


@dataclass
class SaveResult:
    """Результат применения изменений"""
    lines: List[str]
    changed: bool = False
    deleted: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    inserted: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


def apply_changes(
    lines: Sequence[str],
    blocks: Mapping[str, EnumBlock],
    pending: PendingChanges,
    config: Optional[EditorConfig] = None,
    baseline: Optional[Mapping[str, EnumBlock]] = None
) -> SaveResult:
    """
    Применяет все изменения к строкам файла

    Args:
        lines: Текущее содержимое файла
        blocks: Перечисления в памяти (без помеченных на удаление)
        pending: Новые и удаляемые имена
        config: Настройки генерации
        baseline: Состояние на момент загрузки; если задано,
            неизменённые перечисления не перезаписываются
    """
    config = config or EditorConfig()
    current: Sequence[str] = list(lines)
    result = SaveResult(lines=list(lines))

    # 1. Удаления
    for name in sorted(pending.deleted_names):
        rewrite = delete_block(name, current, config)
        if rewrite.success:
            current = rewrite.lines
            result.deleted.append(name)
            logger.info(f"Enum '{name}' removed from script content.")
        else:
            result.missing.append(name)
            logger.warning(f"{rewrite.error}; it might have been already removed or never existed.")

    # 2. Существующие перечисления
    for name, block in blocks.items():
        if name in pending.new_names or name in pending.deleted_names:
            continue
        if baseline is not None and baseline.get(name) == block:
            continue
        rewrite = update_block(name, block.entries, current, config)
        if rewrite.success:
            current = rewrite.lines
            result.updated.append(name)
        else:
            result.missing.append(name)
            result.errors.append(rewrite.error)
            logger.warning(f"{rewrite.error}; update skipped.")

    # 3. Новые перечисления в порядке создания
    for name, block in blocks.items():
        if name not in pending.new_names or name in pending.deleted_names:
            continue
        rewrite = insert_block(name, block.entries, current, config)
        if rewrite.status is RewriteStatus.ALREADY_EXISTS:
            logger.warning(f"{rewrite.error}; updating it instead of adding a duplicate.")
            rewrite = update_block(name, block.entries, current, config)
            if rewrite.success:
                current = rewrite.lines
                result.updated.append(name)
            continue
        current = rewrite.lines
        result.inserted.append(name)

    result.lines = list(current)
    result.changed = result.lines != list(lines)
    return result


class EnumFile:
    """Файл с перечислениями: загрузка, правка в памяти, сохранение"""

    def __init__(self, path: Path, config: Optional[EditorConfig] = None):
        self.path = Path(path)
        self.config = config or EditorConfig()
        self.blocks: 'OrderedDict[str, EnumBlock]' = OrderedDict()
        self.pending = PendingChanges()
        self.source: Optional[SourceText] = None
        self._loaded: Dict[str, EnumBlock] = {}

    def load(self) -> 'OrderedDict[str, EnumBlock]':
        """Читает файл и строит модель; отложенные изменения сбрасываются"""
        self.source = read_source(self.path)
        self.blocks = scan(self.source.lines)
        self._loaded = {name: block.clone() for name, block in self.blocks.items()}
        self.pending.clear()
        logger.info(f"Loaded {len(self.blocks)} enums from {self.path}")
        return self.blocks

    def visible_blocks(self) -> List[EnumBlock]:
        """Перечисления для отображения (без помеченных на удаление)"""
        return [b for name, b in self.blocks.items() if name not in self.pending.deleted_names]

    def get_block(self, name: str) -> EnumBlock:
        return self.blocks[name]

    def is_new(self, name: str) -> bool:
        return name in self.pending.new_names

    def is_modified(self) -> bool:
        if not self.pending.is_empty():
            return True
        return self.blocks != self._loaded

    def create_block(self, name: str) -> EnumBlock:
        """
        Создаёт перечисление в памяти с одним элементом по умолчанию

        Если имя помечено на удаление, удаление отменяется,
        а блок в файле будет перезаписан новым содержимым.
        """
        if not is_valid_identifier(name):
            raise InvalidNameError(f"Invalid enum name: {name!r}")
        if name in self.blocks:
            raise InvalidNameError(f"Enum '{name}' already exists")

        block = EnumBlock(name, [EnumEntry(DEFAULT_ENTRY_NAME)])
        if name in self.pending.deleted_names:
            self.pending.deleted_names.discard(name)
        else:
            self.pending.new_names.add(name)
        self.blocks[name] = block
        return block

    def remove_block(self, name: str) -> None:
        """Убирает перечисление из модели; из файла оно удалится при сохранении"""
        self.blocks.pop(name)
        if name in self.pending.new_names:
            self.pending.new_names.discard(name)
        else:
            self.pending.deleted_names.add(name)

    def set_entries(self, name: str, entries: Sequence[EnumEntry]) -> None:
        self.blocks[name].entries = list(entries)

    def _apply(self) -> SaveResult:
        source = read_source(self.path)
        baseline = None if self.config.rewrite_unchanged else self._loaded
        result = apply_changes(source.lines, self.blocks, self.pending, self.config, baseline)
        self.source = source
        return result

    def preview(self) -> SaveResult:
        """Результат сохранения без записи в файл"""
        return self._apply()

    def save(self) -> SaveResult:
        """Перечитывает файл, применяет изменения и записывает при наличии изменений"""
        result = self._apply()
        if result.changed:
            self.source.lines = result.lines
            write_source(self.path, self.source)
            logger.info(f"All changes saved to script: {self.path}")
        else:
            logger.info("No changes detected to save.")
        self.load()
        return result
