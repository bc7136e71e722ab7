"""Utility functions"""

import codecs
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


LINE_BREAK = re.compile(r'\r\n|\r|\n')


@dataclass
class SourceText:
    """Содержимое файла построчно и его формат"""
    lines: List[str] = field(default_factory=list)
    newline: str = "\n"
    bom: bool = False
    trailing_newline: bool = True


def detect_newline(content: str) -> str:
    """Определяет стиль переноса строк по первому вхождению"""
    pos = content.find('\n')
    if pos > 0 and content[pos - 1] == '\r':
        return "\r\n"
    if pos < 0 and '\r' in content:
        return "\r"
    return "\n"


def split_lines(content: str) -> List[str]:
    """Делит текст на строки только по \\n, \\r\\n и \\r"""
    if not content:
        return []
    lines = LINE_BREAK.split(content)
    if content.endswith(('\n', '\r')):
        lines.pop()
    return lines


def read_source(path: Path) -> SourceText:
    """Читает текстовый файл, запоминая BOM и переносы строк"""
    raw = Path(path).read_bytes()
    bom = raw.startswith(codecs.BOM_UTF8)
    content = raw.decode('utf-8-sig')
    return SourceText(
        lines=split_lines(content),
        newline=detect_newline(content),
        bom=bom,
        trailing_newline=content.endswith(('\n', '\r')) or not content
    )


def write_source(path: Path, source: SourceText) -> None:
    """Записывает строки в том же формате, в котором файл был прочитан"""
    content = source.newline.join(source.lines)
    if source.trailing_newline and source.lines:
        content += source.newline
    encoding = 'utf-8-sig' if source.bom else 'utf-8'
    with open(path, 'w', encoding=encoding, newline='') as f:
        f.write(content)


def format_lines(lines: List[str], start: int = 1) -> str:
    """Строки с номерами для вывода в консоль"""
    width = len(str(start + len(lines) - 1)) if lines else 1
    return '\n'.join(f"{i:>{width}} | {line}" for i, line in enumerate(lines, start))
