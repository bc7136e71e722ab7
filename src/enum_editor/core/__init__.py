"""Core module for Enum Editor"""

from .model import (
    BlockSpan,
    BraceCounting,
    EditorConfig,
    EnumBlock,
    EnumEntry,
    InvalidNameError,
    is_valid_identifier,
    render_block
)
from .locator import locate, find_declaration, describe_failure
from .scanner import LineKind, classify_line, parse_entry, scan, scan_text
from .rewriter import (
    RewriteResult,
    RewriteStatus,
    update_block,
    insert_block,
    delete_block,
    find_insert_indent
)
from .session import EnumFile, PendingChanges, SaveResult, apply_changes

__all__ = [
    'BlockSpan',
    'BraceCounting',
    'EditorConfig',
    'EnumBlock',
    'EnumEntry',
    'InvalidNameError',
    'is_valid_identifier',
    'render_block',
    'locate',
    'find_declaration',
    'describe_failure',
    'LineKind',
    'classify_line',
    'parse_entry',
    'scan',
    'scan_text',
    'RewriteResult',
    'RewriteStatus',
    'update_block',
    'insert_block',
    'delete_block',
    'find_insert_indent',
    'EnumFile',
    'PendingChanges',
    'SaveResult',
    'apply_changes'
]
