"""
Enum Editor Window
Окно редактирования перечислений выбранного C# файла
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit, QTableWidget, QTableWidgetItem,
    QFileDialog, QTextEdit, QGroupBox, QMessageBox, QScrollArea,
    QAction, QHeaderView, QAbstractItemView
)
from PyQt5.QtCore import pyqtSignal, QSettings

from ..core import BraceCounting, EditorConfig, EnumBlock, EnumFile, InvalidNameError
from ..version import __version__


logger = logging.getLogger(__name__)


COLUMN_NAME, COLUMN_VALUE, COLUMN_COMMENT = range(3)


class EnumGroup(QGroupBox):
    """Группа с таблицей элементов одного перечисления"""

    changed = pyqtSignal()
    delete_requested = pyqtSignal(str)
    warning = pyqtSignal(str)

    def __init__(self, block: EnumBlock, is_new: bool = False, parent=None):
        super().__init__(parent)
        self.block = block
        self._updating = False

        title = f"enum {block.name}"
        if is_new:
            title += "  (new)"
        self.setTitle(title)

        layout = QVBoxLayout(self)

        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Name", "Value", "Comment"])
        self.table.horizontalHeader().setSectionResizeMode(COLUMN_COMMENT, QHeaderView.Stretch)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.itemChanged.connect(self.on_item_changed)
        layout.addWidget(self.table)

        buttons = QHBoxLayout()

        self.add_btn = QPushButton("Add Entry")
        self.add_btn.clicked.connect(self.add_entry)
        buttons.addWidget(self.add_btn)

        self.remove_btn = QPushButton("Remove Entry")
        self.remove_btn.clicked.connect(self.remove_entry)
        buttons.addWidget(self.remove_btn)

        self.up_btn = QPushButton("↑")
        self.up_btn.setFixedWidth(40)
        self.up_btn.clicked.connect(lambda: self.move_entry(-1))
        buttons.addWidget(self.up_btn)

        self.down_btn = QPushButton("↓")
        self.down_btn.setFixedWidth(40)
        self.down_btn.clicked.connect(lambda: self.move_entry(1))
        buttons.addWidget(self.down_btn)

        buttons.addStretch()

        self.delete_btn = QPushButton("Delete Enum")
        self.delete_btn.clicked.connect(lambda: self.delete_requested.emit(self.block.name))
        buttons.addWidget(self.delete_btn)

        layout.addLayout(buttons)
        self.populate()

    def populate(self, select_row: int = -1):
        self._updating = True
        self.table.setRowCount(len(self.block.entries))
        for row, entry in enumerate(self.block.entries):
            self.table.setItem(row, COLUMN_NAME, QTableWidgetItem(entry.name))
            self.table.setItem(row, COLUMN_VALUE, QTableWidgetItem(entry.value))
            self.table.setItem(row, COLUMN_COMMENT, QTableWidgetItem(entry.comment))
        self._updating = False
        if select_row >= 0:
            self.table.selectRow(select_row)

    def on_item_changed(self, item: QTableWidgetItem):
        if self._updating:
            return
        row, column = item.row(), item.column()
        entry = self.block.entries[row]
        text = item.text()

        if column == COLUMN_NAME:
            try:
                self.block.rename_entry(row, text.strip())
            except InvalidNameError as e:
                self.warning.emit(f"{e}. Invalid or duplicate name.")
                self._updating = True
                item.setText(entry.name)
                self._updating = False
                return
        elif column == COLUMN_VALUE:
            entry.value = text.strip()
        else:
            entry.comment = text

        self.changed.emit()

    def add_entry(self):
        self.block.add_entry()
        self.populate(len(self.block.entries) - 1)
        self.changed.emit()

    def remove_entry(self):
        row = self.table.currentRow()
        if row < 0:
            return
        self.block.remove_entry(row)
        self.populate(min(row, len(self.block.entries) - 1))
        self.changed.emit()

    def move_entry(self, offset: int):
        row = self.table.currentRow()
        if row < 0:
            return
        target = self.block.move_entry(row, offset)
        self.populate(target)
        self.changed.emit()


class EditorWindow(QMainWindow):
    def __init__(self, path: Optional[Path] = None):
        super().__init__()

        self.settings = QSettings("EnumEditor", "EnumEditor")
        self.enum_file: Optional[EnumFile] = None
        self.groups: Dict[str, EnumGroup] = {}

        self.setWindowTitle(f"Enum Editor v{__version__}")
        self.setMinimumSize(700, 600)

        self.init_ui()
        self.init_menu()

        if path is None:
            last_file = self.settings.value("last_file", "")
            if last_file and Path(last_file).is_file():
                path = Path(last_file)
        if path is not None:
            self.open_file(Path(path))

    def build_config(self) -> EditorConfig:
        return EditorConfig(
            brace_counting=BraceCounting.PER_LINE if self.legacy_action.isChecked() else BraceCounting.PER_CHARACTER,
            rewrite_unchanged=not self.only_changed_action.isChecked()
        )

    def init_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setSpacing(10)

        # === Файл ===
        file_layout = QHBoxLayout()
        self.path_label = QLabel("Select a C# script to view and edit enums.")
        self.path_label.setStyleSheet("padding: 5px; background: #f0f0f0; border-radius: 3px;")
        file_layout.addWidget(self.path_label, 1)

        self.browse_btn = QPushButton("Open...")
        self.browse_btn.clicked.connect(self.browse_file)
        file_layout.addWidget(self.browse_btn)

        self.reload_btn = QPushButton("Reload")
        self.reload_btn.clicked.connect(self.reload_file)
        self.reload_btn.setEnabled(False)
        file_layout.addWidget(self.reload_btn)

        layout.addLayout(file_layout)

        # === Перечисления ===
        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.groups_widget = QWidget()
        self.groups_layout = QVBoxLayout(self.groups_widget)
        self.groups_layout.addStretch()
        self.scroll.setWidget(self.groups_widget)
        layout.addWidget(self.scroll, 1)

        # === Новое перечисление ===
        self.new_group = QGroupBox("Add New Enum")
        new_layout = QHBoxLayout(self.new_group)
        new_layout.addWidget(QLabel("Enum Name"))
        self.new_name_edit = QLineEdit()
        self.new_name_edit.returnPressed.connect(self.create_enum)
        new_layout.addWidget(self.new_name_edit, 1)
        self.create_btn = QPushButton("Create New Enum")
        self.create_btn.clicked.connect(self.create_enum)
        new_layout.addWidget(self.create_btn)
        self.new_group.setEnabled(False)
        layout.addWidget(self.new_group)

        # === Лог ===
        self.log_group = QGroupBox("Log")
        log_layout = QVBoxLayout(self.log_group)
        self.log_text = QTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setMaximumHeight(100)
        log_layout.addWidget(self.log_text)
        layout.addWidget(self.log_group)

        # === Сохранение ===
        bottom_layout = QHBoxLayout()
        bottom_layout.addStretch()
        self.save_btn = QPushButton("Save All Changes to Script")
        self.save_btn.setStyleSheet("""
            QPushButton { font-size: 14px; font-weight: bold; padding: 10px 25px;
                background: #4CAF50; color: white; border: none; border-radius: 5px; }
            QPushButton:hover { background: #45a049; }
            QPushButton:disabled { background: #cccccc; }
        """)
        self.save_btn.clicked.connect(self.save_changes)
        self.save_btn.setEnabled(False)
        bottom_layout.addWidget(self.save_btn)
        layout.addLayout(bottom_layout)

        self.statusBar().showMessage("Ready")

    def init_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")

        open_action = QAction("Open...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.browse_file)
        file_menu.addAction(open_action)

        save_action = QAction("Save", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.save_changes)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        options_menu = menubar.addMenu("Options")

        self.legacy_action = QAction("Legacy brace counting", self)
        self.legacy_action.setCheckable(True)
        self.legacy_action.setChecked(self.settings.value("legacy_braces", False, type=bool))
        self.legacy_action.toggled.connect(self.on_options_changed)
        options_menu.addAction(self.legacy_action)

        self.only_changed_action = QAction("Rewrite only changed enums", self)
        self.only_changed_action.setCheckable(True)
        self.only_changed_action.setChecked(self.settings.value("only_changed", False, type=bool))
        self.only_changed_action.toggled.connect(self.on_options_changed)
        options_menu.addAction(self.only_changed_action)

    def on_options_changed(self):
        self.settings.setValue("legacy_braces", self.legacy_action.isChecked())
        self.settings.setValue("only_changed", self.only_changed_action.isChecked())
        if self.enum_file:
            self.enum_file.config = self.build_config()

    def log(self, message: str, level: str = "info"):
        colors = {"info": "#000000", "success": "#4CAF50", "warning": "#FF9800", "error": "#f44336"}
        color = colors.get(level, "#000000")
        self.log_text.append(f'<span style="color: {color}">{message}</span>')

    def closeEvent(self, event):
        if self.confirm_discard():
            event.accept()
        else:
            event.ignore()

    def confirm_discard(self) -> bool:
        if not self.enum_file or not self.enum_file.is_modified():
            return True
        answer = QMessageBox.question(
            self, "Unsaved Changes",
            "There are unsaved changes. Discard them?",
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        return answer == QMessageBox.Yes

    def browse_file(self):
        if not self.confirm_discard():
            return
        start_dir = str(self.enum_file.path.parent) if self.enum_file else ""
        path, _ = QFileDialog.getOpenFileName(self, "Select C# Script", start_dir, "C# scripts (*.cs);;All files (*)")
        if path:
            self.open_file(Path(path))

    def open_file(self, path: Path):
        enum_file = EnumFile(path, self.build_config())
        try:
            enum_file.load()
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.critical(self, "Error", f"Cannot read {path}:\n{e}")
            self.log(f"✗ Cannot read {path}: {e}", "error")
            return

        self.enum_file = enum_file
        self.settings.setValue("last_file", str(path))
        self.path_label.setText(str(path))
        self.reload_btn.setEnabled(True)
        self.new_group.setEnabled(True)
        self.save_btn.setEnabled(True)
        self.rebuild_groups()
        self.log(f"✓ Loaded {len(enum_file.blocks)} enums from {path.name}", "success")

    def reload_file(self):
        if self.enum_file and self.confirm_discard():
            self.open_file(self.enum_file.path)

    def rebuild_groups(self):
        for group in self.groups.values():
            self.groups_layout.removeWidget(group)
            group.deleteLater()
        self.groups.clear()

        if not self.enum_file:
            return

        for block in self.enum_file.visible_blocks():
            name = block.name
            group = EnumGroup(block, self.enum_file.is_new(name))
            group.changed.connect(self.on_block_changed)
            group.delete_requested.connect(self.delete_enum)
            group.warning.connect(lambda message: self.statusBar().showMessage(message, 5000))
            # Перед растяжкой в конце
            self.groups_layout.insertWidget(self.groups_layout.count() - 1, group)
            self.groups[name] = group

        if not self.groups:
            self.statusBar().showMessage("No enums loaded. Add a new enum below.")
        else:
            self.statusBar().showMessage(f"Enums: {len(self.groups)}")

    def on_block_changed(self):
        self.statusBar().showMessage("Modified (not saved)")

    def create_enum(self):
        name = self.new_name_edit.text().strip()
        if not name or not self.enum_file:
            return
        try:
            self.enum_file.create_block(name)
        except InvalidNameError:
            QMessageBox.warning(
                self, "Error",
                "Invalid or duplicate enum name. Please use valid C# identifier characters."
            )
            return
        self.new_name_edit.clear()
        self.rebuild_groups()
        self.log(f"Enum '{name}' created (will be added to file on save)", "info")

    def delete_enum(self, name: str):
        answer = QMessageBox.question(
            self, "Confirm Deletion",
            f"Are you sure you want to remove the enum '{name}' "
            f"(will be removed from file on save)?",
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        if answer != QMessageBox.Yes:
            return
        self.enum_file.remove_block(name)
        self.rebuild_groups()
        self.log(f"Enum '{name}' marked for removal", "warning")

    def save_changes(self):
        if not self.enum_file:
            return
        try:
            result = self.enum_file.save()
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.critical(self, "Error", f"Cannot save {self.enum_file.path}:\n{e}")
            self.log(f"✗ Save failed: {e}", "error")
            return

        for name in result.deleted:
            self.log(f"Enum '{name}' removed from script", "info")
        for name in result.inserted:
            self.log(f"Enum '{name}' added to script", "info")
        for name in result.missing:
            self.log(f"Enum '{name}' not found or malformed in script", "warning")

        if result.changed:
            self.log(f"✓ All changes saved to script: {self.enum_file.path.name}", "success")
        else:
            self.log("No changes detected to save.", "info")
        logger.debug(f"Save result: {len(result.updated)} updated, {len(result.inserted)} added")

        self.rebuild_groups()
