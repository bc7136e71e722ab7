#!/usr/bin/env python3
"""
Enum Editor
Графический редактор перечислений (enum) в C# скриптах

Запуск:
    enum-editor-gui
    enum-editor-gui path/to/Types.cs
"""

import logging
import sys
from pathlib import Path


def main():
    """Точка входа приложения"""
    from PyQt5.QtWidgets import QApplication
    from PyQt5.QtCore import Qt
    from PyQt5.QtGui import QFont

    from .gui import EditorWindow
    from .logging_config import setup_logging
    from .version import __version__

    setup_logging(logging.INFO)

    # Высокое DPI
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setApplicationName("Enum Editor")
    app.setApplicationVersion(__version__)
    app.setOrganizationName("EnumEditor")

    app.setStyle("Fusion")
    app.setFont(QFont("Segoe UI", 10))

    app.setStyleSheet("""
        QGroupBox {
            font-weight: bold;
            margin-top: 10px;
        }
        QGroupBox::title {
            subcontrol-origin: margin;
            left: 10px;
        }
    """)

    # Файл можно передать аргументом
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    window = EditorWindow(path)
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
