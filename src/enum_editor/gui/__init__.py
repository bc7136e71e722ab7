"""GUI module for Enum Editor"""

from .editor_window import EditorWindow, EnumGroup

__all__ = ['EditorWindow', 'EnumGroup']
