"""Enum Editor - редактор перечислений C# в исходных файлах"""

from .version import __version__, get_version_string

__all__ = ['__version__', 'get_version_string']
