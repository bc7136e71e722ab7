"""
Enum Editor version information
"""

__version__ = "1.0.0"
__author__ = "Enum Editor Contributors"
__app_name__ = "Enum Editor"

def get_version_string() -> str:
    """Returns formatted version string"""
    return f"{__app_name__} v{__version__}"
