"""
Logging package for ``gedcom_tree``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import BASE_LOGGER_NAME, LogSettings, get_logger, qualified_name

__all__ = [
    "BASE_LOGGER_NAME",
    "LogSettings",
    "get_logger",
    "qualified_name",
]
