# pathfixer\core\ports\__init__.py
"""
Core Ports (Interfaces).

Protocols the adapters implement so the use cases never open files
themselves.
"""

from .file_store import ITextFileStore

__all__ = [
    "ITextFileStore",
]
