# pathfixer\core\ports\file_store.py
from typing import Protocol


class ITextFileStore(Protocol):
    """
    Port for reading and writing the target document.
    Implementations must hand back the text exactly as stored, line endings
    included, and write exactly the string they are given.
    """

    def exists(self, path: str) -> bool:
        """Returns True if `path` names an existing regular file."""
        ...

    def read_text(self, path: str) -> str:
        """Returns the full content of `path`."""
        ...

    def write_text(self, path: str, content: str) -> None:
        """Replaces the content of `path`. Failures propagate as OSError."""
        ...
