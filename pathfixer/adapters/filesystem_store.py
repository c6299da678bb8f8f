# pathfixer/adapters/filesystem_store.py
from pathlib import Path

import structlog

from pathfixer.core.ports.file_store import ITextFileStore

logger = structlog.get_logger()


class LocalTextFileStore(ITextFileStore):
    """
    Concrete implementation of the file port on the local disk.

    newline="" disables universal-newline translation in both directions and
    surrogateescape carries bytes that are not valid UTF-8 through untouched,
    so legacy-encoded or CRLF documents come back out byte-identical apart
    from the rewrites.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding=self.encoding, newline="", errors="surrogateescape") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        try:
            with open(path, "w", encoding=self.encoding, newline="", errors="surrogateescape") as f:
                f.write(content)
        except OSError as e:
            logger.error("file_write_failed", path=path, error=str(e))
            raise
        logger.info("file_written", path=path, chars=len(content))
