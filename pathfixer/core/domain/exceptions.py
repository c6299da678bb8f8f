# pathfixer/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Entity Not Found Errors ---

class TargetFileNotFoundError(DomainError):
    """Raised when the file to rewrite does not exist."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")

class TargetFileUnreadableError(TargetFileNotFoundError):
    """Raised when the target exists but cannot be opened or read as text."""
    def __init__(self, path: str, reason: str):
        super().__init__(path)
        self.reason = reason
        self.message = f"File not found: {path} ({reason})"
        self.args = (self.message,)
