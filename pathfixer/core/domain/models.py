# pathfixer\core\domain\models.py
import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Configuration ---

class RewriteConfig(BaseModel):
    """
    The deployment layout the rules are generated from.
    Built once at startup and never mutated during a run.
    """
    model_config = ConfigDict(frozen=True)

    base_path: str = Field(..., description="Subdirectory the site is served from (e.g., '/fecredit')")
    www_path: str = Field(..., description="Prefix for bundled CSS and assets")
    internal_paths: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("internal_paths")
    @classmethod
    def paths_are_site_relative(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for path in value:
            if not path.startswith("/"):
                raise ValueError(f"Internal path '{path}' must start with '/'")
        return value

# --- Rules & Checks ---

class ReplacementRule(BaseModel):
    """
    One find/replace step of the pipeline.

    `pattern` is regular-expression source, case-sensitive and applied to
    every occurrence. `replacement` is a `re.sub` template.
    """
    model_config = ConfigDict(frozen=True)

    pattern: str
    replacement: str
    description: str

    def compiled(self) -> re.Pattern:
        # re keeps its own cache of compiled patterns
        return re.compile(self.pattern)

class ValidationCheck(BaseModel):
    """A pattern that must not survive a complete rewrite."""
    model_config = ConfigDict(frozen=True)

    pattern: str
    message: str

    def found_in(self, text: str) -> bool:
        return re.search(self.pattern, text) is not None

# --- Results ---

class ChangeLogEntry(BaseModel):
    description: str
    count: int

class RewriteResult(BaseModel):
    """Output of running the ordered rule list over one document."""
    original: str
    text: str
    changes: List[ChangeLogEntry] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(entry.count for entry in self.changes)

    @property
    def changed(self) -> bool:
        return self.total > 0

class PreviewLine(BaseModel):
    """A single before/after pair shown in dry-run mode (1-based line number)."""
    line_number: int
    before: str
    after: str

class RewriteReport(BaseModel):
    """
    Everything the console report needs about one run.
    `warnings` is None when the validation pass did not run.
    """
    target: str
    dry_run: bool
    result: RewriteResult
    preview: List[PreviewLine] = Field(default_factory=list)
    hidden_changes: int = 0
    written: bool = False
    warnings: Optional[List[str]] = None
