# pathfixer\core\use_cases\rewrite_paths.py
from typing import List, Optional

import structlog

from pathfixer.core.domain.engine import apply_rules, preview_changes, validate
from pathfixer.core.domain.exceptions import TargetFileNotFoundError, TargetFileUnreadableError
from pathfixer.core.domain.models import ReplacementRule, RewriteReport, ValidationCheck
from pathfixer.core.domain.rules import VALIDATION_CHECKS
from pathfixer.core.ports.file_store import ITextFileStore

logger = structlog.get_logger()


class RewritePaths:
    """
    Use Case: Rewrites the hard-coded paths of one HTML file.

    Responsibilities:
    1. Fail fast if the target does not exist.
    2. Run the ordered rule list over the file content.
    3. Dry run: build the line preview. Live: write the result back.
    4. Scan the result for leftovers the rules should have fixed.
    """

    def __init__(
        self,
        store: ITextFileStore,
        rules: List[ReplacementRule],
        checks: Optional[List[ValidationCheck]] = None,
        preview_limit: int = 5,
    ):
        self.store = store
        self.rules = rules
        self.checks = VALIDATION_CHECKS if checks is None else checks
        self.preview_limit = preview_limit

    def execute(self, target: str, dry_run: bool = False) -> RewriteReport:
        """
        Args:
            target: Path of the HTML file.
            dry_run: Compute and report only; never write.

        Raises:
            TargetFileNotFoundError: Missing or unreadable target, before any
                transformation.
            OSError: If the write fails. Nothing is rolled back.
        """
        logger.info("rewrite_started", target=target, dry_run=dry_run, rules=len(self.rules))

        if not self.store.exists(target):
            logger.error("target_missing", target=target)
            raise TargetFileNotFoundError(target)

        try:
            original = self.store.read_text(target)
        except OSError as e:
            logger.error("target_unreadable", target=target, error=str(e))
            raise TargetFileUnreadableError(target, e.strerror or str(e)) from e

        result = apply_rules(original, self.rules)
        for entry in result.changes:
            logger.debug("rule_applied", description=entry.description, count=entry.count)
        logger.info("rewrite_completed", target=target, total=result.total, rules_fired=len(result.changes))

        report = RewriteReport(target=target, dry_run=dry_run, result=result)

        if dry_run and result.changed:
            report.preview, report.hidden_changes = preview_changes(
                original, result.text, limit=self.preview_limit
            )

        if not dry_run and result.changed:
            self.store.write_text(target, result.text)
            report.written = True

        # A dry run with nothing to do has nothing to validate
        if result.changed or not dry_run:
            report.warnings = validate(result.text, self.checks)
            for message in report.warnings:
                logger.warning("validation_warning", target=target, message=message)

        return report
