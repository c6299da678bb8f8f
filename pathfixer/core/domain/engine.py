# pathfixer\core\domain\engine.py
from functools import reduce
from itertools import zip_longest
from typing import Iterable, List, Tuple

from pathfixer.core.domain.models import (
    ChangeLogEntry,
    PreviewLine,
    ReplacementRule,
    RewriteResult,
    ValidationCheck,
)


def _apply_rule(acc: Tuple[str, List[ChangeLogEntry]], rule: ReplacementRule) -> Tuple[str, List[ChangeLogEntry]]:
    text, changes = acc
    # subn counts non-overlapping matches in the text as it is *now*
    new_text, count = rule.compiled().subn(rule.replacement, text)
    if count == 0:
        return text, changes
    return new_text, changes + [ChangeLogEntry(description=rule.description, count=count)]


def apply_rules(text: str, rules: Iterable[ReplacementRule]) -> RewriteResult:
    """
    Runs every rule in order over `text`.

    Each rule sees the output of the previous ones. Rules that match nothing
    leave no entry in the change log.
    """
    final_text, changes = reduce(_apply_rule, rules, (text, []))
    return RewriteResult(original=text, text=final_text, changes=changes)


def preview_changes(original: str, updated: str, limit: int = 5) -> Tuple[List[PreviewLine], int]:
    """
    Line-level diff for the dry-run preview.

    Returns:
        The first `limit` differing lines (trimmed, in original order) and
        the number of differing lines left out.
    """
    preview: List[PreviewLine] = []
    differing = 0
    pairs = zip_longest(original.split("\n"), updated.split("\n"), fillvalue="")
    for number, (before, after) in enumerate(pairs, start=1):
        if before == after:
            continue
        differing += 1
        if len(preview) < limit:
            preview.append(PreviewLine(line_number=number, before=before.strip(), after=after.strip()))
    return preview, differing - len(preview)


def validate(text: str, checks: Iterable[ValidationCheck]) -> List[str]:
    """Returns the message of every check whose pattern still occurs in `text`."""
    return [check.message for check in checks if check.found_in(text)]
