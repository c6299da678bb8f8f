# pathfixer\adapters\console_report.py
"""
Human-readable report for a rewrite run.

The text layout is fixed; operators grep it and compare runs, so keep the
section headers and symbols stable.
"""

from typing import List

from pathfixer.core.domain.models import RewriteReport

TITLE = "=== GitHub Pages Path Fixer ==="
FOOTER = "=== Done ==="


def render_header(target: str, dry_run: bool) -> List[str]:
    mode = "DRY RUN (preview only)" if dry_run else "LIVE (will modify files)"
    return [TITLE, "", f"Mode: {mode}", f"Target file: {target}", ""]


def render_summary(report: RewriteReport) -> List[str]:
    lines = ["--- Changes Summary ---", ""]
    result = report.result
    if not result.changes:
        lines += ["✓ No changes needed - all paths are already correct!", ""]
        return lines

    for entry in result.changes:
        lines.append(f"✓ {entry.description}: {entry.count} replacement(s)")
    lines += ["", f"Total replacements: {result.total}", ""]
    return lines


def render_preview(report: RewriteReport, limit: int = 5) -> List[str]:
    if not (report.dry_run and report.result.changed):
        return []

    lines = [f"--- Preview (first {limit} changes) ---", ""]
    for item in report.preview:
        lines += [f"Line {item.line_number}:", f"- {item.before}", f"+ {item.after}", ""]
    if report.hidden_changes > 0:
        lines += [f"... and {report.hidden_changes} more changes", ""]
    return lines


def render_outcome(report: RewriteReport) -> List[str]:
    if report.written:
        return [f"✅ Successfully updated {report.target}", ""]
    if report.dry_run:
        return [
            "ℹ️  Dry run mode - no files were modified",
            "",
            "To apply changes, run without --dry-run flag",
            "",
        ]
    return []


def render_validation(report: RewriteReport) -> List[str]:
    if report.warnings is None:
        return []

    lines = ["--- Validation ---", ""]
    if not report.warnings:
        lines += ["✓ All paths appear to be correctly formatted", ""]
        return lines

    lines += [f"⚠️  {message}" for message in report.warnings]
    lines += ["", "⚠️  Some paths may need manual review", ""]
    return lines


def render_report(report: RewriteReport, preview_limit: int = 5) -> List[str]:
    """Everything after the header, footer included."""
    return (
        render_summary(report)
        + render_preview(report, limit=preview_limit)
        + render_outcome(report)
        + render_validation(report)
        + [FOOTER, ""]
    )
