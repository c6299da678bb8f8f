# pathfixer\core\domain\rules.py
"""
Rule builder.

Turns a `RewriteConfig` into the ordered list of `ReplacementRule`s. The
order is load-bearing: each rule runs against the output of the rules
before it, so

1. structural rules (CSS bundles, assets, external SDK, form actions) run
   first,
2. then one generated rule per internal path,
3. then the two home-link rules,
4. then the JavaScript redirect.

Rules never match their own output. Keep it that way when adding entries:
a full second pass over rewritten HTML must report zero changes.
"""

import re
from typing import Iterable, List

from pathfixer.core.domain.models import ReplacementRule, RewriteConfig, ValidationCheck

REDIRECT_TARGET = "/tim-diem-thanh-toan-giai-ngan/"


def literal_rule(find: str, replace: str, description: str) -> ReplacementRule:
    """Builds a rule that matches `find` verbatim and inserts `replace` verbatim."""
    return ReplacementRule(
        pattern=re.escape(find),
        replacement=replace.replace("\\", r"\\"),
        description=description,
    )


def structural_rules(config: RewriteConfig) -> List[ReplacementRule]:
    www, base = config.www_path, config.base_path
    return [
        # CSS bundles
        literal_rule('href="sb/', f'href="{www}/sb/', "CSS bundle paths (sb/)"),
        literal_rule('href="uSkinned/', f'href="{www}/uSkinned/', "CSS bundle paths (uSkinned/)"),
        # Assets
        literal_rule('src="assets/', f'src="{www}/assets/', "Assets in src attributes"),
        literal_rule('href="/assets/', f'href="{www}/assets/', "Assets in href attributes"),
        literal_rule('href="/sb/', f'href="{www}/sb/', "SB paths with leading slash"),
        # The mirror saved the push SDK as a relative path
        literal_rule('src="../api.pushio.com/', 'src="https://api.pushio.com/', "External API protocol"),
        # Form actions
        literal_rule('action="/search/"', f'action="{base}/search/"', "Form action (search)"),
        literal_rule('action="/"', f'action="{base}/"', "Form action (root)"),
    ]


def internal_link_rules(paths: Iterable[str], base_path: str) -> List[ReplacementRule]:
    """One rule per site-relative link, in the order the paths are configured."""
    return [
        literal_rule(f'href="{path}"', f'href="{base_path}{path}"', f"Internal link: {path}")
        for path in paths
    ]


def home_link_rules(base_path: str) -> List[ReplacementRule]:
    # Only the closing-quote context tells a home link apart from other root paths
    return [
        literal_rule('href="/" ', f'href="{base_path}/" ', "Home link (with space)"),
        literal_rule('href="/">', f'href="{base_path}/">', "Home link (with >)"),
    ]


def redirect_rules(base_path: str) -> List[ReplacementRule]:
    return [
        literal_rule(
            f'window.location.href = "{REDIRECT_TARGET}"',
            f'window.location.href = "{base_path}{REDIRECT_TARGET}"',
            "JavaScript redirect",
        ),
    ]


def build_rules(config: RewriteConfig) -> List[ReplacementRule]:
    """Returns the complete, ordered rule list for a deployment layout."""
    return (
        structural_rules(config)
        + internal_link_rules(config.internal_paths, config.base_path)
        + home_link_rules(config.base_path)
        + redirect_rules(config.base_path)
    )


# Leftovers that mean the rule list missed something
VALIDATION_CHECKS: List[ValidationCheck] = [
    ValidationCheck(pattern=re.escape('href="sb/'), message="Found unfixed CSS bundle paths (sb/)"),
    ValidationCheck(pattern=re.escape('href="uSkinned/'), message="Found unfixed CSS bundle paths (uSkinned/)"),
    ValidationCheck(pattern=re.escape('src="assets/'), message="Found unfixed asset paths"),
    ValidationCheck(pattern=re.escape('src="../api.pushio.com/'), message="Found unfixed API paths"),
]
