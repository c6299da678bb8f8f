# pathfixer\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

Each use case orchestrates the domain functions and the ports for one
operator-facing action.
"""

from .rewrite_paths import RewritePaths
