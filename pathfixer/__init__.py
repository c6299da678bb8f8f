# pathfixer\__init__.py
"""
Pages Path Fixer.

Rewrites root-absolute paths in a static HTML file so the site keeps working
when it is served from a GitHub Pages project subdirectory.
"""

__version__ = "1.0.0"
