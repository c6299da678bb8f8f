# pathfixer\adapters\__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the core ports (local filesystem) and the
console report renderer.
"""
