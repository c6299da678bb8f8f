# pathfixer\core\domain\__init__.py
"""
Domain Entities and Value Objects.

Replacement rules, change-log entries, validation checks and the results
of a rewrite run.
"""
