# pathfixer\core\__init__.py
"""
Core Domain Layer.

Pure rewrite logic: rules, the replacement engine and the validation pass.
Nothing in here touches the filesystem or the console directly; file access
goes through the ports defined in `pathfixer.core.ports`.
"""
