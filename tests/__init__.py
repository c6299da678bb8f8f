# tests\__init__.py
"""
Test Suite for Pages Path Fixer.

Organization:
- `core`: Rule builder, replacement engine, use case (file port mocked or tmp_path).
- `adapters`: Filesystem store and console report.
- `test_cli.py`: End-to-end runs of the command line entry point.
"""
