"""Root test conftest — shared fixtures for all test suites.

Unit fixtures live in tests/unit/conftest.py; the CLI component tests add
their own in tests/components/conftest.py.
"""
