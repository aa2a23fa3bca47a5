"""Test suite for less-compiler.

Test organization:
- fixtures/: Fake compilation service and test utilities
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/
    pytest tests/ -v --tb=short
"""
