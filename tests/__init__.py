"""
Test Suite for Filter Manager.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Compiler pipeline and YAML end-to-end tests
    - fixtures/: Shared YAML configurations

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/filter_manager         # With coverage
"""
