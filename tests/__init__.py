"""
Test Suite for Roster Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end demonstration tests
    - fixtures/: Sample configuration files

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/roster_pipeline        # With coverage
"""
