# SHAVault Test Suite
"""
Test suite including:
- Unit tests per component (round functions, padding, schedule, compression)
- Hasher tests (known vectors, incremental use, error states)
- Command-line tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
