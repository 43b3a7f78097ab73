# sha256-core Test Suite
"""
Test suite including:
- Unit tests (chunker, schedule, compression, linked list)
- Integration tests (reference cross-check, CLI)
- Security tests (avalanche, leakage, allocation failure)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
