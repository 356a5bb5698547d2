# tests/conftest.py
"""
Root conftest.

Test Tiers:
- tier1: pure logic, no I/O
         Run: pytest -m tier1
- tier2: mocked collaborators, temporary files, CLI runner
         Run: pytest -m "tier1 or tier2"

Tiers are assigned in tests/unit/conftest.py by file name.
"""
