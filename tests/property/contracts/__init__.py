# tests/property/contracts/__init__.py
"""Property tests for contract invariants."""
