# tests/property/__init__.py
"""Property-based tests for propsuite.

Test categories:
- core/: verbosity lattice and option table invariants
- contracts/: PropertyArgs conversions to and from engine arguments
"""
