"""
Core arithmetic primitives and invariants.

This package contains self-contained numeric value types that do not
depend on any I/O beyond their textual representation.
"""
