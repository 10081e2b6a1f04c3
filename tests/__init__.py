"""
Test suite for the BigInteger core

Contains:
- tests/unit/          : Unit and property-based tests for src.core.bigint
"""
