"""
Test suite for the BigInt core

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
