"""
Test suite for complex-value-engine

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
