"""
Core complex value engine: IEEE-754 real primitives and the ComplexNumber
value type built on them.

This module has no runtime state and no dependencies beyond pydantic.
"""
