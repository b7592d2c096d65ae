"""
Core exact-arithmetic primitives, serialization contracts, and domain records.

This package is independent of any concrete field implementation: callers
supply the field type (Fraction, mpq, algebraic number types, etc.).
"""
