"""
Core numeric primitives and value types.

This module contains the foundational building blocks the polynomial
solvers are built on: tolerance comparisons, decimal rounding and the
immutable Complex type.
"""
