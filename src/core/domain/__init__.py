"""
Domain value objects.

Contains the immutable Complex number type and its polar form.
"""

from src.core.domain.complex_number import Complex, Polar

__all__ = [
    "Complex",
    "Polar",
]
