"""
Domain models and value objects.

Contains interchange records built on top of the core math types.
"""

from src.core.domain.complex_record import ComplexRecord

__all__ = [
    "ComplexRecord",
]
