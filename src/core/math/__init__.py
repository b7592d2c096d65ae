"""
Core math modules

Точная комплексная арифметика над произвольным полем без извлечения корней.
"""

# Field Contract
from src.core.math.field_contract import (
    DEFAULT_FIELD_PARSER,
    FieldElement,
    FieldParser,
    field_zero,
    is_field_element,
)

# Complex Without Sqrt
from src.core.math.complex_without_sqrt import (
    ComplexValue,
    add,
    conjugate,
    divide,
    equals,
    multiply,
    negate,
    not_equals,
    squared_modulus,
    subtract,
)

# Cross Ratio
from src.core.math.cross_ratio import (
    cross_ratio,
    fourth_point_from_cross_ratio,
)

__all__ = [
    # Field Contract
    "DEFAULT_FIELD_PARSER",
    "FieldElement",
    "FieldParser",
    "field_zero",
    "is_field_element",
    # Complex Without Sqrt — Types
    "ComplexValue",
    # Complex Without Sqrt — Functions
    "add",
    "conjugate",
    "divide",
    "equals",
    "multiply",
    "negate",
    "not_equals",
    "squared_modulus",
    "subtract",
    # Cross Ratio
    "cross_ratio",
    "fourth_point_from_cross_ratio",
]
