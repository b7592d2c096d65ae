"""
Contract Module

Текстовый и JSON форматы обмена комплексными значениями.
"""

from .text_codec import (
    LINE_TERMINATOR,
    deserialize,
    read_complex,
    serialize,
    write_complex,
)
from .validators import (
    COMPLEX_VALUE_SCHEMA,
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex_value,
)

__all__ = [
    # Text codec
    "LINE_TERMINATOR",
    "serialize",
    "deserialize",
    "write_complex",
    "read_complex",
    # JSON Schema — Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    # JSON Schema — Functions
    "COMPLEX_VALUE_SCHEMA",
    "validate_complex_value",
]
