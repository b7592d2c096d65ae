"""
ComplexRecord — JSON-представление комплексного значения

Immutable Pydantic модель для обмена комплексными значениями в JSON.
Компоненты хранятся в текстовой форме поля F (str(x)), поэтому точность не
теряется. Соответствует схеме contracts/schema/complex_value.json.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.complex_without_sqrt import ComplexValue
from src.core.math.field_contract import DEFAULT_FIELD_PARSER, FieldParser


class ComplexRecord(BaseModel):
    """
    Текстовая запись комплексного значения.

    Каждая компонента: непустая однострочная строка, чтобы запись без потерь
    переводилась и в двухстрочный текстовый формат.
    """

    real: str = Field(..., min_length=1, description="Текстовая форма real (например, '3/4')")
    imag: str = Field(..., min_length=1, description="Текстовая форма imag (например, '-1')")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    @field_validator("real", "imag")
    @classmethod
    def validate_single_line(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError(f"component text must be a single line, got {v!r}")
        return v

    @classmethod
    def from_complex(cls, z: ComplexValue) -> "ComplexRecord":
        """
        Запись из значения.

        Args:
            z: Комплексное значение

        Returns:
            Запись с str(real), str(imag)
        """
        return cls(real=str(z.real), imag=str(z.imag))

    def to_complex(self, parser: FieldParser = DEFAULT_FIELD_PARSER) -> ComplexValue:
        """
        Восстановление значения.

        Args:
            parser: Конструктор элемента поля из текста (default: Fraction)

        Returns:
            ComplexValue(parser(real), parser(imag))

        Raises:
            Ошибку парсера (ValueError для Fraction), если текст не разбирается
        """
        return ComplexValue(parser(self.real), parser(self.imag))
