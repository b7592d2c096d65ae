"""
Text Codec — Двухстрочный текстовый формат ComplexValue

Формат (байт-в-байт стабилен, ранее сохранённые значения должны читаться):

    <str(real)>\\n
    <str(imag)>\\n

Чтение: одна строка → parser(line) → real, следующая строка → parser(line)
→ imag. Отсутствующая строка читается как пустая и передаётся парсеру,
который сам сообщает об ошибке. Всё, что идёт после двух строк, не читается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. deserialize(serialize(x), F) == x, если F делает точный round-trip
2. Ошибки парсинга не перехватываются: пробрасывается ошибка парсера F
3. Предварительная валидация строк не выполняется
"""

import io
import logging
from typing import Final, TextIO

from src.core.math.complex_without_sqrt import ComplexValue
from src.core.math.field_contract import DEFAULT_FIELD_PARSER, FieldParser

logger = logging.getLogger(__name__)

# Разделитель строк формата
LINE_TERMINATOR: Final[str] = "\n"


# =============================================================================
# STREAM API
# =============================================================================


def write_complex(stream: TextIO, z: ComplexValue) -> None:
    """
    Запись значения в текстовый поток: две строки, real затем imag.

    Args:
        stream: Текстовый поток для записи
        z: Записываемое значение
    """
    stream.write(serialize(z))


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if line.endswith(LINE_TERMINATOR):
        line = line[: -len(LINE_TERMINATOR)]
    return line


def read_complex(stream: TextIO, parser: FieldParser = DEFAULT_FIELD_PARSER) -> ComplexValue:
    """
    Чтение значения из текстового потока.

    Args:
        stream: Текстовый поток, позиционированный на строке real
        parser: Конструктор элемента поля из текста (default: Fraction)

    Returns:
        Прочитанное значение; поток сдвинут ровно на две строки

    Raises:
        Ошибку парсера (ValueError для Fraction), если строка не разбирается
    """
    real = parser(_read_line(stream))
    imag = parser(_read_line(stream))
    logger.debug("Read complex value real=%s imag=%s", real, imag)
    return ComplexValue(real, imag)


# =============================================================================
# STRING API
# =============================================================================


def serialize(z: ComplexValue) -> str:
    """
    Текстовое представление значения.

    Examples:
        >>> from fractions import Fraction
        >>> serialize(ComplexValue(Fraction(3, 4), Fraction(-1)))
        '3/4\\n-1\\n'
    """
    return f"{z.real}{LINE_TERMINATOR}{z.imag}{LINE_TERMINATOR}"


def deserialize(text: str, parser: FieldParser = DEFAULT_FIELD_PARSER) -> ComplexValue:
    """
    Разбор текстового представления значения.

    Args:
        text: Две строки в формате serialize()
        parser: Конструктор элемента поля из текста (default: Fraction)

    Returns:
        Восстановленное значение

    Raises:
        Ошибку парсера (ValueError для Fraction), если строка не разбирается
    """
    return read_complex(io.StringIO(text, newline=LINE_TERMINATOR), parser)
