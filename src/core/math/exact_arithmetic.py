"""
Exact Arithmetic — Точное целочисленное умножение

Модуль гарантирует отсутствие потери точности при умножении множителей:
- Операнды обязаны быть настоящими int (bool, float, Decimal отклоняются)
- Произведение вычисляется в произвольной точности (Python int)
- Форматирование всегда в виде полной десятичной записи

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. exact_multiply(a, b) == a * b для любых int без ограничения разрядности
2. format_exact никогда не использует научную нотацию и не усекает цифры
3. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# Максимальная разрядность по умолчанию для проверок представимости
DEFAULT_SIGNED_BITS: Final[int] = 64


def _require_int(value: object, name: str) -> int:
    """bool — подкласс int, но как множитель недопустим."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def exact_multiply(a: int, b: int) -> int:
    """
    Точное умножение двух целых чисел.

    Python int не имеет фиксированной разрядности, поэтому результат
    не переполняется независимо от величины операндов.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Точное произведение a * b

    Raises:
        TypeError: Если операнд не int (или является bool)

    Examples:
        >>> exact_multiply(999_999_999, 999_999_999)
        999999998000000001
        >>> exact_multiply(1_000_000, 1_000_000)
        1000000000000
    """
    return _require_int(a, "a") * _require_int(b, "b")


def format_exact(value: int) -> str:
    """
    Полная десятичная запись целого числа.

    Examples:
        >>> format_exact(999999998000000001)
        '999999998000000001'
    """
    return str(_require_int(value, "value"))


def fits_in_signed_bits(value: int, bits: int = DEFAULT_SIGNED_BITS) -> bool:
    """
    Проверка, помещается ли value в знаковое целое разрядности bits.

    Args:
        value: Проверяемое значение
        bits: Разрядность (>= 2)

    Returns:
        True если -2**(bits-1) <= value < 2**(bits-1)

    Examples:
        >>> fits_in_signed_bits(2**31 - 1, 32)
        True
        >>> fits_in_signed_bits(2**31, 32)
        False
    """
    if bits < 2:
        raise ValueError(f"bits must be at least 2, got {bits}")

    limit = 1 << (bits - 1)
    return -limit <= _require_int(value, "value") < limit
