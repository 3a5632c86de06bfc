"""
Bound — Фиксированный диапазон случайных множителей

Единственный допустимый источник границ для генерации множителей:
- LOWER_BOUND = 1_000_000
- UPPER_BOUND = 999_999_999

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lower <= upper
2. Обе границы представимы в 32-битном знаковом целом
3. Диапазон замкнутый: [lower, upper] включительно
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

from src.core.math.exact_arithmetic import fits_in_signed_bits


# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

# Нижняя граница (включительно)
LOWER_BOUND: Final[int] = 1_000_000

# Верхняя граница (включительно)
UPPER_BOUND: Final[int] = 999_999_999

# Разрядность, в которую обязаны укладываться границы
BOUND_BIT_WIDTH: Final[int] = 32


# =============================================================================
# BOUND MODEL
# =============================================================================


class Bound(BaseModel):
    """
    Замкнутый диапазон [lower, upper] для равномерной генерации.

    Immutable модель (frozen=True). Значения по умолчанию совпадают с
    константами модуля, поэтому Bound() — канонический диапазон.
    """

    lower: int = Field(default=LOWER_BOUND, strict=True, description="Нижняя граница (включительно)")
    upper: int = Field(default=UPPER_BOUND, strict=True, description="Верхняя граница (включительно)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_bound(self) -> "Bound":
        """Проверка порядка границ и 32-битной представимости."""
        if self.lower > self.upper:
            raise ValueError(f"lower {self.lower} exceeds upper {self.upper}")

        for name, value in (("lower", self.lower), ("upper", self.upper)):
            if not fits_in_signed_bits(value, BOUND_BIT_WIDTH):
                raise ValueError(
                    f"{name} {value} does not fit in a {BOUND_BIT_WIDTH}-bit signed integer"
                )
        return self

    @property
    def span(self) -> int:
        """Количество целых чисел в диапазоне (upper - lower + 1)."""
        return self.upper - self.lower + 1

    def contains(self, value: int) -> bool:
        """
        Проверка принадлежности значения диапазону.

        bool не считается целым числом: True/False всегда вне диапазона.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.lower <= value <= self.upper


# Канонический диапазон
DEFAULT_BOUND: Final[Bound] = Bound()
