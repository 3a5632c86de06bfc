"""
RandomPair — Пара независимых случайных множителей

Immutable Pydantic модель. Каждое значение лежит в [LOWER_BOUND, UPPER_BOUND].
"""

from pydantic import BaseModel, Field

from src.core.domain.bounds import LOWER_BOUND, UPPER_BOUND, Bound


class RandomPair(BaseModel):
    """
    Два независимо сгенерированных множителя.

    Между number1 и number2 нет никакой связи кроме независимости.
    Строгий режим: bool/float/str не приводятся к int.
    """

    number1: int = Field(..., strict=True, ge=LOWER_BOUND, le=UPPER_BOUND, description="Первый множитель")
    number2: int = Field(..., strict=True, ge=LOWER_BOUND, le=UPPER_BOUND, description="Второй множитель")

    model_config = {"frozen": True}  # Immutable

    def within(self, bound: Bound) -> bool:
        """Проверка обоих значений против произвольного диапазона."""
        return bound.contains(self.number1) and bound.contains(self.number2)
