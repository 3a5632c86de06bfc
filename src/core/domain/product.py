"""
Product — Точное произведение пары множителей

Immutable Pydantic модель. Вычисляется один раз за запуск, не изменяется,
печатается, после чего процесс завершается.

Произведение может превышать 2**63 для произвольных множителей, поэтому
хранится как Python int (произвольная точность).
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from src.core.domain.bounds import LOWER_BOUND, UPPER_BOUND
from src.core.domain.random_pair import RandomPair
from src.core.math.exact_arithmetic import exact_multiply


class Product(BaseModel):
    """
    Результат точного умножения number1 * number2.

    Модель хранит множители вместе с произведением, чтобы отчёт
    строился из одного объекта.
    """

    number1: int = Field(..., strict=True, ge=LOWER_BOUND, le=UPPER_BOUND, description="Первый множитель")
    number2: int = Field(..., strict=True, ge=LOWER_BOUND, le=UPPER_BOUND, description="Второй множитель")
    product: int = Field(..., strict=True, description="Точное произведение")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_exact_product(self) -> "Product":
        """Произведение обязано совпадать с number1 * number2 бит в бит."""
        expected = exact_multiply(self.number1, self.number2)
        if self.product != expected:
            raise ValueError(
                f"product {self.product} != {self.number1} * {self.number2} ({expected})"
            )
        return self

    @classmethod
    def from_pair(cls, pair: RandomPair) -> "Product":
        """
        Вычисление произведения для пары.

        Args:
            pair: Пара множителей

        Returns:
            Product с точным произведением
        """
        return cls(
            number1=pair.number1,
            number2=pair.number2,
            product=exact_multiply(pair.number1, pair.number2),
        )

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в формат контракта multiplication_report."""
        return {
            "number1": self.number1,
            "number2": self.number2,
            "product": self.product,
        }
