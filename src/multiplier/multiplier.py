"""Multiplier — генерация двух случайных множителей и их точное произведение.

Последовательность (одна, линейная):
1. number1, number2 ← равномерно из [LOWER_BOUND, UPPER_BOUND]
2. product = number1 * number2 (произвольная точность)
3. Рендеринг отчёта и вывод в stdout

Ошибки:
- Любой сбой источника случайности, выход за диапазон, ошибка арифметики
  или нарушение контракта → FatalRuntimeError
- Восстановления нет: либо полный отчёт, либо ничего в stdout
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from jsonschema import ValidationError as ContractValidationError
from pydantic import ValidationError

from src.core.contracts import validate_multiplication_report
from src.core.domain.bounds import DEFAULT_BOUND
from src.core.domain.product import Product
from src.core.domain.random_pair import RandomPair
from src.multiplier.random_source import RandomSource, default_random_source
from src.multiplier.report import ReportFormat, render

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FatalRuntimeError(Exception):
    """
    Неустранимая ошибка выполнения.

    Покрывает невозможность получить случайное число и сбой арифметики.
    При возникновении процесс завершается с ненулевым кодом, stdout пуст.
    """

    pass


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class MultiplierConfig:
    """Конфигурация Multiplier.

    Внутренний шов для тестов; CLI всегда использует значения по умолчанию.
    """

    report_format: ReportFormat = ReportFormat.INLINE

    # Проверка отчёта против multiplication_report.json перед выводом
    validate_contract: bool = True


@dataclass(frozen=True)
class MultiplierResult:
    """Результат одного запуска."""

    pair: RandomPair
    product: Product
    text: str


# =============================================================================
# MULTIPLIER
# =============================================================================


class Multiplier:
    """Генератор случайного произведения.

    Порядок:
    1. draw_pair(): два независимых randint в [lower, upper]
    2. Product.from_pair(): точное умножение
    3. render(): текст отчёта
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        config: Optional[MultiplierConfig] = None,
    ):
        """
        Args:
            random_source: источник случайности (default: SystemRandomSource)
            config: конфигурация (default: MultiplierConfig())
        """
        self.config = config or MultiplierConfig()
        self.bound = DEFAULT_BOUND
        self._random_source = random_source

    @property
    def random_source(self) -> RandomSource:
        # Создаётся при первом обращении, чтобы сбой энтропии попадал в FatalRuntimeError
        if self._random_source is None:
            try:
                self._random_source = default_random_source()
            except (OSError, NotImplementedError) as e:
                raise FatalRuntimeError(f"Random source unavailable: {e}") from e
        return self._random_source

    def _draw(self, name: str) -> int:
        source = self.random_source
        try:
            value = source.randint(self.bound.lower, self.bound.upper)
        except Exception as e:
            raise FatalRuntimeError(f"Failed to draw {name}: {e}") from e

        if not self.bound.contains(value):
            raise FatalRuntimeError(
                f"{name}={value!r} outside [{self.bound.lower}, {self.bound.upper}]"
            )
        return value

    def draw_pair(self) -> RandomPair:
        """Два независимых равномерных значения из диапазона.

        Raises:
            FatalRuntimeError: если источник недоступен или вернул значение вне диапазона
        """
        number1 = self._draw("number1")
        number2 = self._draw("number2")
        logger.debug("Drew number1=%d number2=%d", number1, number2)

        try:
            return RandomPair(number1=number1, number2=number2)
        except ValidationError as e:
            raise FatalRuntimeError(f"Invalid random pair: {e}") from e

    def multiply(self, pair: RandomPair) -> Product:
        """Точное произведение пары.

        Raises:
            FatalRuntimeError: если произведение не удалось построить
        """
        try:
            product = Product.from_pair(pair)
        except (TypeError, ValidationError) as e:
            raise FatalRuntimeError(f"Exact multiplication failed: {e}") from e

        if self.config.validate_contract:
            try:
                validate_multiplication_report(product.to_contract())
            except ContractValidationError as e:
                raise FatalRuntimeError(
                    f"Report violates multiplication_report contract: {e.message}"
                ) from e
            except (OSError, ValueError) as e:
                # Схема отсутствует, не читается или сама невалидна
                raise FatalRuntimeError(
                    f"multiplication_report contract unavailable: {e}"
                ) from e

        logger.debug("Product %d", product.product)
        return product

    def run(self) -> MultiplierResult:
        """Полная последовательность без вывода.

        Returns:
            MultiplierResult с парой, произведением и текстом отчёта
        """
        pair = self.draw_pair()
        product = self.multiply(pair)
        text = render(product, self.config.report_format)
        return MultiplierResult(pair=pair, product=product, text=text)

    def run_and_print(self, stream: Optional[TextIO] = None) -> MultiplierResult:
        """Полная последовательность с выводом отчёта.

        Отчёт пишется только после успешного вычисления, поэтому при
        FatalRuntimeError в stream ничего не попадает.

        Args:
            stream: поток вывода (default: sys.stdout)
        """
        result = self.run()
        out = stream if stream is not None else sys.stdout
        print(result.text, file=out)
        return result
