"""Report — текстовое представление результата умножения.

Канонический формат (INLINE):
    <number1> x <number2> = <product>

Альтернативный формат (LABELED), только для программных вызовов:
    First random number:  <number1>
    Second random number: <number2>
    Product:              <product>

Все числа выводятся полной десятичной записью через format_exact.
"""

from enum import Enum

from src.core.domain.product import Product
from src.core.math.exact_arithmetic import format_exact


class ReportFormat(str, Enum):
    """Формат отчёта."""

    INLINE = "inline"
    LABELED = "labeled"


def render_inline(product: Product) -> str:
    """Одна строка: 'A x B = P'."""
    return (
        f"{format_exact(product.number1)} x {format_exact(product.number2)}"
        f" = {format_exact(product.product)}"
    )


def render_labeled(product: Product) -> str:
    """Три строки с выровненными подписями."""
    return "\n".join(
        [
            f"First random number:  {format_exact(product.number1)}",
            f"Second random number: {format_exact(product.number2)}",
            f"Product:              {format_exact(product.product)}",
        ]
    )


def render(product: Product, report_format: ReportFormat = ReportFormat.INLINE) -> str:
    """
    Рендеринг отчёта в заданном формате.

    Args:
        product: Результат умножения
        report_format: Формат отчёта (default: INLINE)

    Returns:
        Текст отчёта без завершающего перевода строки

    Raises:
        ValueError: Если формат неизвестен
    """
    if report_format == ReportFormat.INLINE:
        return render_inline(product)
    if report_format == ReportFormat.LABELED:
        return render_labeled(product)
    raise ValueError(f"Unknown report format: {report_format!r}")
