"""Multiplier — случайное произведение двух ограниченных целых.

Пайплайн: random source → RandomPair → Product → текстовый отчёт.
"""

from .multiplier import (
    FatalRuntimeError,
    Multiplier,
    MultiplierConfig,
    MultiplierResult,
)
from .random_source import (
    RandomSource,
    RandomSourceExhausted,
    SeededRandomSource,
    SequenceRandomSource,
    SystemRandomSource,
    default_random_source,
)
from .report import ReportFormat, render, render_inline, render_labeled

__all__ = [
    # Multiplier
    "Multiplier",
    "MultiplierConfig",
    "MultiplierResult",
    "FatalRuntimeError",
    # Random sources
    "RandomSource",
    "RandomSourceExhausted",
    "SystemRandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "default_random_source",
    # Report
    "ReportFormat",
    "render",
    "render_inline",
    "render_labeled",
]
