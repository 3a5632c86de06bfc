"""
Contract Validation Module

Модуль для валидации JSON контрактов отчёта об умножении.
"""

from .validators import (
    ContractValidator,
    MultiplicationReportValidator,
    SchemaLoader,
    validate_multiplication_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MultiplicationReportValidator",
    # Functions
    "validate_multiplication_report",
]
