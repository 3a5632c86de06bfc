"""CLI — точка входа процесса.

Без аргументов и флагов: один запуск Multiplier и выход.

Коды выхода:
- 0: отчёт напечатан
- 1: FatalRuntimeError (сообщение в stderr, stdout пуст)
"""

import logging
from typing import Final, Optional, TextIO

from src.multiplier.logging_util import init_logging
from src.multiplier.multiplier import FatalRuntimeError, Multiplier
from src.multiplier.random_source import RandomSource

logger = logging.getLogger(__name__)

EXIT_OK: Final[int] = 0
EXIT_FATAL: Final[int] = 1

LOG_LEVEL: Final[str] = "warning"


def run(random_source: Optional[RandomSource] = None, stream: Optional[TextIO] = None) -> int:
    """Один запуск с преобразованием FatalRuntimeError в код выхода."""
    try:
        Multiplier(random_source=random_source).run_and_print(stream)
    except FatalRuntimeError as e:
        logger.error("Fatal: %s", e)
        return EXIT_FATAL
    return EXIT_OK


def main() -> int:
    init_logging(LOG_LEVEL)
    return run()
