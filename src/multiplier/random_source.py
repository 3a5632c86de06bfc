"""Random Source — источник случайных множителей.

Абстракция "следующее целое в диапазоне" позволяет подменять системный
генератор детерминированным в тестах:
- SystemRandomSource: random.Random(), засеянный энтропией ОС
- SeededRandomSource: random.Random(seed), воспроизводимый
- SequenceRandomSource: проигрывает заранее заданную последовательность
"""

import random
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Optional


class RandomSourceExhausted(Exception):
    """SequenceRandomSource исчерпал заданные значения."""

    pass


class RandomSource(ABC):
    """Абстрактный источник случайных целых."""

    @abstractmethod
    def randint(self, lower: int, upper: int) -> int:
        """Return random int in [lower, upper] inclusive."""
        pass


class SystemRandomSource(RandomSource):
    """
    Production источник без фиксированного seed.

    random.Random() без аргумента засевается из os.urandom (или времени,
    если urandom недоступен). Вывод недетерминирован между запусками.
    """

    def __init__(self):
        self._rng = random.Random()

    def randint(self, lower: int, upper: int) -> int:
        return self._rng.randint(lower, upper)


class SeededRandomSource(RandomSource):
    """Детерминированный источник, полностью определяется seed."""

    def __init__(self, seed: int):
        self._rng = random.Random(seed)
        self.seed = seed

    def randint(self, lower: int, upper: int) -> int:
        return self._rng.randint(lower, upper)


class SequenceRandomSource(RandomSource):
    """
    Источник, возвращающий заранее заданные значения по порядку.

    Значения возвращаются как есть, без проверки против [lower, upper]:
    проверку диапазона выполняет вызывающая сторона.
    """

    def __init__(self, values: Iterable[int]):
        self._values = deque(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, lower: int, upper: int) -> int:
        self.calls.append((lower, upper))
        if not self._values:
            raise RandomSourceExhausted(
                f"no values left for randint({lower}, {upper})"
            )
        return self._values.popleft()

    @property
    def remaining(self) -> int:
        return len(self._values)


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """SeededRandomSource если задан seed, иначе SystemRandomSource."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)
