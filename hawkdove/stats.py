from collections import Counter
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from hawkdove.model import Strategy


@dataclass(frozen=True)
class StrategyStats:
    """Hawk/Dove counts over some scoped set of past moves."""
    hawk_n: int = 0
    dove_n: int = 0

    def __post_init__(self):
        if self.hawk_n < 0 or self.dove_n < 0:
            raise ValueError(f"move counts may not be negative, got hawk_n={self.hawk_n}, dove_n={self.dove_n}")

    @classmethod
    def from_moves(cls, moves: Iterable[Strategy]) -> "StrategyStats":
        counts = Counter(moves)
        return cls(hawk_n=counts[Strategy.HAWK], dove_n=counts[Strategy.DOVE])

    @property
    def total(self) -> int:
        return self.hawk_n + self.dove_n

    # With no observations both portions are 0.0, so expected values collapse to a tie.
    @property
    def hawk_portion(self) -> float:
        return self.hawk_n / self.total if self.total else 0.0

    @property
    def dove_portion(self) -> float:
        return self.dove_n / self.total if self.total else 0.0

    @property
    def mixture(self) -> np.ndarray:
        """[hawk_portion, dove_portion], ordered like PayoffMatrix.payoffs."""
        return np.array([self.hawk_portion, self.dove_portion], dtype=np.float64)

    def __add__(self, other: "StrategyStats") -> "StrategyStats":
        return StrategyStats(self.hawk_n + other.hawk_n, self.dove_n + other.dove_n)
