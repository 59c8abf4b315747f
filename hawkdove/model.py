"""
Core value types for Hawk-Dove games between colored populations.

Everything here is immutable: the simulation driver builds a fresh
``GameInformation`` for each agent encounter and the decision functions in
``hawkdove.strategies`` only read from it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Hashable, Optional, Tuple

import numpy as np

if TYPE_CHECKING:
    from hawkdove.history.base import History, HistoryView


# Colors are opaque labels that split the population into segments.
Color = Hashable


class Strategy(Enum):
    HAWK = "Hawk"
    DOVE = "Dove"

    def __str__(self) -> str:
        return self.value


class ChallengeType(Enum):
    """Whether an encounter was within one color segment or across two."""
    SAME_COLOR = "SameColor"
    DIFFERENT_COLOR = "DifferentColor"

    @classmethod
    def between(cls, color: Color, other_color: Color) -> "ChallengeType":
        return cls.SAME_COLOR if color == other_color else cls.DIFFERENT_COLOR


# row / column order of PayoffMatrix.payoffs
STRATEGY_INDEX = {Strategy.HAWK: 0, Strategy.DOVE: 1}


@dataclass(frozen=True)
class Agent:
    id: int
    color: Color
    strategy: Optional[Strategy] = None   # None until the agent has played

    def with_strategy(self, strategy: Optional[Strategy]) -> "Agent":
        return replace(self, strategy=strategy)


@dataclass(frozen=True)
class PayoffMatrix:
    """
    Classical Hawk-Dove payoffs built from reward V and cost C.

    Attributes:
        revenue: Value of the contested resource (V)
        cost: Cost of losing an escalated fight (C)
        payoffs: 2x2 read-only array indexed [my move, opponent move],
            rows/columns ordered (Hawk, Dove)
    """
    revenue: float
    cost: float
    payoffs: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not (math.isfinite(self.revenue) and math.isfinite(self.cost)):
            raise ValueError(f"payoff parameters must be finite, got V={self.revenue}, C={self.cost}")
        if self.cost < 0:
            raise ValueError(f"cost must be non-negative, got C={self.cost}")

        V, C = float(self.revenue), float(self.cost)
        table = np.array([
            [(V - C) / 2.0, V],      # H vs H, H vs D
            [0.0, V / 2.0],          # D vs H, D vs D
        ], dtype=np.float64)
        table.setflags(write=False)
        object.__setattr__(self, "payoffs", table)

    @classmethod
    def hawk_dove(cls, V: float, C: float) -> "PayoffMatrix":
        return cls(revenue=V, cost=C)

    def get_my_payoff(self, my_move: Strategy, opponent_move: Strategy) -> float:
        return float(self.payoffs[STRATEGY_INDEX[my_move], STRATEGY_INDEX[opponent_move]])

    def get_payoff_for(self, my_move: Strategy, opponent_move: Strategy) -> Tuple[float, float]:
        """Return (my payoff, opponent payoff) for one pair of moves."""
        return (self.get_my_payoff(my_move, opponent_move),
                self.get_my_payoff(opponent_move, my_move))


@dataclass(frozen=True)
class GameInformation:
    """
    Everything a decision function may look at for one encounter.

    ``random_number`` is a single uniform draw in [0.0, 1.0) supplied by the
    driver, so replaying the same draws replays the same decisions.
    """
    agent: Agent
    opponent_color: Color
    payoff_matrix: PayoffMatrix
    history_view: "HistoryView"
    random_number: float

    def __post_init__(self):
        if not 0.0 <= self.random_number < 1.0:
            raise ValueError(f"random_number must lie in [0.0, 1.0), got {self.random_number}")

    @property
    def history(self) -> "History":
        """The underlying (non-cached) history behind ``history_view``."""
        return self.history_view.history
