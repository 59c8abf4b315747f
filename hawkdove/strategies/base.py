"""
Shared types for decision functions.
"""
from functools import partial
from typing import Callable

from hawkdove.model import GameInformation, Strategy
from hawkdove.stats import StrategyStats

# A policy: pure function from one encounter's information to a move.
DecisionFunction = Callable[[GameInformation], Strategy]

# Selects which statistics an expected-value policy estimates the opponent from.
StatsSource = Callable[[GameInformation], StrategyStats]


def strategy_name(decide: Callable) -> str:
    """Readable name for a decision function, partial or callable object."""
    if isinstance(decide, partial):
        args = ", ".join(strategy_name(a) if callable(a) else repr(a) for a in decide.args)
        return f"{strategy_name(decide.func)}({args})"
    name = getattr(decide, "__name__", None)
    if name is not None:
        return name
    return repr(decide)
