"""
Statistics sources for the expected-value policies.

Each source is a small frozen callable ``(info) -> StrategyStats``; the
expected-value arithmetic is the same for all of them.
"""
from dataclasses import dataclass
from typing import Optional

from hawkdove.model import ChallengeType, GameInformation
from hawkdove.stats import StrategyStats


@dataclass(frozen=True)
class LastRoundStats:
    """Population moves of the opponent's color during the previous round."""
    challenge_type: Optional[ChallengeType] = None

    def __call__(self, info: GameInformation) -> StrategyStats:
        last_round = info.history.last_round_challenges
        return last_round.strategy_stats_for(info.opponent_color, self.challenge_type)


@dataclass(frozen=True)
class IndividualAgentStats:
    """
    Moves the opponent's color has played against the acting agent over the
    whole history.  ``cached=False`` bypasses the view and asks the
    underlying history directly; both give the same numbers.
    """
    challenge_type: Optional[ChallengeType] = None
    cached: bool = True

    def __call__(self, info: GameInformation) -> StrategyStats:
        store = info.history_view if self.cached else info.history
        return store.strategy_stats_for(info.agent, info.opponent_color, self.challenge_type)
