"""
Query interfaces for round history and strategy statistics.
Decision functions only read through these; stores are mutated by the
driver between rounds.
"""
from abc import ABC, abstractmethod
from typing import Optional

from hawkdove.model import Agent, ChallengeType, Color
from hawkdove.stats import StrategyStats


class RoundStatistics(ABC):
    """
    Statistics scoped to the challenges of a single round.
    """

    @abstractmethod
    def strategy_stats_for(self,
                           color: Optional[Color] = None,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        """
        Count the moves played in this round.

        Args:
            color: Only count moves made by agents of this color (all colors if None)
            challenge_type: Only count challenges of this type (all if None)

        Returns:
            StrategyStats over the selected moves
        """
        pass


class History(ABC):
    """
    Cumulative record of every round played so far.
    """

    @property
    @abstractmethod
    def round_count(self) -> int:
        pass

    @property
    def has_history(self) -> bool:
        return self.round_count > 0

    @property
    @abstractmethod
    def last_round_challenges(self) -> RoundStatistics:
        """Statistics of the immediately preceding round only."""
        pass

    @abstractmethod
    def strategy_stats_for(self,
                           agent: Agent,
                           color: Color,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        """
        Count the moves that opponents of ``color`` played against ``agent``.

        Args:
            agent: The agent whose encounters are inspected
            color: Color of the opponents whose moves are counted
            challenge_type: Only count challenges of this type (all if None)

        Returns:
            StrategyStats over the full history
        """
        pass


class HistoryView(ABC):
    """
    Read-side facade over a History handed to decision functions.
    """

    @property
    @abstractmethod
    def history(self) -> History:
        pass

    @property
    def has_history(self) -> bool:
        return self.history.has_history

    @abstractmethod
    def strategy_stats_for(self,
                           agent: Agent,
                           color: Color,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        pass
