"""
HistoryView implementations handed to decision functions.
"""
import logging
from typing import Dict, Hashable, Optional, Tuple

from hawkdove.history.base import History, HistoryView
from hawkdove.model import Agent, ChallengeType, Color
from hawkdove.stats import StrategyStats

logger = logging.getLogger(__name__)

_StatsKey = Tuple[Hashable, Color, Optional[ChallengeType]]


class DirectHistoryView(HistoryView):
    """Passes every query straight through to the underlying history."""

    def __init__(self, history: History):
        self._history = history

    @property
    def history(self) -> History:
        return self._history

    def strategy_stats_for(self,
                           agent: Agent,
                           color: Color,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        return self._history.strategy_stats_for(agent, color, challenge_type)


class CachingHistoryView(HistoryView):
    """
    Memoizes per-agent statistics for the current round.

    The cache is keyed by (agent id, color, challenge type) and dropped as
    soon as the underlying history reports a different round count, so a
    view can be kept across rounds by the driver.
    """

    def __init__(self, history: History):
        self._history = history
        self._cache: Dict[_StatsKey, StrategyStats] = {}
        self._cached_round = history.round_count

    @property
    def history(self) -> History:
        return self._history

    def _sync(self):
        round_count = self._history.round_count
        if round_count != self._cached_round:
            logger.debug(f"History moved from round {self._cached_round} to {round_count}; "
                         f"dropping {len(self._cache)} cached stats")
            self._cache = {}
            self._cached_round = round_count

    def strategy_stats_for(self,
                           agent: Agent,
                           color: Color,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        self._sync()
        key = (agent.id, color, challenge_type)
        stats = self._cache.get(key)
        if stats is None:
            stats = self._history.strategy_stats_for(agent, color, challenge_type)
            self._cache[key] = stats
        return stats

    def cache_size(self) -> int:
        return len(self._cache)
