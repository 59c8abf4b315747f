"""In-memory history store: append whole rounds, aggregate on demand."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from hawkdove.history.base import History, RoundStatistics
from hawkdove.model import Agent, ChallengeType, Color, Strategy
from hawkdove.stats import StrategyStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Challenge:
    """One encounter between two agents and the moves they played."""
    first: Agent
    first_move: Strategy
    second: Agent
    second_move: Strategy

    def __post_init__(self):
        if self.first.id == self.second.id:
            raise ValueError(f"agent {self.first.id} cannot challenge itself")

    @property
    def challenge_type(self) -> ChallengeType:
        return ChallengeType.between(self.first.color, self.second.color)

    def moves(self) -> Iterator[Tuple[Agent, Strategy, Agent]]:
        """Yield (actor, move, opponent) for both sides of the challenge."""
        yield self.first, self.first_move, self.second
        yield self.second, self.second_move, self.first


class RoundChallenges(RoundStatistics):
    def __init__(self, challenges: Iterable[Challenge] = ()):
        self.challenges: Tuple[Challenge, ...] = tuple(challenges)

    def __len__(self) -> int:
        return len(self.challenges)

    def strategy_stats_for(self,
                           color: Optional[Color] = None,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        return StrategyStats.from_moves(
            move
            for challenge in self.challenges
            if challenge_type is None or challenge.challenge_type == challenge_type
            for actor, move, _ in challenge.moves()
            if color is None or actor.color == color
        )

    def strategy_stats_against(self,
                               agent: Agent,
                               color: Color,
                               challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        """Moves that opponents of ``color`` played against ``agent`` in this round."""
        return StrategyStats.from_moves(
            move
            for challenge in self.challenges
            if challenge_type is None or challenge.challenge_type == challenge_type
            for actor, move, opponent in challenge.moves()
            if opponent.id == agent.id and actor.color == color
        )


class InMemoryHistory(History):
    """
    Grow-only store of rounds.  The driver appends a round once every agent
    has decided; nothing is mutated while a round is being evaluated.
    """

    def __init__(self, rounds: Iterable[Iterable[Challenge]] = ()):
        self._rounds: List[RoundChallenges] = []
        for challenges in rounds:
            self.add_round(challenges)

    # ---------------- write ----------------
    def add_round(self, challenges: Iterable[Challenge]) -> RoundChallenges:
        round_challenges = RoundChallenges(challenges)
        self._rounds.append(round_challenges)
        logger.info(f"Recorded round {len(self._rounds)} with {len(round_challenges)} challenges")
        return round_challenges

    # ---------------- read helpers ----------------
    @property
    def round_count(self) -> int:
        return len(self._rounds)

    @property
    def rounds(self) -> Tuple[RoundChallenges, ...]:
        return tuple(self._rounds)

    @property
    def last_round_challenges(self) -> RoundChallenges:
        if not self._rounds:
            return RoundChallenges()
        return self._rounds[-1]

    def strategy_stats_for(self,
                           agent: Agent,
                           color: Color,
                           challenge_type: Optional[ChallengeType] = None) -> StrategyStats:
        return sum((round_challenges.strategy_stats_against(agent, color, challenge_type)
                    for round_challenges in self._rounds),
                   StrategyStats())
