from dataclasses import dataclass

from hawkdove.model import GameInformation, Strategy
from hawkdove.strategies.base import DecisionFunction


@dataclass(frozen=True)
class CompositeStrategySetup:
    """
    Three policies, one per kind of encounter.  A setup is itself a
    decision function: ``setup(info)`` dispatches to the matching policy.
    """
    no_history_strategy: DecisionFunction
    same_color_strategy: DecisionFunction
    different_color_strategy: DecisionFunction

    def select(self, info: GameInformation) -> DecisionFunction:
        if not info.history_view.has_history:
            return self.no_history_strategy
        if info.opponent_color == info.agent.color:
            return self.same_color_strategy
        return self.different_color_strategy

    def __call__(self, info: GameInformation) -> Strategy:
        return composite_strategy(self, info)


def composite_strategy(setup: CompositeStrategySetup, info: GameInformation) -> Strategy:
    return setup.select(info)(info)
