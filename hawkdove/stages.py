"""
Catalog of simulation stages.

A stage is a named decision function, usually a CompositeStrategySetup
wired from the policies in ``hawkdove.strategies``.  Adding a variant means
registering a new setup here; the policies themselves are never edited.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from tabulate import tabulate

from hawkdove.strategies import (
    CompositeStrategySetup,
    DecisionFunction,
    depending_hawks_within_color_segment,
    highest_eu_on_different_color_game_for_individual_agent,
    highest_eu_on_different_color_game_for_individual_agent_non_cached,
    highest_expected_value_on_different_color_game,
    highest_expected_value_on_different_color_game_using_only_different_color_stats,
    keep_same_strategy,
    nash_mixed_strategy_equilibrium_from_payoff_parameters,
    strategy_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stage:
    name: str
    decide: DecisionFunction
    description: str = ""

    @property
    def setup(self) -> Optional[CompositeStrategySetup]:
        return self.decide if isinstance(self.decide, CompositeStrategySetup) else None


class StageRegistry:
    """
    Mapping from stage name to decision function.
    """

    def __init__(self):
        self._stages: Dict[str, Stage] = {}

    def register(self,
                 name: str,
                 decide: DecisionFunction,
                 description: str = "",
                 overwrite: bool = False) -> Stage:
        """
        Add a stage to the catalog.

        Args:
            name: Unique stage identifier
            decide: Decision function used for every encounter of the stage
            description: Free-text note shown by describe()
            overwrite: Replace an existing stage of the same name

        Returns:
            The registered Stage
        """
        if not callable(decide):
            raise TypeError(f"stage '{name}' needs a callable decision function, got {decide!r}")
        if name in self._stages and not overwrite:
            raise ValueError(f"stage '{name}' is already registered")
        stage = Stage(name=name, decide=decide, description=description)
        self._stages[name] = stage
        return stage

    def get(self, name: str) -> Stage:
        try:
            return self._stages[name]
        except KeyError:
            raise KeyError(f"unknown stage '{name}'; available stages: {', '.join(self._stages)}") from None

    def decision_function(self, name: str) -> DecisionFunction:
        logger.debug(f"Using stage '{name}'")
        return self.get(name).decide

    def names(self) -> List[str]:
        return list(self._stages)

    def __getitem__(self, name: str) -> DecisionFunction:
        return self.decision_function(name)

    def __contains__(self, name: object) -> bool:
        return name in self._stages

    def __iter__(self) -> Iterator[str]:
        return iter(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def describe(self, tablefmt: str = "pipe") -> str:
        """Table of every stage and the policy used for each kind of encounter."""
        headers = ["Stage", "No history", "Same color", "Different color", "Description"]
        rows = []
        for stage in self._stages.values():
            setup = stage.setup
            if setup is None:
                policies = [strategy_name(stage.decide)] * 3
            else:
                policies = [strategy_name(setup.no_history_strategy),
                            strategy_name(setup.same_color_strategy),
                            strategy_name(setup.different_color_strategy)]
            rows.append([stage.name, *policies, stage.description])
        return tabulate(rows, headers=headers, tablefmt=tablefmt)


def build_default_registry() -> StageRegistry:
    nash = nash_mixed_strategy_equilibrium_from_payoff_parameters

    registry = StageRegistry()
    registry.register(
        "stage1", nash,
        "Mixed equilibrium from V and C for every encounter")
    registry.register(
        "stage2",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=nash,
            different_color_strategy=highest_expected_value_on_different_color_game_using_only_different_color_stats),
        "Best response to last round's different-color moves of the opponent color")
    registry.register(
        "stage2_v2_all_encounters",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=nash,
            different_color_strategy=highest_expected_value_on_different_color_game),
        "Best response to all of last round's moves of the opponent color")
    registry.register(
        "stage2_v3_keep_same_as_same_color_strategy",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=keep_same_strategy,
            different_color_strategy=highest_expected_value_on_different_color_game),
        "Same-color encounters repeat the previous move")
    registry.register(
        "stage2_v4_depending_hawks_within_color_segment",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=depending_hawks_within_color_segment,
            different_color_strategy=highest_expected_value_on_different_color_game),
        "Same-color encounters copy the segment's last-round Hawk share")
    registry.register(
        "stage2_v5_with_full_individual_history",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=nash,
            different_color_strategy=highest_eu_on_different_color_game_for_individual_agent()),
        "Best response to the agent's own record against the opponent color")
    registry.register(
        "stage2_v5_with_full_individual_history_non_cached",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=nash,
            different_color_strategy=highest_eu_on_different_color_game_for_individual_agent_non_cached()),
        "As stage2_v5_with_full_individual_history, reading the history directly")
    registry.register(
        "stage3",
        CompositeStrategySetup(
            no_history_strategy=nash,
            same_color_strategy=keep_same_strategy,
            different_color_strategy=highest_expected_value_on_different_color_game),
        "Persistence within colors, best response across colors")

    logger.info(f"Built stage registry with {len(registry)} stages")
    return registry


STAGES = build_default_registry()


def get_stage(name: str) -> DecisionFunction:
    return STAGES.decision_function(name)
