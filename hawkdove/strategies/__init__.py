"""
Hawk-Dove decision functions and the dispatcher that combines them.
"""
from .base import DecisionFunction, StatsSource, strategy_name
from .composition import CompositeStrategySetup, composite_strategy
from .extra_modes import (
    depending_hawks_within_color_segment,
    nash_mixed_strategy_equilibrium_from_payoff_matrix,
    on_hawks_on_last_round,
)
from .game_modes import (
    expected_values,
    hawk_probability_from_parameters,
    highest_eu_on_different_color_game_for_individual_agent,
    highest_eu_on_different_color_game_for_individual_agent_non_cached,
    highest_expected_value_game,
    highest_expected_value_on_different_color_game,
    highest_expected_value_on_different_color_game_using_only_different_color_stats,
    keep_same_strategy,
    nash_mixed_strategy_equilibrium_from_payoff_parameters,
    on_based_of_last_encounter_with_opponent_color,
    random_choice_game,
)
from .sources import IndividualAgentStats, LastRoundStats

__all__ = [
    'DecisionFunction',
    'StatsSource',
    'strategy_name',
    'CompositeStrategySetup',
    'composite_strategy',
    'depending_hawks_within_color_segment',
    'nash_mixed_strategy_equilibrium_from_payoff_matrix',
    'on_hawks_on_last_round',
    'expected_values',
    'hawk_probability_from_parameters',
    'highest_eu_on_different_color_game_for_individual_agent',
    'highest_eu_on_different_color_game_for_individual_agent_non_cached',
    'highest_expected_value_game',
    'highest_expected_value_on_different_color_game',
    'highest_expected_value_on_different_color_game_using_only_different_color_stats',
    'keep_same_strategy',
    'nash_mixed_strategy_equilibrium_from_payoff_parameters',
    'on_based_of_last_encounter_with_opponent_color',
    'random_choice_game',
    'IndividualAgentStats',
    'LastRoundStats',
]
