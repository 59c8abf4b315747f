"""
Primary Hawk-Dove policies.

Every policy has the signature ``(info: GameInformation) -> Strategy``, reads
only from ``info`` and compares ``info.random_number`` (range [0.0, 1.0))
against a probability of playing Hawk.
"""
from functools import partial
from typing import Optional, Tuple

from hawkdove.model import ChallengeType, GameInformation, PayoffMatrix, Strategy
from hawkdove.stats import StrategyStats
from hawkdove.strategies.base import StatsSource
from hawkdove.strategies.sources import IndividualAgentStats, LastRoundStats


def random_choice_game(info: GameInformation) -> Strategy:
    """Fair coin; used as the tie-break when both moves are worth the same."""
    chance_of_hawk = 0.5
    if info.random_number < chance_of_hawk:
        return Strategy.HAWK
    return Strategy.DOVE


def hawk_probability_from_parameters(payoff_matrix: PayoffMatrix) -> float:
    """
    Share of Hawks in the mixed equilibrium, V / C capped at 1.
    A free fight (C == 0) always favors Hawk.
    """
    C = payoff_matrix.cost
    V = payoff_matrix.revenue
    if C == 0.0:
        return 1.0
    return min(1.0, V / C)


def nash_mixed_strategy_equilibrium_from_payoff_parameters(info: GameInformation) -> Strategy:
    if info.random_number < hawk_probability_from_parameters(info.payoff_matrix):
        return Strategy.HAWK
    return Strategy.DOVE


def keep_same_strategy(info: GameInformation) -> Strategy:
    """Repeat the previous move; agents that never played fall back to the equilibrium."""
    if info.agent.strategy is None:
        return nash_mixed_strategy_equilibrium_from_payoff_parameters(info)
    return info.agent.strategy


def on_based_of_last_encounter_with_opponent_color(info: GameInformation) -> Strategy:
    """
    Exploit an opponent color that never yields (or never escalates) in
    different-color challenges against this agent; otherwise play the
    equilibrium.  The Dove check comes first, so an empty record means Hawk.
    """
    stats = info.history_view.strategy_stats_for(
        info.agent, info.opponent_color, ChallengeType.DIFFERENT_COLOR)

    if stats.dove_n == 0:
        return Strategy.HAWK
    if stats.hawk_n == 0:
        return Strategy.DOVE
    return nash_mixed_strategy_equilibrium_from_payoff_parameters(info)


def expected_values(payoff_matrix: PayoffMatrix, stats: StrategyStats) -> Tuple[float, float]:
    """
    Expected payoff of playing Hawk and of playing Dove against an opponent
    mixing according to ``stats``.

    E.g. for V = 10, C = 20 and 30% Hawks:
        evHawk = 0.3 * -5 + 0.7 * 10 = 5.5
        evDove = 0.3 *  0 + 0.7 *  5 = 3.5
    """
    ev_hawk, ev_dove = payoff_matrix.payoffs @ stats.mixture
    return float(ev_hawk), float(ev_dove)


def highest_expected_value_game(stats_source: StatsSource, info: GameInformation) -> Strategy:
    """
    One-step best response to the opponent color's estimated mix.

    Args:
        stats_source: Picks the statistics used to estimate the opponent
        info: The encounter

    Returns:
        The move with the higher expected payoff; a random choice on a tie
    """
    ev_hawk, ev_dove = expected_values(info.payoff_matrix, stats_source(info))

    diff = ev_hawk - ev_dove
    if diff == 0.0:
        return random_choice_game(info)
    if diff > 0.0:
        return Strategy.HAWK
    return Strategy.DOVE


highest_expected_value_on_different_color_game = partial(
    highest_expected_value_game, LastRoundStats())

highest_expected_value_on_different_color_game_using_only_different_color_stats = partial(
    highest_expected_value_game, LastRoundStats(ChallengeType.DIFFERENT_COLOR))


def highest_eu_on_different_color_game_for_individual_agent(
        challenge_type: Optional[ChallengeType] = None):
    return partial(highest_expected_value_game, IndividualAgentStats(challenge_type))


def highest_eu_on_different_color_game_for_individual_agent_non_cached(
        challenge_type: Optional[ChallengeType] = None):
    return partial(highest_expected_value_game, IndividualAgentStats(challenge_type, cached=False))
