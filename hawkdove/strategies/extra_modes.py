"""
Experimental policies.  Only ``depending_hawks_within_color_segment`` is
wired into a stage (stage2_v4); the others are kept for comparison runs.
"""
from hawkdove.model import GameInformation, PayoffMatrix, Strategy


def hawk_probability_from_payoff_matrix(payoff_matrix: PayoffMatrix) -> float:
    """
    Equilibrium share of Hawks derived from the four payoff quadrants
    instead of the V and C parameters.  Agrees with V / C for the classical
    matrix.
    """
    hawk_max, dove_min = payoff_matrix.get_payoff_for(Strategy.HAWK, Strategy.DOVE)
    dove_max, _ = payoff_matrix.get_payoff_for(Strategy.DOVE, Strategy.DOVE)
    hawk_min, _ = payoff_matrix.get_payoff_for(Strategy.HAWK, Strategy.HAWK)

    if hawk_min - dove_min == 0.0:
        return 1.0
    hawks_per_dove = (dove_max - hawk_max) / (hawk_min - dove_min)
    # C == 0
    if 1.0 + hawks_per_dove == 0.0:
        return 1.0
    return min(1.0, hawks_per_dove / (1.0 + hawks_per_dove))


def nash_mixed_strategy_equilibrium_from_payoff_matrix(info: GameInformation) -> Strategy:
    if info.random_number < hawk_probability_from_payoff_matrix(info.payoff_matrix):
        return Strategy.HAWK
    return Strategy.DOVE


def depending_hawks_within_color_segment(info: GameInformation) -> Strategy:
    """Play Hawk as often as the opponent's color did last round."""
    last_round = info.history.last_round_challenges.strategy_stats_for(info.opponent_color)
    if info.random_number < last_round.hawk_portion:
        return Strategy.HAWK
    return Strategy.DOVE


def on_hawks_on_last_round(info: GameInformation) -> Strategy:
    """Play Hawk as often as the whole population did last round."""
    last_round = info.history.last_round_challenges.strategy_stats_for()
    if info.random_number < last_round.hawk_portion:
        return Strategy.HAWK
    return Strategy.DOVE
