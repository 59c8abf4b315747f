"""
Unit tests for the Hawk-Dove policies.
These use an in-memory history or a fixed-statistics view; no driver is needed.
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path no matter where pytest is invoked from
# ---------------------------------------------------------------------------
import pathlib, sys
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from hawkdove.history import CachingHistoryView, Challenge, DirectHistoryView, HistoryView, InMemoryHistory
from hawkdove.model import Agent, ChallengeType, GameInformation, PayoffMatrix, Strategy
from hawkdove.stats import StrategyStats
from hawkdove.strategies import (
    IndividualAgentStats,
    LastRoundStats,
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
    depending_hawks_within_color_segment,
    on_hawks_on_last_round,
    random_choice_game,
)

HAWK, DOVE = Strategy.HAWK, Strategy.DOVE
RED, BLUE = "red", "blue"

RANDOM_NUMBERS = [0.0, 0.3, 0.49999, 0.5, 0.9999]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _FixedStatsView(HistoryView):
    """View that answers every per-agent query with the same stats."""

    def __init__(self, stats: StrategyStats, history=None):
        self.stats = stats
        self._history = history if history is not None else InMemoryHistory([[]])
        self.queries = []

    @property
    def history(self):
        return self._history

    def strategy_stats_for(self, agent, color, challenge_type=None):
        self.queries.append((agent.id, color, challenge_type))
        return self.stats


def _info(random_number=0.0, V=10.0, C=20.0, agent=None, opponent_color=BLUE, view=None):
    if agent is None:
        agent = Agent(id=1, color=RED)
    if view is None:
        view = CachingHistoryView(InMemoryHistory())
    return GameInformation(
        agent=agent,
        opponent_color=opponent_color,
        payoff_matrix=PayoffMatrix(revenue=V, cost=C),
        history_view=view,
        random_number=random_number,
    )


def _last_round_history(blue_moves):
    """One round in which blue agents play ``blue_moves`` against red agent 100+i (who play Dove)."""
    challenges = [
        Challenge(Agent(100 + i, RED), DOVE, Agent(200 + i, BLUE), move)
        for i, move in enumerate(blue_moves)
    ]
    return InMemoryHistory([challenges])


# ---------------------------------------------------------------------------
# random choice
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("random_number", RANDOM_NUMBERS)
def test_random_choice_threshold(random_number):
    expected = HAWK if random_number < 0.5 else DOVE
    assert random_choice_game(_info(random_number)) == expected


def test_random_choice_boundary_is_dove():
    assert random_choice_game(_info(0.5)) == DOVE
    assert random_choice_game(_info(0.0)) == HAWK


# ---------------------------------------------------------------------------
# Nash mixed equilibrium from V and C
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("ratio", [0.0, 0.5, 1.0, 2.0, 100.0])
@pytest.mark.parametrize("random_number", RANDOM_NUMBERS)
def test_nash_equilibrium_threshold(ratio, random_number):
    C = 20.0
    info = _info(random_number, V=ratio * C, C=C)
    expected = HAWK if random_number < min(1.0, ratio) else DOVE
    assert nash_mixed_strategy_equilibrium_from_payoff_parameters(info) == expected


@pytest.mark.parametrize("random_number", RANDOM_NUMBERS)
def test_nash_equilibrium_zero_cost_always_hawk(random_number):
    info = _info(random_number, V=10.0, C=0.0)
    assert hawk_probability_from_parameters(info.payoff_matrix) == 1.0
    assert nash_mixed_strategy_equilibrium_from_payoff_parameters(info) == HAWK


def test_nash_equilibrium_hawk_below_threshold():
    # regression: Hawk is played when the draw is *below* V / C, not above
    info = _info(0.1, V=5.0, C=20.0)
    assert nash_mixed_strategy_equilibrium_from_payoff_parameters(info) == HAWK
    info = _info(0.9, V=5.0, C=20.0)
    assert nash_mixed_strategy_equilibrium_from_payoff_parameters(info) == DOVE


def test_hawk_probability_is_capped():
    assert hawk_probability_from_parameters(PayoffMatrix(30.0, 10.0)) == 1.0
    assert hawk_probability_from_parameters(PayoffMatrix(5.0, 10.0)) == 0.5


# ---------------------------------------------------------------------------
# keep same strategy
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("previous", [HAWK, DOVE])
@pytest.mark.parametrize("random_number", [0.0, 0.9999])
def test_keep_same_strategy_repeats_previous(previous, random_number):
    info = _info(random_number, agent=Agent(id=1, color=RED, strategy=previous))
    assert keep_same_strategy(info) == previous


def test_keep_same_strategy_falls_back_to_equilibrium():
    # V / C = 2 -> always Hawk
    info = _info(0.1, V=20.0, C=10.0, agent=Agent(id=1, color=RED))
    assert keep_same_strategy(info) == HAWK

    info = _info(0.9, V=5.0, C=20.0, agent=Agent(id=1, color=RED))
    assert keep_same_strategy(info) == nash_mixed_strategy_equilibrium_from_payoff_parameters(info) == DOVE


# ---------------------------------------------------------------------------
# last encounter with opponent color
# ---------------------------------------------------------------------------

def test_last_encounter_no_doves_means_hawk():
    view = _FixedStatsView(StrategyStats(hawk_n=4, dove_n=0))
    assert on_based_of_last_encounter_with_opponent_color(_info(0.99, view=view)) == HAWK
    assert view.queries == [(1, BLUE, ChallengeType.DIFFERENT_COLOR)]


def test_last_encounter_no_hawks_means_dove():
    view = _FixedStatsView(StrategyStats(hawk_n=0, dove_n=3))
    assert on_based_of_last_encounter_with_opponent_color(_info(0.0, view=view)) == DOVE


def test_last_encounter_empty_record_means_hawk():
    view = _FixedStatsView(StrategyStats())
    assert on_based_of_last_encounter_with_opponent_color(_info(0.99, view=view)) == HAWK


@pytest.mark.parametrize("random_number", RANDOM_NUMBERS)
def test_last_encounter_mixed_record_uses_equilibrium(random_number):
    view = _FixedStatsView(StrategyStats(hawk_n=2, dove_n=5))
    info = _info(random_number, V=10.0, C=20.0, view=view)
    assert (on_based_of_last_encounter_with_opponent_color(info)
            == nash_mixed_strategy_equilibrium_from_payoff_parameters(info))


def test_last_encounter_reads_real_history():
    me = Agent(id=1, color=RED)
    history = InMemoryHistory([
        [Challenge(me, DOVE, Agent(2, BLUE), HAWK)],
        [Challenge(Agent(3, BLUE), HAWK, me, HAWK)],
        # same-color challenges are ignored
        [Challenge(me, HAWK, Agent(4, BLUE), HAWK), Challenge(Agent(5, RED), DOVE, Agent(6, RED), DOVE)],
    ])
    info = _info(0.99, agent=me, view=CachingHistoryView(history))
    assert on_based_of_last_encounter_with_opponent_color(info) == HAWK


# ---------------------------------------------------------------------------
# expected value
# ---------------------------------------------------------------------------

def test_expected_values_example():
    ev_hawk, ev_dove = expected_values(PayoffMatrix(10.0, 20.0), StrategyStats(hawk_n=3, dove_n=7))
    assert ev_hawk == pytest.approx(5.5)
    assert ev_dove == pytest.approx(3.5)

    ev_hawk, ev_dove = expected_values(PayoffMatrix(10.0, 20.0), StrategyStats(hawk_n=9, dove_n=1))
    assert ev_hawk == pytest.approx(-3.5)
    assert ev_dove == pytest.approx(0.5)


@pytest.mark.parametrize("hawk_n, dove_n, expected", [(3, 7, HAWK), (9, 1, DOVE)])
def test_highest_expected_value_picks_best_response(hawk_n, dove_n, expected):
    source = lambda info: StrategyStats(hawk_n=hawk_n, dove_n=dove_n)
    for random_number in RANDOM_NUMBERS:
        assert highest_expected_value_game(source, _info(random_number)) == expected


@pytest.mark.parametrize("random_number", RANDOM_NUMBERS)
def test_highest_expected_value_tie_uses_random_choice(random_number):
    # pHawk = V / C makes both moves worth the same
    source = lambda info: StrategyStats(hawk_n=1, dove_n=1)
    info = _info(random_number, V=10.0, C=20.0)
    ev_hawk, ev_dove = expected_values(info.payoff_matrix, source(info))
    assert ev_hawk == ev_dove
    assert highest_expected_value_game(source, info) == random_choice_game(info)


@pytest.mark.parametrize("random_number", RANDOM_NUMBERS)
def test_highest_expected_value_without_observations_is_random(random_number):
    info = _info(random_number)
    assert highest_expected_value_on_different_color_game(info) == random_choice_game(info)


def test_last_round_population_variants():
    # last round: blue played Hawk 3 times and Dove 7 times in different-color challenges
    history = _last_round_history([HAWK] * 3 + [DOVE] * 7)
    info = _info(0.99, view=CachingHistoryView(history))
    assert highest_expected_value_on_different_color_game(info) == HAWK
    assert highest_expected_value_on_different_color_game_using_only_different_color_stats(info) == HAWK

    # add same-color blue Hawks: only the unfiltered variant sees them
    challenges = list(history.last_round_challenges.challenges)
    challenges += [Challenge(Agent(300 + i, BLUE), HAWK, Agent(400 + i, BLUE), HAWK) for i in range(10)]
    history.add_round(challenges)
    info = _info(0.99, view=CachingHistoryView(history))
    assert LastRoundStats()(info) == StrategyStats(hawk_n=23, dove_n=7)
    assert highest_expected_value_on_different_color_game(info) == DOVE
    assert highest_expected_value_on_different_color_game_using_only_different_color_stats(info) == HAWK


def test_last_round_ignores_earlier_rounds():
    history = _last_round_history([HAWK] * 9 + [DOVE])
    history.add_round([Challenge(Agent(1, RED), DOVE, Agent(2, BLUE), DOVE)])
    info = _info(0.99, view=CachingHistoryView(history))
    assert LastRoundStats()(info) == StrategyStats(hawk_n=0, dove_n=1)
    assert highest_expected_value_on_different_color_game(info) == HAWK


def test_individual_agent_variants_agree():
    me = Agent(id=1, color=RED)
    history = InMemoryHistory([
        [Challenge(me, DOVE, Agent(2, BLUE), HAWK)],
        [Challenge(me, DOVE, Agent(3, BLUE), HAWK), Challenge(Agent(4, BLUE), DOVE, Agent(5, RED), DOVE)],
        [Challenge(Agent(6, BLUE), HAWK, me, HAWK)],
    ])
    cached = highest_eu_on_different_color_game_for_individual_agent()
    direct = highest_eu_on_different_color_game_for_individual_agent_non_cached()
    for view in (CachingHistoryView(history), DirectHistoryView(history)):
        info = _info(0.3, agent=me, view=view)
        # opponents of agent 1 were all Hawks -> Dove is the best response
        assert IndividualAgentStats()(info) == StrategyStats(hawk_n=3, dove_n=0)
        assert cached(info) == direct(info) == DOVE


def test_individual_agent_challenge_type_filter():
    me = Agent(id=1, color=RED)
    view = _FixedStatsView(StrategyStats(hawk_n=3, dove_n=7))
    decide = highest_eu_on_different_color_game_for_individual_agent(ChallengeType.DIFFERENT_COLOR)
    assert decide(_info(0.5, agent=me, view=view)) == HAWK
    assert view.queries == [(1, BLUE, ChallengeType.DIFFERENT_COLOR)]


def test_non_cached_variant_bypasses_view():
    view = _FixedStatsView(StrategyStats(hawk_n=9, dove_n=1))
    decide = highest_eu_on_different_color_game_for_individual_agent_non_cached()
    # the underlying history is empty, so the view's stats are never used
    assert decide(_info(0.2, view=view)) == random_choice_game(_info(0.2)) == HAWK
    assert view.queries == []


# ---------------------------------------------------------------------------
# Hawk share of the last round
# ---------------------------------------------------------------------------

def _hawk_share_challenges():
    """Blue plays Hawk, Dove, Hawk; red plays Dove: 2 Hawks / 2 Doves overall."""
    return [
        Challenge(Agent(1, BLUE), HAWK, Agent(2, BLUE), DOVE),
        Challenge(Agent(3, BLUE), HAWK, Agent(4, RED), DOVE),
    ]


@pytest.mark.parametrize("random_number", [0.0, 0.3, 0.6, 2 / 3, 0.7, 0.9999])
def test_depending_hawks_within_color_segment(random_number):
    history = InMemoryHistory([_hawk_share_challenges()])
    info = _info(random_number, view=CachingHistoryView(history))
    expected = HAWK if random_number < 2 / 3 else DOVE
    assert depending_hawks_within_color_segment(info) == expected


@pytest.mark.parametrize("random_number", [0.0, 0.3, 0.49, 0.5, 0.9999])
def test_on_hawks_on_last_round(random_number):
    history = InMemoryHistory([_hawk_share_challenges()])
    info = _info(random_number, view=CachingHistoryView(history))
    expected = HAWK if random_number < 0.5 else DOVE
    assert on_hawks_on_last_round(info) == expected


def test_hawk_share_reads_only_the_last_round():
    first, second = _hawk_share_challenges()
    history = InMemoryHistory([[first], [second]])
    # last round is blue Hawk vs red Dove: blue share 1.0, population share 0.5
    info = _info(0.9, view=CachingHistoryView(history))
    assert depending_hawks_within_color_segment(info) == HAWK
    assert on_hawks_on_last_round(info) == DOVE


@pytest.mark.parametrize("random_number", [0.0, 0.5, 0.9999])
def test_hawk_share_without_observations_is_dove(random_number):
    for history in (InMemoryHistory(), InMemoryHistory([[]])):
        info = _info(random_number, view=CachingHistoryView(history))
        assert depending_hawks_within_color_segment(info) == DOVE
        assert on_hawks_on_last_round(info) == DOVE
