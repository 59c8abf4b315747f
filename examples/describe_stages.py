"""
Example script: print the stage catalog and the move each stage picks for a
handful of sample encounters.

    python examples/describe_stages.py --revenue 10 --cost 20 --seed 42
    python examples/describe_stages.py --config run.json
"""
import argparse
import logging
import os
import sys

from tabulate import tabulate

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hawkdove.config import DEFAULT_STAGE, SimulationConfig
from hawkdove.history import CachingHistoryView, Challenge, InMemoryHistory
from hawkdove.model import Agent, GameInformation, Strategy
from hawkdove.stages import STAGES


def parse_args():
    parser = argparse.ArgumentParser(description='Show Hawk-Dove stages and sample decisions')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON file with revenue, cost, stage and seed (overrides the flags below)')
    parser.add_argument('--revenue', type=float, default=10.0,
                        help='Value of the contested resource (V)')
    parser.add_argument('--cost', type=float, default=20.0,
                        help='Cost of losing an escalated fight (C)')
    parser.add_argument('--stage', type=str, default=DEFAULT_STAGE, choices=STAGES.names(),
                        help='Stage whose decisions are sampled')
    parser.add_argument('--seed', type=int, default=42,
                        help='Seed for the random draws')
    parser.add_argument('--verbose', action='store_true',
                        help='Log at DEBUG level')
    return parser.parse_args()


def sample_history():
    """One previous round: blues mostly escalate, reds mostly yield."""
    reds = [Agent(i, "red") for i in range(10, 15)]
    blues = [Agent(i, "blue") for i in range(20, 25)]
    moves = [Strategy.HAWK, Strategy.HAWK, Strategy.HAWK, Strategy.DOVE, Strategy.HAWK]
    challenges = [Challenge(red, Strategy.DOVE, blue, move) for red, blue, move in zip(reds, blues, moves)]
    return InMemoryHistory([challenges])


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(message)s")

    if args.config:
        config = SimulationConfig.from_json(args.config)
    else:
        config = SimulationConfig(revenue=args.revenue, cost=args.cost, stage=args.stage, seed=args.seed)

    print(STAGES.describe())
    print()

    decide = config.decision_function()
    payoff_matrix = config.payoff_matrix()
    draws = config.random_numbers()
    views = {
        "no history": CachingHistoryView(InMemoryHistory()),
        "after one round": CachingHistoryView(sample_history()),
    }
    agents = [Agent(1, "red"), Agent(2, "red", Strategy.DOVE), Agent(3, "blue", Strategy.HAWK)]

    rows = []
    for label, view in views.items():
        for agent in agents:
            for opponent_color in ("red", "blue"):
                info = GameInformation(agent=agent, opponent_color=opponent_color,
                                       payoff_matrix=payoff_matrix, history_view=view,
                                       random_number=next(draws))
                rows.append([label, agent.id, agent.color, agent.strategy or "-", opponent_color,
                             f"{info.random_number:.3f}", decide(info)])

    print(f"Stage {config.stage}, V={config.revenue}, C={config.cost}")
    print(tabulate(rows, headers=["History", "Agent", "Color", "Previous", "Opponent", "Draw", "Move"],
                   tablefmt="pipe"))


if __name__ == "__main__":
    main()
