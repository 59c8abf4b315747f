"""
Run configuration: payoff parameters, the stage to play and the seed for
the driver's random draws.  Loaded from plain dicts or JSON files, e.g.

    {"revenue": 10, "cost": 20, "stage": "stage3", "seed": 42}
"""
import json
import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Iterator, Optional

import numpy as np

from hawkdove.model import PayoffMatrix
from hawkdove.stages import STAGES, StageRegistry
from hawkdove.strategies import DecisionFunction

logger = logging.getLogger(__name__)

DEFAULT_STAGE = "stage3"


@dataclass(frozen=True)
class SimulationConfig:
    revenue: float
    cost: float
    stage: str = DEFAULT_STAGE
    seed: Optional[int] = None

    def __post_init__(self):
        # fail early on bad parameters
        self.payoff_matrix()

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(params) - known
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(sorted(unknown))}")
        missing = {"revenue", "cost"} - set(params)
        if missing:
            raise ValueError(f"missing configuration keys: {', '.join(sorted(missing))}")
        return cls(**params)

    @classmethod
    def from_json(cls, filepath: str) -> "SimulationConfig":
        with open(filepath, 'r') as f:
            params = json.load(f)
        if not isinstance(params, dict):
            raise ValueError(f"{filepath}: expected a JSON object, got {type(params).__name__}")
        config = cls.from_dict(params)
        logger.info(f"Loaded configuration from {filepath}: {config}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def payoff_matrix(self) -> PayoffMatrix:
        return PayoffMatrix(revenue=self.revenue, cost=self.cost)

    def decision_function(self, registry: StageRegistry = STAGES) -> DecisionFunction:
        return registry.decision_function(self.stage)

    def random_numbers(self) -> Iterator[float]:
        return random_numbers(self.seed)


def random_numbers(seed: Optional[int] = None) -> Iterator[float]:
    """Endless stream of uniform draws in [0.0, 1.0); reproducible for a fixed seed."""
    rng = np.random.default_rng(seed)
    while True:
        yield float(rng.random())
