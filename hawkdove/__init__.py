"""
Strategy-decision engine for repeated Hawk-Dove games between colored
populations.

Public symbols are resolved lazily so that importing a submodule such as
``hawkdove.model`` does not build the stage catalog.
"""

from importlib import import_module
from typing import Any

__all__ = [
    # Model
    "Strategy", "ChallengeType", "Agent", "PayoffMatrix", "GameInformation",
    "StrategyStats",

    # History
    "InMemoryHistory", "Challenge", "CachingHistoryView", "DirectHistoryView",

    # Composition and stages
    "CompositeStrategySetup", "composite_strategy",
    "StageRegistry", "STAGES", "get_stage",

    # Configuration
    "SimulationConfig",
]

_LOCATIONS = {
    "Strategy": "hawkdove.model",
    "ChallengeType": "hawkdove.model",
    "Agent": "hawkdove.model",
    "PayoffMatrix": "hawkdove.model",
    "GameInformation": "hawkdove.model",
    "StrategyStats": "hawkdove.stats",
    "InMemoryHistory": "hawkdove.history",
    "Challenge": "hawkdove.history",
    "CachingHistoryView": "hawkdove.history",
    "DirectHistoryView": "hawkdove.history",
    "CompositeStrategySetup": "hawkdove.strategies",
    "composite_strategy": "hawkdove.strategies",
    "StageRegistry": "hawkdove.stages",
    "STAGES": "hawkdove.stages",
    "get_stage": "hawkdove.stages",
    "SimulationConfig": "hawkdove.config",
}


def __getattr__(name: str) -> Any:
    """Import a public symbol from its submodule on first access."""
    if name in _LOCATIONS:
        return getattr(import_module(_LOCATIONS[name]), name)
    raise AttributeError(f"module 'hawkdove' has no attribute '{name}'")
