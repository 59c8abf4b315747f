"""
Round history and the statistics queries decision functions rely on.
"""
from .base import History, HistoryView, RoundStatistics
from .repo import Challenge, InMemoryHistory, RoundChallenges
from .views import CachingHistoryView, DirectHistoryView

__all__ = [
    'History',
    'HistoryView',
    'RoundStatistics',
    'Challenge',
    'InMemoryHistory',
    'RoundChallenges',
    'CachingHistoryView',
    'DirectHistoryView',
]
