"""
Replay system for scripted component runs.

Replay delivers script events to a component, settling effects after every
update, and snapshots the view at each settlement point.
"""

from .runner import ReplayResult, replay, replay_from_env
from .settle import SETTLE_LIMIT, settle

__all__ = [
    "ReplayResult",
    "replay",
    "replay_from_env",
    "SETTLE_LIMIT",
    "settle",
]
