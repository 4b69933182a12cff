"""
Core harness primitives.

This module provides:
- KeyEvent / decode: Script tokens as input events
- StatefulView / Effect: The component protocol
- Errors: Fatal harness conditions
"""

from .events import KeyEvent, KeyType, decode
from .view import Effect, StatefulView
from .errors import FatalHarnessError, MissingScriptError, SettleLimitError, SnapshotStoreError

__all__ = [
    "KeyEvent",
    "KeyType",
    "decode",
    "Effect",
    "StatefulView",
    "FatalHarnessError",
    "MissingScriptError",
    "SettleLimitError",
    "SnapshotStoreError",
]
