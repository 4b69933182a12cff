"""
Exception types for the snapshot harness.

Everything deriving from FatalHarnessError aborts a replay. The harness never
catches these; a test that hits one fails hard instead of reporting a mismatch.
"""

from typing import Optional


class FatalHarnessError(Exception):
    """Raised when a replay cannot continue."""
    pass


class MissingScriptError(FatalHarnessError):
    """Raised when the event script for a run cannot be read."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"event script not readable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SettleLimitError(FatalHarnessError):
    """Raised when a component keeps scheduling effects past the settle limit."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"effect chain did not settle after {iterations} updates")


class SnapshotStoreError(FatalHarnessError):
    """Raised when a snapshot file cannot be read or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"snapshot {path}: {reason}")
