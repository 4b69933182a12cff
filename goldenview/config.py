"""
Harness configuration from environment variables.

Environment Variables:
    GOLDENVIEW_SNAPSHOT_DIR: Root directory of scripts and golden files - default: testdata/snapshots
    GOLDENVIEW_UPDATE: 1/true/yes/on records snapshots instead of verifying - default: off
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SNAPSHOT_DIR = "testdata/snapshots"

_TRUTHY = ("1", "true", "yes", "on")


def _env_bool(env: Mapping[str, str], key: str) -> bool:
    val = env.get(key)
    if not val:
        return False
    return val.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class HarnessConfig:
    """
    Fields:
        snapshot_dir: Suite root directory
        update: Record mode; verify is its negation
    """
    snapshot_dir: str = DEFAULT_SNAPSHOT_DIR
    update: bool = False

    @property
    def verify(self) -> bool:
        return not self.update

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "HarnessConfig":
        env = os.environ if env is None else env
        snapshot_dir = (env.get("GOLDENVIEW_SNAPSHOT_DIR") or "").strip() or DEFAULT_SNAPSHOT_DIR
        return HarnessConfig(
            snapshot_dir=snapshot_dir,
            update=_env_bool(env, "GOLDENVIEW_UPDATE"),
        )
