"""
Replay runner: drive a component through an event script, snapshotting the
view after init and after every event group.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import HarnessConfig
from ..core.view import StatefulView
from ..fs import FileSystem
from ..logging_config import get_logger
from ..script.parser import load_script
from ..snapshot.names import snapshot_name
from ..snapshot.store import SnapshotSuite, VerifyFunc
from .settle import settle


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of a replay.

    Fields:
        component: Component state after the last group
        snapshots: Snapshot names in the order they were taken
        events_delivered: Number of script events delivered (effects excluded)
    """
    component: StatefulView
    snapshots: Tuple[str, ...]
    events_delivered: int


def replay(
    suite: SnapshotSuite,
    component: StatefulView,
    verify: bool,
    run_id: str,
    equal: VerifyFunc,
) -> ReplayResult:
    """
    Replay the script for run_id against component.

    Snapshot 0 is the view after init has settled; snapshot i + 1 is the view
    after group i. Snapshots are named "{run_id}_{i:03d}", sanitized.

    Args:
        suite: Snapshot suite; its root also holds {run_id}.txt
        component: Initial component value
        verify: Verify mode, see Snapshot.run
        run_id: Script and snapshot identifier
        equal: Assertion used in verify mode

    Returns:
        ReplayResult with final component and snapshot names

    Raises:
        MissingScriptError: If the script cannot be read
        SettleLimitError: If an effect chain never ends
        SnapshotStoreError: If a golden file cannot be read or written
    """
    logger = get_logger(__name__, trace_id=run_id)
    script = load_script(suite.root_dir, run_id, suite.fs)
    logger.info("Replaying %d event groups", len(script))

    names = []

    def take_snapshot(index: int, view: str) -> None:
        name = snapshot_name(run_id, index)
        suite.new_snapshot(name, verify, equal).run(view)
        names.append(name)

    effect = component.init()
    # A real program renders once before the first update.
    component.view()
    component = settle(component, effect)
    take_snapshot(0, component.view())

    delivered = 0
    for i, group in enumerate(script.groups):
        for event in group:
            component, effect = component.update(event)
            component = settle(component, effect)
            delivered += 1
        take_snapshot(i + 1, component.view())

    logger.info("Replay finished: %d snapshots, %d events", len(names), delivered)
    return ReplayResult(component=component, snapshots=tuple(names), events_delivered=delivered)


def replay_from_env(
    component: StatefulView,
    run_id: str,
    equal: VerifyFunc,
    config: Optional[HarnessConfig] = None,
    fs: Optional[FileSystem] = None,
) -> ReplayResult:
    """
    Replay with the suite root and verify mode taken from configuration.

    GOLDENVIEW_SNAPSHOT_DIR picks the suite root; GOLDENVIEW_UPDATE=1 records
    goldens instead of verifying them.

    Usage:
        def test_login_form():
            replay_from_env(LoginForm(), "login_form", assert_equal)
    """
    config = config or HarnessConfig.from_env()
    suite = SnapshotSuite(config.snapshot_dir, fs)
    return replay(suite, component, config.verify, run_id, equal)
