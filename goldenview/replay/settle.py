"""
Effect settling.

After a transition a component may schedule a follow-up effect, whose event
may schedule another, and so on. Settling forces that chain synchronously
until it runs dry.
"""

from typing import Optional

from ..core.errors import SettleLimitError
from ..core.view import Effect, StatefulView
from ..logging_config import get_logger

# Effect-driven updates allowed per settle before the chain is declared endless.
SETTLE_LIMIT = 100

logger = get_logger(__name__)


def settle(component: StatefulView, effect: Effect, limit: int = SETTLE_LIMIT) -> StatefulView:
    """
    Force effects and apply their events until none remain.

    Args:
        component: Component to drive
        effect: Pending effect (None = nothing to do)
        limit: Maximum number of effect-driven updates

    Returns:
        Component after the last update

    Raises:
        SettleLimitError: If an effect is still pending after limit updates.
            That effect is not forced.
    """
    applied = 0
    while effect is not None:
        if applied >= limit:
            raise SettleLimitError(applied)
        event: Optional[object] = effect()
        if event is None:
            break
        component, effect = component.update(event)
        applied += 1
    if applied:
        logger.debug("Settled after %d effect updates", applied)
    return component
