"""
StatefulView protocol.

Components are driven only through init/update/view. Any object with those
three methods works; there is nothing to inherit from.
"""

from typing import Any, Callable, Optional, Protocol, Tuple, runtime_checkable

# Deferred follow-up work scheduled by a component. Forcing it yields the next
# event, or None when there is nothing more to deliver.
Effect = Optional[Callable[[], Optional[Any]]]


@runtime_checkable
class StatefulView(Protocol):
    def init(self) -> Effect:
        """Return the effect to settle before the first snapshot."""
        ...

    def update(self, event: Any) -> Tuple["StatefulView", Effect]:
        """Return the next component value and an optional effect."""
        ...

    def view(self) -> str:
        """Render current state. Must be free of side effects."""
        ...
