"""Extension layer — event observers via pluggy.

Discovery: entry points (pip-installed) plus module observers in
``.quickex/plugins/*.py``.
INVARIANT: Observer failures are warnings, never errors.
"""

from quickex.plugins.event_bus import EventBus
from quickex.plugins.manager import ObserverManager

__all__ = ["EventBus", "ObserverManager"]
