"""ObserverManager — where contract-event observers come from.

Two sources, loaded in this order:

1. Installed distributions advertising a ``quickex.plugins`` entry point.
   The entry point must name a module or an observer instance.
2. Single-file modules in a ledger's ``.quickex/plugins/`` directory. The
   module itself is the observer: its hooks are module-level functions
   marked with ``pluggy.HookimplMarker("quickex")``. Files starting with
   ``_`` are skipped; a file that fails to import is logged and skipped.
"""

from __future__ import annotations

import importlib.util
import logging
from typing import TYPE_CHECKING

import pluggy

from quickex.plugins.hookspecs import QuickexHookSpec

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

PROJECT_NAME = "quickex"
ENTRY_POINT_GROUP = "quickex.plugins"
LOCAL_MODULE_PREFIX = "quickex_observer_"

logger = logging.getLogger(__name__)


class ObserverManager(pluggy.PluginManager):
    """pluggy manager preloaded with the quickex event hooks."""

    def __init__(self) -> None:
        super().__init__(PROJECT_NAME)
        self.add_hookspecs(QuickexHookSpec)

    def discover(self, *, local_dir: Path | None = None) -> list[str]:
        """Register entry-point observers, then those in *local_dir*.

        Returns the names of all registered observers.
        """
        count = self.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        if count:
            logger.debug("Loaded %d observer(s) from entry points", count)

        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if path.name.startswith("_"):
                    continue
                module = _import_observer_file(path)
                if module is None:
                    continue
                try:
                    self.register(module, name=module.__name__)
                except pluggy.PluginValidationError:
                    # register() keeps the name on failure; drop it with any hooks it did add.
                    self.unregister(name=module.__name__)
                    logger.warning("Observer %s has invalid hooks; skipped", path, exc_info=True)

        return self.observer_names()

    def observer_names(self) -> list[str]:
        return sorted(name for name, _plugin in self.list_name_plugin())


def _import_observer_file(path: Path) -> ModuleType | None:
    """Execute *path* as a fresh module, or return None if it cannot be imported."""
    spec = importlib.util.spec_from_file_location(f"{LOCAL_MODULE_PREFIX}{path.stem}", path)
    if spec is None or spec.loader is None:
        logger.warning("Cannot import observer %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception:
        logger.warning("Observer %s failed to import; skipped", path, exc_info=True)
        return None
    return module
