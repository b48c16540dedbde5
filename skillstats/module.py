"""Host-facing module: metadata, install/uninstall and hook entry point.

The host engine loads this module, calls ``install`` once, and afterwards
routes every ``charstats`` event to ``handle_hook`` with the logged-in
account and the panel being built.
"""

import logging
from typing import Any, Optional

import sqlalchemy as sa

from skillstats import __version__
from skillstats.display.compositor import DisplayCompositor
from skillstats.display.overrides import OverrideProvider
from skillstats.host import HookRegistrar, StatsPanel
from skillstats.persistence.cache import RecordCache
from skillstats.persistence.store import SkillRecordStore
from skillstats.persistence.tables import build_skills_table
from skillstats.skills.visibility import VisibilityFilter, settings_definition

logger = logging.getLogger(__name__)

CHARSTATS_HOOK = "charstats"


class SkillsModule:
    """Wires the compositor into the host's lifecycle and hooks."""

    def __init__(
        self,
        store: SkillRecordStore,
        visibility: VisibilityFilter,
        provider: OverrideProvider | None = None,
        header: str = "Skills",
    ):
        self._store = store
        self._compositor = DisplayCompositor(visibility, store, provider, header=header)

    @property
    def compositor(self) -> DisplayCompositor:
        return self._compositor

    @staticmethod
    def module_info() -> dict[str, Any]:
        return {
            "name": "Skills Display Core",
            "version": __version__,
            "category": "Skills",
            "description": "Provides a shared charstats section for player skill modules.",
            "settings": settings_definition(),
        }

    def install(self, registrar: HookRegistrar) -> bool:
        """Provision the skills table and register for stats rendering."""
        self._store.ensure_schema()
        registrar.add_hook(CHARSTATS_HOOK)
        logger.info("Skills module installed")
        return True

    def uninstall(self) -> bool:
        """Uninstall leaves the skills table and its data in place."""
        logger.info("Skills module uninstalled, skill data retained")
        return True

    def handle_hook(
        self,
        hook_name: str,
        args: dict,
        account_id: Optional[int],
        panel: StatsPanel,
    ) -> dict:
        """Dispatch an inbound host hook. Returns ``args`` unchanged."""
        if hook_name == CHARSTATS_HOOK:
            with RecordCache() as cache:
                self._compositor.render(account_id, panel, cache)
        return args

    def on_account_created(self, account_id: int) -> bool:
        """Materialize the default skills row for a new account."""
        return self._store.create_if_missing(account_id)


def create_module(config, provider: OverrideProvider | None = None) -> SkillsModule:
    """Build a module from a loaded ``Config``."""
    engine = config.database.create_engine()
    table = build_skills_table(sa.MetaData(), prefix=config.database.table_prefix)
    store = SkillRecordStore(engine, table)
    visibility = VisibilityFilter(config.skills.visibility_settings())
    return SkillsModule(store, visibility, provider, header=config.skills.header)
