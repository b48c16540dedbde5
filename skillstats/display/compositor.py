"""Composes the Skills section of the character-stats panel."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from skillstats.display.overrides import (
    LabelAndValue,
    NullOverrideProvider,
    OverrideProvider,
    ValueOnly,
    parse_overrides,
)
from skillstats.host import StatsPanel
from skillstats.persistence.cache import RecordCache
from skillstats.persistence.models import PlayerSkillRecord, SkillProgress
from skillstats.persistence.store import SkillRecordStore
from skillstats.skills.registry import SkillDefinition
from skillstats.skills.visibility import VisibilityFilter

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "Skills"
NO_PROGRESS = "--"


@dataclass(frozen=True)
class StatLine:
    """One panel line. Section headers carry no value."""

    label: str
    value: Any = None
    header: bool = False


def format_progress(progress: Optional[SkillProgress]) -> str:
    """Default value text for a skill line."""
    if progress is None:
        return NO_PROGRESS
    return f"Level {progress.level} ({progress.experience} XP)"


class DisplayCompositor:
    """Merges visibility, stored progress and provider overrides into lines.

    The compositor holds no per-render state; the record cache is passed in
    by the caller for the lifetime of one processing context.
    """

    def __init__(
        self,
        visibility: VisibilityFilter,
        store: SkillRecordStore,
        provider: OverrideProvider | None = None,
        header: str = DEFAULT_HEADER,
    ):
        self._visibility = visibility
        self._store = store
        self._provider = provider or NullOverrideProvider()
        self._header = header

    def compose(self, account_id: int, cache: RecordCache) -> list[StatLine]:
        """Build the header and skill lines. Empty when no skill is enabled."""
        enabled = self._visibility.enabled_skills()
        if not enabled:
            return []

        record = cache.get(account_id, self._store.load)
        try:
            answer = self._provider.resolve_overrides([s.key for s in enabled], record)
        except Exception as e:
            logger.exception(f"Override provider failed for account {account_id}: {e}")
            answer = None
        overrides = parse_overrides(answer)

        lines = [StatLine(self._header, header=True)]
        for skill in enabled:
            lines.append(self._merge(skill, record, overrides.get(skill.key)))
        return lines

    def render(
        self, account_id: Optional[int], panel: StatsPanel, cache: RecordCache
    ) -> None:
        """Emit the Skills section to ``panel`` for the logged-in account.

        Does nothing when there is no account or no enabled skill.
        """
        if not account_id or account_id <= 0:
            return
        lines = self.compose(account_id, cache)
        for line in lines:
            if line.header:
                panel.add_stat_line(line.label)
            else:
                panel.add_stat_line(line.label, line.value)
        logger.debug(f"Rendered {len(lines)} skill lines for account {account_id}")

    def _merge(
        self, skill: SkillDefinition, record: PlayerSkillRecord, override: Any
    ) -> StatLine:
        label = skill.display_name
        value: Any = format_progress(record.progress(skill.key))

        if isinstance(override, LabelAndValue):
            if override.label:
                label = override.label
            if override.has_value:
                value = override.value
        elif isinstance(override, ValueOnly):
            value = override.value
        # NoOverride or missing: defaults stand

        return StatLine(label, value)
