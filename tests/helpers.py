"""Shared builders for skill stats tests."""

from skillstats.persistence.models import PlayerSkillRecord, SkillProgress
from skillstats.skills.registry import list_skills
from skillstats.skills.visibility import VisibilityFilter, VisibilitySettings


def only_enabled(*keys: str) -> VisibilityFilter:
    """Visibility filter with exactly ``keys`` enabled."""
    values = {skill.key: skill.key in keys for skill in list_skills()}
    return VisibilityFilter(VisibilitySettings.from_mapping(values))


def record_with(account_id: int = 7, **progress: tuple[int, int]) -> PlayerSkillRecord:
    """Record carrying only the given ``key=(level, experience)`` entries."""
    return PlayerSkillRecord(
        account_id=account_id,
        skills={key: SkillProgress(level, xp) for key, (level, xp) in progress.items()},
    )
