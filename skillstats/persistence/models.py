"""Data models for per-account skill progression."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from skillstats.skills.registry import list_skills

MAX_LEVEL = 99
MAX_EXPERIENCE = 13_034_431

DEFAULT_LEVEL = 1
DEFAULT_EXPERIENCE = 0


def clamp_level(level: int) -> int:
    """Clamp a level into [0, MAX_LEVEL]."""
    return max(0, min(level, MAX_LEVEL))


def clamp_experience(experience: int) -> int:
    """Clamp an experience total into [0, MAX_EXPERIENCE]."""
    return max(0, min(experience, MAX_EXPERIENCE))


def coerce_int(value: Any, default: int) -> int:
    """Parse a stored value as an integer, falling back to ``default``.

    Accepts ints, numeric strings and floats (truncated). Booleans and
    anything unparseable yield the default.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


@dataclass(frozen=True)
class SkillProgress:
    """Level and experience for one skill. Always within range."""

    level: int = DEFAULT_LEVEL
    experience: int = DEFAULT_EXPERIENCE

    def __post_init__(self):
        # Frozen, so bypass __setattr__ to store the clamped values
        object.__setattr__(self, "level", clamp_level(self.level))
        object.__setattr__(self, "experience", clamp_experience(self.experience))

    @classmethod
    def of(cls, level: Any, experience: Any) -> "SkillProgress":
        """Build from loosely typed values, coercing then clamping."""
        return cls(
            level=coerce_int(level, DEFAULT_LEVEL),
            experience=coerce_int(experience, DEFAULT_EXPERIENCE),
        )

    def to_dict(self) -> dict[str, int]:
        return {"level": self.level, "experience": self.experience}


@dataclass
class PlayerSkillRecord:
    """Skill progression for one account.

    ``updated_at`` is informational only and never drives invalidation.
    """

    account_id: int
    skills: dict[str, SkillProgress] = field(default_factory=dict)
    updated_at: datetime | None = None

    def progress(self, key: str) -> SkillProgress | None:
        """Progress for ``key``, or None if the record has none."""
        return self.skills.get(key)

    def to_dict(self) -> dict[str, Any]:
        """Plain payload handed to override providers."""
        data: dict[str, Any] = {
            "userid": self.account_id,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        for key, progress in self.skills.items():
            data[key] = progress.to_dict()
        return data


def default_record(account_id: int) -> PlayerSkillRecord:
    """In-memory record with default progress for every registered skill."""
    return PlayerSkillRecord(
        account_id=account_id,
        skills={skill.key: SkillProgress() for skill in list_skills()},
    )
