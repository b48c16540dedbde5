"""Persistence layer -- skill records via SQLAlchemy Core."""

from .cache import RecordCache
from .models import (
    MAX_EXPERIENCE,
    MAX_LEVEL,
    PlayerSkillRecord,
    SkillProgress,
    clamp_experience,
    clamp_level,
    default_record,
)
from .store import SkillRecordStore, normalize_row
from .tables import build_accounts_table, build_skills_table

__all__ = [
    "RecordCache",
    "MAX_EXPERIENCE",
    "MAX_LEVEL",
    "PlayerSkillRecord",
    "SkillProgress",
    "clamp_experience",
    "clamp_level",
    "default_record",
    "SkillRecordStore",
    "normalize_row",
    "build_accounts_table",
    "build_skills_table",
]
