"""Skill registry and visibility settings."""

from .registry import SkillDefinition, get_skill, list_skills, natural_sort_key, skill_keys
from .visibility import VisibilityFilter, VisibilitySettings, settings_definition

__all__ = [
    "SkillDefinition",
    "get_skill",
    "list_skills",
    "natural_sort_key",
    "skill_keys",
    "VisibilityFilter",
    "VisibilitySettings",
    "settings_definition",
]
