"""Static catalog of the skills tracked by this package.

The registry order is significant: it fixes the column order of the persisted
``skills`` table and the line order of the stats panel, so it must stay stable
across restarts. Skills are sorted by key using natural, case-insensitive
ordering.
"""

import re
from dataclasses import dataclass
from typing import Optional

_DIGITS = re.compile(r"(\d+)")

# key -> display name
SKILL_NAMES: dict[str, str] = {
    "construction": "Construction",
    "cooking": "Cooking",
    "crafting": "Crafting",
    "farming": "Farming",
    "firemaking": "Firemaking",
    "fishing": "Fishing",
    "fletching": "Fletching",
    "herblore": "Herblore",
    "hunter": "Hunter",
    "runecrafting": "Runecrafting",
    "smithing": "Smithing",
    "summoning": "Summoning",
    "woodcutting": "Woodcutting",
}


@dataclass(frozen=True)
class SkillDefinition:
    """One progression track known to the registry."""

    key: str
    display_name: str

    @property
    def setting_key(self) -> str:
        """Name of the visibility setting for this skill."""
        return f"enable_{self.key}"

    @property
    def level_column(self) -> str:
        return f"{self.key}_level"

    @property
    def experience_column(self) -> str:
        return f"{self.key}_experience"


def natural_sort_key(value: str) -> tuple:
    """Sort key giving natural, case-insensitive ordering.

    Digit runs compare numerically, so ``"skill2"`` sorts before ``"Skill10"``.
    """
    parts = _DIGITS.split(value.casefold())
    return tuple((0, int(part), "") if part.isdigit() else (1, 0, part) for part in parts)


def _build_registry(names: dict[str, str]) -> tuple[SkillDefinition, ...]:
    keys = sorted(names, key=natural_sort_key)
    return tuple(SkillDefinition(key=key, display_name=names[key]) for key in keys)


_REGISTRY = _build_registry(SKILL_NAMES)
_BY_KEY = {skill.key: skill for skill in _REGISTRY}


def list_skills() -> tuple[SkillDefinition, ...]:
    """Return every registered skill in registry order."""
    return _REGISTRY


def skill_keys() -> list[str]:
    """Return the registered skill keys in registry order."""
    return [skill.key for skill in _REGISTRY]


def get_skill(key: str) -> Optional[SkillDefinition]:
    """Look up a skill by key, or None if it is not registered."""
    return _BY_KEY.get(key)
