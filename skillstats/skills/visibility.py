"""Per-skill visibility settings and the filter built on them.

``VisibilitySettings`` is generated from the registry at import time: one
boolean field per skill, named after the skill's setting key
(``enable_<key>``). Lookups go through ``SkillDefinition.setting_key``.
"""

import logging
from dataclasses import field, fields, make_dataclass
from typing import Any, Mapping

from skillstats.host import SettingsSource
from skillstats.skills.registry import SkillDefinition, list_skills

logger = logging.getLogger(__name__)

SETTINGS_TITLE = "Skills Visibility,title"

_FALSE_STRINGS = {"", "0", "false", "f", "no", "n", "off"}


def coerce_bool(value: Any) -> bool:
    """Interpret a stored setting the way the host settings store does."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def _from_mapping(cls, values: Mapping[str, Any]):
    """Build settings from a mapping keyed by setting key or skill key.

    Missing entries keep their default (enabled). Unknown keys are ignored.
    """
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for name, value in values.items():
        setting = name if name in known else f"enable_{name}"
        if setting not in known:
            logger.warning(f"Ignoring visibility setting for unknown skill '{name}'")
            continue
        kwargs[setting] = coerce_bool(value)
    return cls(**kwargs)


def _from_source(cls, source: SettingsSource):
    """Build settings by querying a host settings store, one key per skill."""
    kwargs = {}
    for f in fields(cls):
        value = source.get_setting(f.name)
        if value is not None:
            kwargs[f.name] = coerce_bool(value)
    return cls(**kwargs)


def _is_enabled(self, skill: SkillDefinition) -> bool:
    return bool(getattr(self, skill.setting_key, False))


VisibilitySettings = make_dataclass(
    "VisibilitySettings",
    [(skill.setting_key, bool, field(default=True)) for skill in list_skills()],
    namespace={
        "from_mapping": classmethod(_from_mapping),
        "from_source": classmethod(_from_source),
        "is_enabled": _is_enabled,
    },
    frozen=True,
)
VisibilitySettings.__module__ = __name__
VisibilitySettings.__doc__ = "Typed visibility flags, one boolean per registered skill."


def settings_definition() -> dict[str, str]:
    """Configuration schema exposed to the host's settings UI.

    The first entry is a non-functional title used for grouping.
    """
    definition = {"title": SETTINGS_TITLE}
    for skill in list_skills():
        definition[skill.setting_key] = (
            f"Show {skill.display_name} skill in character stats,bool|1"
        )
    return definition


class VisibilityFilter:
    """Derives the enabled subset of the registry from visibility settings."""

    def __init__(self, settings=None):
        self._settings = settings if settings is not None else VisibilitySettings()

    @property
    def settings(self):
        return self._settings

    def enabled_skills(self) -> tuple[SkillDefinition, ...]:
        """Enabled skills, in registry order."""
        return tuple(skill for skill in list_skills() if self._settings.is_enabled(skill))
