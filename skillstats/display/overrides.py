"""Label/value overrides supplied by external skill modules.

Skill modules customize the stats panel by answering the ``skilldisplay``
hook. Their loosely shaped answers are parsed into one of three variants:

- ``NoOverride``: keep the defaults.
- ``ValueOnly``: replace the value, keep the label.
- ``LabelAndValue``: replace the label if one is given and non-empty, and the
  value if the key was present at all (even when falsy).
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol, Union, runtime_checkable

from skillstats.host import HookDispatcher
from skillstats.persistence.models import PlayerSkillRecord

logger = logging.getLogger(__name__)

SKILL_DISPLAY_HOOK = "skilldisplay"


class _Missing:
    """Marker for a value key that was absent from the payload."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class NoOverride:
    pass


@dataclass(frozen=True)
class ValueOnly:
    value: Any


@dataclass(frozen=True)
class LabelAndValue:
    label: str | None = None
    value: Any = MISSING

    @property
    def has_value(self) -> bool:
        return self.value is not MISSING


Override = Union[NoOverride, ValueOnly, LabelAndValue]

NO_OVERRIDE = NoOverride()


def parse_override(raw: Any) -> Override:
    """Map one provider answer onto an override variant."""
    if raw is None:
        return NO_OVERRIDE
    if isinstance(raw, (NoOverride, ValueOnly, LabelAndValue)):
        return raw
    if isinstance(raw, Mapping):
        label = raw.get("label")
        label = None if label is None or label == "" else str(label)
        return LabelAndValue(label=label, value=raw["value"] if "value" in raw else MISSING)
    return ValueOnly(raw)


def parse_overrides(raw: Any) -> dict[str, Override]:
    """Parse a ``{key: answer}`` mapping. Anything else means no overrides."""
    if not isinstance(raw, Mapping):
        return {}
    return {str(key): parse_override(value) for key, value in raw.items()}


@runtime_checkable
class OverrideProvider(Protocol):
    """Supplies display overrides for a render.

    Called exactly once per render with every enabled key. How many skill
    modules answer, and in what order, is up to the implementation.
    """

    def resolve_overrides(
        self, enabled_keys: list[str], record: PlayerSkillRecord
    ) -> Mapping[str, Override]:
        ...


class NullOverrideProvider:
    """Provider that never overrides anything."""

    def resolve_overrides(
        self, enabled_keys: list[str], record: PlayerSkillRecord
    ) -> Mapping[str, Override]:
        return {}


class StaticOverrideProvider:
    """Provider returning a fixed set of overrides, parsed once."""

    def __init__(self, overrides: Mapping[str, Any]):
        self._overrides = parse_overrides(overrides)

    def resolve_overrides(
        self, enabled_keys: Iterable[str], record: PlayerSkillRecord
    ) -> Mapping[str, Override]:
        enabled = set(enabled_keys)
        return {key: value for key, value in self._overrides.items() if key in enabled}


class HookOverrideProvider:
    """Asks the host's hook dispatch for overrides.

    Sends ``{"skills": [], "enabled": [...], "player": {...}}`` and reads the
    ``skills`` mapping from the merged result. Malformed results and provider
    failures degrade to no overrides.
    """

    def __init__(self, dispatcher: HookDispatcher, hook_name: str = SKILL_DISPLAY_HOOK):
        self._dispatcher = dispatcher
        self._hook_name = hook_name

    def resolve_overrides(
        self, enabled_keys: list[str], record: PlayerSkillRecord
    ) -> Mapping[str, Override]:
        args = {
            "skills": [],
            "enabled": list(enabled_keys),
            "player": record.to_dict(),
        }
        try:
            result = self._dispatcher.dispatch_hook(self._hook_name, args)
        except Exception as e:
            logger.exception(f"Hook '{self._hook_name}' failed, rendering defaults: {e}")
            return {}

        if not isinstance(result, Mapping):
            return {}
        return parse_overrides(result.get("skills"))
