"""Composition of the Skills section of the character-stats panel."""

from .compositor import DisplayCompositor, StatLine, format_progress
from .overrides import (
    LabelAndValue,
    HookOverrideProvider,
    NoOverride,
    NullOverrideProvider,
    OverrideProvider,
    StaticOverrideProvider,
    ValueOnly,
    parse_override,
    parse_overrides,
)

__all__ = [
    "DisplayCompositor",
    "StatLine",
    "format_progress",
    "LabelAndValue",
    "HookOverrideProvider",
    "NoOverride",
    "NullOverrideProvider",
    "OverrideProvider",
    "StaticOverrideProvider",
    "ValueOnly",
    "parse_override",
    "parse_overrides",
]
