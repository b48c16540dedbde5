"""TUI for viewing an account's skill stats."""

from .app import SkillStatsTUI
from .widgets import ConsolePanel, SkillsPanel

__all__ = [
    "SkillStatsTUI",
    "ConsolePanel",
    "SkillsPanel",
]
