"""TUI widgets for the skill stats viewer."""

from .skills_panel import ConsolePanel, SkillsPanel

__all__ = [
    "ConsolePanel",
    "SkillsPanel",
]
