"""
Exceptions raised by the skill stats package.

Read and render paths never raise these to the host; they surface only from
write paths and configuration loading.
"""


class SkillStatsError(Exception):
    """Base exception for skill stats errors."""

    pass


class UnknownSkillError(SkillStatsError):
    """Raised when a write targets a skill key that is not registered."""

    def __init__(self, message: str, skill_key: str = ""):
        self.skill_key = skill_key
        super().__init__(message)


class ConfigError(SkillStatsError):
    """Raised when a configuration file cannot be applied."""

    def __init__(self, message: str, section: str = "", errors: list[str] | None = None):
        self.section = section
        self.errors = errors or []
        super().__init__(message)
