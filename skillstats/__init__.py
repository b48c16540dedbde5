"""
Skill Stats - per-account skill progression for a persistent text game.

Stores level and experience for every registered skill and renders them into
the host's character-stats panel, letting other skill modules override the
label and value shown for any skill.
"""

__version__ = "1.4.0"
