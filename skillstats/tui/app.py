"""Textual app showing one account's Skills panel."""

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header

from skillstats.module import CHARSTATS_HOOK, SkillsModule
from skillstats.tui.widgets import SkillsPanel


class SkillStatsTUI(App):
    """Renders the charstats Skills section for a single account."""

    TITLE = "Skill Stats"
    BINDINGS = [
        ("r", "refresh_panel", "Refresh"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, module: SkillsModule, account_id: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self._module = module
        self._account_id = account_id

    def compose(self) -> ComposeResult:
        yield Header()
        yield SkillsPanel(id="skills-panel")
        yield Footer()

    def on_mount(self) -> None:
        self.action_refresh_panel()

    def action_refresh_panel(self) -> None:
        """Re-render the panel; each refresh is its own processing context."""
        panel = self.query_one("#skills-panel", SkillsPanel)
        panel.clear_lines()
        self._module.handle_hook(CHARSTATS_HOOK, {}, self._account_id, panel)
