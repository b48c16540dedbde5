"""
Command-line interface for the skill stats module.

Usage:
    python -m skillstats.cli init-db             Create the skills table if missing
    python -m skillstats.cli show ACCOUNT_ID     Print an account's Skills panel
    python -m skillstats.cli watch ACCOUNT_ID    Show the panel in a TUI
"""

import argparse
import logging
import sys

from skillstats.config import Config, load_config, setup_logging
from skillstats.exceptions import SkillStatsError
from skillstats.module import CHARSTATS_HOOK, create_module
from skillstats.tui.widgets import ConsolePanel

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace, config: Config) -> int:
    """Provision the skills table."""
    module = create_module(config)
    try:
        module.install(_NoHooks())
    except Exception as e:
        logger.exception(f"Schema provisioning failed: {e}")
        print(f"Error creating skills table: {e}")
        return 1
    print("Skills table ready.")
    return 0


def cmd_show(args: argparse.Namespace, config: Config) -> int:
    """Print the Skills panel for one account."""
    module = create_module(config)
    panel = ConsolePanel()
    module.handle_hook(CHARSTATS_HOOK, {}, args.account_id, panel)
    panel.print()
    return 0


def cmd_watch(args: argparse.Namespace, config: Config) -> int:
    """Show the Skills panel in the TUI."""
    from skillstats.tui import SkillStatsTUI

    module = create_module(config)
    logger.info(f"Starting TUI for account {args.account_id}")
    try:
        SkillStatsTUI(module, args.account_id).run()
    except Exception as e:
        logger.exception(f"TUI error: {e}")
        print(f"Error starting TUI: {e}")
        return 1
    return 0


class _NoHooks:
    """Registrar used outside a host engine; hook registration is a no-op."""

    def add_hook(self, name: str) -> None:
        logger.debug(f"No host engine, skipping registration of hook '{name}'")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Skill stats - per-account skill progression panel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=None, help="Path to YAML config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_parser = subparsers.add_parser("init-db", help="Create the skills table if missing")
    init_parser.set_defaults(func=cmd_init_db)

    show_parser = subparsers.add_parser("show", help="Print an account's Skills panel")
    show_parser.add_argument("account_id", type=int, help="Account id")
    show_parser.set_defaults(func=cmd_show)

    watch_parser = subparsers.add_parser("watch", help="Show an account's panel in a TUI")
    watch_parser.add_argument("account_id", type=int, help="Account id")
    watch_parser.set_defaults(func=cmd_watch)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
    except SkillStatsError as e:
        print(f"Configuration error: {e}")
        return 1
    setup_logging(config.logging)

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
