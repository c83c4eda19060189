#!/usr/bin/env python3
"""
Simple script to start the Isac shell.
Run with: python3 -m start_shell
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from isac.config import ShellSettings, check_log_level, setup_logging
from isac.plugin import ProviderRegistry, default_registry
from isac.shell import Prompter

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="isac-shell")
    parser.add_argument("--list-providers", action="store_true", help="List prompt providers in selection order and exit")
    parser.add_argument("--print-prompt", action="store_true", help="Print the selected prompt and exit")
    parser.add_argument("--provider", default=None, help="Use the prompt provider with this name")
    parser.add_argument("--exit-sequence", default=None, help="Command that ends the session")
    parser.add_argument("--log-level", default=None, help="Logging level")
    parser.add_argument("--no-discover", action="store_true", help="Do not load providers from entry points")
    return parser


def _list_providers(registry: ProviderRegistry, console: Console) -> None:
    table = Table(title="Prompt providers")
    table.add_column("Priority", justify="right")
    table.add_column("Name")
    table.add_column("Prompt")
    for provider in registry.providers():
        table.add_row(
            str(registry.priority_of(provider)),
            provider.get_provider_name(),
            provider.get_prompt(),
        )
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Start the interactive shell."""
    args = _build_parser().parse_args(argv)
    console = Console()

    try:
        settings = ShellSettings.from_env()
        if args.log_level:
            settings.log_level = check_log_level(args.log_level)
    except ValueError as e:
        console.print(f"Error: {e}", markup=False)
        return 1

    if args.exit_sequence:
        settings.exit_sequence = args.exit_sequence
    if args.provider:
        settings.prompt_provider = args.provider
    if args.no_discover:
        settings.discover = False

    setup_logging(settings.log_level, settings.log_file)
    registry = default_registry(discover=settings.discover)

    if args.list_providers:
        _list_providers(registry, console)
        return 0

    try:
        if args.print_prompt:
            console.print(registry.select(settings.prompt_provider).get_prompt(), markup=False)
            return 0

        prompter = Prompter(
            registry,
            exit_sequence=settings.exit_sequence,
            provider_name=settings.prompt_provider,
            console=console,
        )
        prompter.run_interactive_session()
    except LookupError as e:
        logger.error("Prompt provider selection failed: %s", e)
        console.print(f"Error: {e}", markup=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
