import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from reminders_export.config import Settings, load_settings
from reminders_export.export import ExportOrchestrator, ExportOutcome
from reminders_export.services import DesktopFileSink, create_notifier
from reminders_export.sources import create_source
from reminders_export.utils import setup_logger

load_dotenv()

logger = logging.getLogger(__name__)

# Absolute, independent of the working directory
DEFAULT_CONFIG = Path(__file__).resolve().parent / "config.yaml"


async def run_export(list_name: str | None, settings: Settings) -> ExportOutcome:
    """Run one export with collaborators built from settings."""
    source = create_source(settings.source)
    orchestrator = ExportOrchestrator(
        source=source,
        sink=DesktopFileSink(settings.export.output_dir),
        notifier=create_notifier(settings.notifications.backend),
        reveal_folder=settings.export.reveal_folder,
    )
    try:
        return await orchestrator.run(list_name)
    finally:
        await source.close()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="reminders-export",
        description="Export reminders to a CSV file on the desktop.",
    )
    parser.add_argument(
        "list_name",
        nargs="?",
        help="Export only this list. Omit to export all lists and show a dialog when done.",
    )
    parser.add_argument("--config", default=str(DEFAULT_CONFIG), help="Path to config.yaml (default: %(default)s)")
    return parser.parse_args(argv)


def cli(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
        setup_logger(settings.logging.directory, settings.logging.level)
    except ValidationError as e:
        print(f"Error: Invalid configuration in {args.config}: {e.error_count()} problem(s), first: {e.errors()[0]['msg']}")
        return 1
    except (OSError, yaml.YAMLError) as e:
        print(f"Error: {' '.join(str(e).split())}")
        return 1

    outcome = asyncio.run(run_export(args.list_name, settings))

    # The result string on stdout is what Shortcuts / shell callers consume
    print(outcome.result)
    return 1 if outcome.is_error else 0


if __name__ == "__main__":
    sys.exit(cli())
