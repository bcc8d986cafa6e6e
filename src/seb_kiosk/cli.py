"""Command-line interface definition for the kiosk browser."""

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from seb_kiosk import __version__


@dataclass(frozen=True)
class CliArguments:
    """Parsed command-line arguments."""

    config_path: str | None
    quit_password: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seb-kiosk",
        description="Safe Exam Browser for Linux - locked-down kiosk browser.",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        metavar="config-file",
        help="Path to JSON configuration file (required)",
    )
    parser.add_argument(
        "--quit-password",
        dest="quit_password",
        metavar="password",
        default="",
        help="Password required to quit the application",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> CliArguments:
    """Parse ``argv``. Qt-specific arguments are left for QApplication."""
    args, _unknown = build_parser().parse_known_args(argv)
    return CliArguments(config_path=args.config or None, quit_password=args.quit_password or "")
