"""Main entry point for the kiosk browser."""

import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from seb_kiosk.adapters.config import AppConfig, PolicyLoader
from seb_kiosk.cli import build_parser, parse_arguments
from seb_kiosk.domain.models import LockdownSession, Policy

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_policy(config_path: str | None) -> Policy | None:
    """Load and validate the policy, logging why it failed if it did."""
    if not config_path:
        logger.error("Error: --config option is required")
        logger.error(build_parser().format_help())
        return None

    result = PolicyLoader.try_load(config_path)
    if not result.success or result.policy is None:
        if result.error_kind == "policy":
            logger.error("Error: Configuration validation failed")
        else:
            logger.error(f"Error: Failed to load configuration from: {config_path}")
        logger.error(f"Error details: {result.error_message}")
        return None

    policy = result.policy
    logger.info("Configuration loaded successfully")
    logger.info(f"Start URL: {policy.start_url}")
    logger.info(f"Allowed domains: {list(policy.allowed_domains)}")
    if policy.client_version:
        logger.info(f"Client version: {policy.client_version}")
    if policy.client_type:
        logger.info(f"Client type: {policy.client_type}")
    return policy


def run_kiosk(policy: Policy, session: LockdownSession, config: AppConfig, argv: Sequence[str]) -> int:
    """Create the Qt application and kiosk window and run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from seb_kiosk.adapters.web import KioskWindow

    app = QApplication(list(argv))
    app.setApplicationName(config.application_name)
    app.setApplicationVersion(config.application_version)

    window = KioskWindow(policy, session, config)
    window.show()
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    """Application entry point. Returns the process exit status."""
    argv = list(sys.argv if argv is None else argv)
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging("INFO")
        logger.error("Error: Invalid environment configuration")
        for error in e.errors():
            field = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            logger.error(f"Error details: {field}: {error.get('msg', 'invalid value')}")
        return 1
    configure_logging(config.log_level)
    logger.info(config.describe_session_type())

    arguments = parse_arguments(argv[1:])
    policy = load_policy(arguments.config_path)
    if policy is None:
        return 1

    session = LockdownSession(
        quit_password=arguments.quit_password,
        is_restricted_shortcut_environment=config.is_restricted_shortcut_environment,
    )
    return run_kiosk(policy, session, config, argv)


if __name__ == "__main__":
    sys.exit(main())
