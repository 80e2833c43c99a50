"""Main entry point for Contract Config."""

import argparse
import json
import logging
import sys

from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

import structlog

from pydantic import ValidationError

from contract_config import __version__
from contract_config.config import (
    Settings,
    load,
    load_config,
    to_host_dict,
    validate_configuration,
)
from contract_config.exceptions import ConfigurationError, InvalidConfigError
from contract_config.utils.constants import APP_DESCRIPTION, APP_NAME


def setup_logging(
    debug: bool = False, log_file: Optional[str] = None, log_level: str = "INFO"
) -> None:
    """Configure structured logging with console and optional file output."""
    level = logging.DEBUG if debug else getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Close and clear existing handlers
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []

    # Console handler; stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            filename=log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.processors.JSONRenderer()
                if not debug
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="contract-config",
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {__version__}"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser.add_argument(
        "--config-file", type=Path, help="JSON configuration file in host shape"
    )

    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command")

    show = subparsers.add_parser("show", help="Print the configuration as JSON")
    show.add_argument(
        "--reveal-secrets",
        action="store_true",
        help="Print signing keys in clear text",
    )
    show.add_argument(
        "--template",
        action="store_true",
        help="Print the baked-in template, ignoring environment and file",
    )

    subparsers.add_parser("check", help="Check the configuration is ready to deploy")

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "show"
        args.reveal_secrets = False
        args.template = False
    return args


def show_command(args: argparse.Namespace, settings: Settings) -> int:
    """Print the host-shape configuration."""
    if args.template:
        config = load()
    else:
        config = load_config(config_file=args.config_file, settings=settings)

    output = to_host_dict(config, reveal_secrets=args.reveal_secrets)
    print(json.dumps(output, indent=2))
    return 0


def check_command(args: argparse.Namespace, settings: Settings) -> int:
    """Validate the configuration and report problems."""
    config = load_config(config_file=args.config_file, settings=settings)

    try:
        validate_configuration(config)
    except InvalidConfigError as e:
        for error in e.errors:
            print(f"✗ {error}", file=sys.stderr)
        return 1

    print("✓ Configuration is ready for deployment")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)

    # Load settings first to pick up log level and debug mode
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error: invalid environment settings: {e}", file=sys.stderr)
        return 1

    setup_logging(
        debug=args.debug or settings.debug,
        log_file=args.log_file,
        log_level=settings.log_level,
    )

    logger = structlog.get_logger()
    logger.debug("Starting", app=APP_NAME, version=__version__, command=args.command)

    commands = {
        "show": show_command,
        "check": check_command,
    }

    try:
        return commands[args.command](args, settings)
    except ConfigurationError as e:
        logger.error("Configuration error", error=str(e))
        return 1


def run() -> None:
    """Synchronous entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    run()
