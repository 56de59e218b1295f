"""Application startup.

Entry point that parses the configuration-related options, sets up logging and
either bootstraps the default config file or resolves the config handed to the
highlighter. This is the only place where failures turn into process exits.
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Tuple

from loguru import logger

from config.bootstrap import generate_default_config
from config.config import load_config
from config.model import Config
from config.paths import display_path, home_dir
from core.error_handler import exit_on_failure

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "<level>{level: <8}</level> | {name}:{line} - {message}"


def parse_args(argv: List[str]) -> Tuple[argparse.Namespace, List[str]]:
    """Parse the options this package owns.

    Args:
        argv: Command-line arguments

    Returns:
        Tuple of (parsed options, arguments left for the highlighter)
    """
    parser = argparse.ArgumentParser(description="tailspin configuration", add_help=False)
    parser.add_argument(
        "--config-path",
        help="Path to a custom configuration file",
    )
    parser.add_argument(
        "--create-default-config",
        action="store_true",
        help="Write the default configuration to ~/.config/tailspin/config.toml and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Set logging level",
    )
    return parser.parse_known_args(argv)


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean environment variable (true for 1, true, yes, y, on)."""
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def resolve_log_level(args: argparse.Namespace) -> str:
    """Pick the log level with precedence: default → environment → CLI."""
    level = DEFAULT_LOG_LEVEL
    env_level = os.getenv("LOG_LEVEL")
    if env_level and env_level.upper() in LOG_LEVELS:
        level = env_level.upper()
    if _env_bool("DEBUG"):
        level = "DEBUG"
    if args.log_level:
        level = args.log_level
    if args.debug:
        level = "DEBUG"
    return level


def configure_logging(level: str) -> int:
    """Replace loguru's default sink with a stderr sink at ``level``.

    Returns:
        The id of the added sink
    """
    logger.remove()
    return logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def run_application(argv: Optional[List[str]] = None) -> Tuple[Optional[Config], List[str]]:
    """Run the configuration startup sequence.

    1. Parse configuration options and set up logging
    2. With --create-default-config, write the default file and stop
    3. Otherwise resolve the Config for the highlighter

    Args:
        argv: Command-line arguments (sys.argv[1:] by default)

    Returns:
        Tuple of (Config, unknown arguments); Config is None after bootstrapping

    Raises:
        SystemExit: With status 1 on any configuration failure
    """
    args, unknown_args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(resolve_log_level(args))

    if args.create_default_config:
        path = exit_on_failure(generate_default_config())
        print(f"Config file generated successfully at {display_path(path, home_dir())}")
        return None, unknown_args

    config = exit_on_failure(load_config(args.config_path))
    logger.info("Loaded config with groups: {}", ", ".join(config.groups.enabled()) or "none")
    logger.debug("Config: {}", config.to_dict())
    return config, unknown_args
