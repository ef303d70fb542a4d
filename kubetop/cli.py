"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from kubetop import __version__
from kubetop.constants import APP_TITLE
from kubetop.constants.enums import ViewType
from kubetop.controllers.cluster.client import KubectlClient, resolve_kubeconfig
from kubetop.controllers.cluster.controller import ClusterController
from kubetop.controllers.errors import ConfigurationError
from kubetop.models.state.app_settings import AppSettings, ConfigError
from kubetop.models.state.config_manager import ConfigManager
from kubetop.utils.logging_config import VALID_LOG_LEVELS, setup_logging

module_logger = logging.getLogger(__name__)

_COMMANDS = ("nodes", "pods", "events", "version")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_TITLE,
        description="Read-only terminal dashboard for Kubernetes resource usage.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=_COMMANDS,
        default=None,
        help="Start view (default: pods, or default_view from the settings file) or 'version'",
    )
    parser.add_argument("--kubeconfig", type=str, default=None, help="Path to the kubeconfig file")
    parser.add_argument("--context", type=str, default=None, help="Kubernetes context to use")
    parser.add_argument(
        "-n",
        "--namespace",
        type=str,
        default=None,
        help="Start with the namespace filter set",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to the settings file")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=[level.lower() for level in VALID_LOG_LEVELS],
        help="File logging level (default: warning)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> AppSettings:
    """Read the settings file and apply the command-line overrides.

    Raises:
        ConfigError: The settings file is missing (when requested) or invalid.
    """
    settings = ConfigManager(args.config).load()
    return ConfigManager.apply_overrides(
        settings,
        kubeconfig=args.kubeconfig,
        context=args.context,
        namespace=args.namespace,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def build_controller(settings: AppSettings) -> ClusterController:
    """Resolve the kubeconfig and verify the cluster answers.

    Raises:
        ConfigurationError: No kubeconfig, or the API server is unreachable.
    """
    kubeconfig = resolve_kubeconfig(settings.kubeconfig or None)
    client = KubectlClient(kubeconfig, settings.context or None)
    controller = ClusterController(
        client,
        log_tail_lines=settings.log_tail_lines,
        max_pod_events=settings.max_pod_events,
    )
    if not asyncio.run(controller.check_connection()):
        raise ConfigurationError("cannot reach the Kubernetes API server with the given kubeconfig")
    return controller


def main(argv: Sequence[str] | None = None) -> int:
    """Program entry point: parse arguments, check the cluster, run the TUI."""
    args = build_parser().parse_args(argv)

    if args.command == "version":
        print(f"{APP_TITLE} {__version__}")
        return 0

    try:
        settings = load_settings(args)
    except ConfigError as exc:
        print(f"{APP_TITLE}: {exc}", file=sys.stderr)
        return 1

    log_level = setup_logging(Path(settings.log_file).expanduser(), settings.log_level)
    module_logger.info("---- %s v%s starting (file log level: %s) ----", APP_TITLE, __version__, log_level)

    try:
        controller = build_controller(settings)
    except ConfigurationError as exc:
        module_logger.error("Startup failed: %s", exc)
        print(f"{APP_TITLE}: {exc}", file=sys.stderr)
        return 1

    initial_view = ViewType(args.command) if args.command else ViewType(settings.default_view)

    # Import here so `kubetop version` and config errors never load Textual.
    from kubetop.app import KubetopApp

    app = KubetopApp(controller, settings, initial_view)
    app.run()
    module_logger.info("%s has shut down", APP_TITLE)
    return app.return_code or 0
