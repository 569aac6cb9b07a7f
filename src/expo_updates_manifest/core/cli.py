"""Command line entry point for the Expo Updates manifest server."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Callable
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from expo_updates_manifest.core.app.application_factory import build_app
from expo_updates_manifest.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
)
from expo_updates_manifest.core.config.app_config import (
    AppConfig,
    LogLevel,
    load_config,
)


def is_port_in_use(host: str, port: int) -> bool:
    """Check if a port is in use on a given host."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex((host, port)) == 0


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve Expo Updates manifests for a project"
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    parser.add_argument("--host", help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument(
        "--project-root",
        dest="project_root",
        help="Root directory of the Expo project (defaults to the current directory)",
    )
    parser.add_argument(
        "--developer-tool",
        dest="developer_tool",
        help="Developer tool name reported in manifests and analytics",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument("--log-file", dest="log_file", help="Also log to this file")
    parser.add_argument(
        "--request-logging",
        dest="request_logging",
        action="store_true",
        default=None,
        help="Log every request and response status",
    )
    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides on top of it."""
    cfg = load_config(args.config_file)

    if args.host is not None:
        cfg.host = args.host
    if args.port is not None:
        cfg.port = args.port
    if args.project_root is not None:
        cfg.project_root = str(Path(args.project_root).resolve())
    if args.developer_tool is not None:
        cfg.developer_tool = args.developer_tool
    if args.log_level is not None:
        cfg.logging.level = LogLevel(args.log_level)
    if args.log_file is not None:
        cfg.logging.log_file = args.log_file
    if args.request_logging:
        cfg.logging.request_logging = True
        cfg.logging.response_logging = True

    return AppConfig.model_validate(cfg.model_dump())


def _configure_logging(cfg: AppConfig) -> None:
    configure_logging_with_environment_tagging(
        level=getattr(logging, cfg.logging.level.value),
        log_file=cfg.logging.log_file,
    )


def main(
    argv: list[str] | None = None,
    build_app_fn: Callable[[AppConfig], FastAPI] | None = None,
) -> None:
    args = parse_cli_args(argv)
    try:
        cfg = apply_cli_args(args)
    except ValueError as e:
        sys.stderr.write(f"\nERROR: Invalid configuration: {e}\n")
        sys.exit(2)

    _configure_logging(cfg)

    if not Path(cfg.project_root).is_dir():
        logging.error("Project root %s is not a directory", cfg.project_root)
        sys.exit(1)

    app = build_app_fn(cfg) if build_app_fn else build_app(cfg)

    if is_port_in_use(cfg.host, cfg.port):
        error_msg = f"Port {cfg.port} is already in use."
        logging.error(error_msg)
        sys.stderr.write(f"\nERROR: {error_msg}\n")
        sys.exit(1)

    logging.info("Starting uvicorn on %s:%s", cfg.host, cfg.port)
    try:
        uvicorn.run(app, host=cfg.host, port=cfg.port, log_config=None)
    except Exception as e:
        logging.exception("Uvicorn failed to start: %s", e)
        raise


if __name__ == "__main__":
    main()
