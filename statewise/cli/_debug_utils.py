from __future__ import annotations

import argparse
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def configure_cli_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if _debug_enabled(args) else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT, force=True)


def _fmt_bool(value: bool) -> str:
    return "true" if value else "false"
