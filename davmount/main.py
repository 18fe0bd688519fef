import argparse
import asyncio
import logging
from typing import List, Optional

from . import __version__
from .config import Settings
from .dependencies import create_mount_coordinator, get_error_reporter, get_settings
from .logging_config import setup_logging
from .models import RunState
from .services.document_source import create_document_source
from .services.network_mount import UnsupportedPlatformError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="davmount",
        description="Mount the WebDAV share described by a dav mount manifest "
        "and open the resource it points at",
    )

    parser.add_argument(
        "location",
        help="Path of a local manifest file, or its URL with --remote",
    )

    parser.add_argument(
        "--remote",
        action="store_true",
        help="Fetch the manifest over HTTP instead of reading a local file",
    )

    parser.add_argument(
        "--no-interactive",
        dest="interactive",
        action="store_false",
        default=None,
        help="Do not let the mount subsystem prompt for credentials",
    )

    parser.add_argument(
        "--no-open",
        dest="open_viewer",
        action="store_false",
        default=None,
        help="Do not open the mounted location in the file manager",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: from settings)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings with any CLI flags applied on top."""
    overrides = {}
    if args.interactive is not None:
        overrides["interactive_mount"] = args.interactive
    if args.open_viewer is not None:
        overrides["open_viewer_on_success"] = args.open_viewer
    if args.log_level:
        overrides["log_level"] = args.log_level
    return settings.model_copy(update=overrides) if overrides else settings


async def run(location: str, remote: bool, settings: Settings) -> RunState:
    """Process one manifest and return the state the run ended in."""
    source = create_document_source(location, remote, settings)
    coordinator = create_mount_coordinator(settings)
    return await coordinator.run(source)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    setup_logging(settings)

    try:
        final_state = asyncio.run(run(args.location, args.remote, settings))
    except UnsupportedPlatformError as e:
        logging.error(str(e))
        get_error_reporter().report_error("Error mounting WebDAV", str(e))
        return 1

    logging.debug(f"Run finished in state {final_state.value}")
    return 0 if final_state == RunState.DONE else 1

