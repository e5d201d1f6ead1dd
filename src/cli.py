"""Command-line interface for hmui."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from api import Client, init_client
from app import HybridMountTUI, configure_logging
from constants import APP_VERSION
from errors import ClientError
from settings import load_settings

log = logging.getLogger(__name__)


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


class HmuiHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "hmui - Control panel for the Hybrid Mount module manager.",
            f"Version: {APP_VERSION}",
            "",
            "Interactive:",
            "  hmui                                  Launch the TUI",
            "",
            "One-shot queries (print and exit):",
            "  hmui --status                         System, storage and device status (JSON)",
            "  hmui --show-config                    Current mount configuration (JSON)",
            "  hmui --modules                        Installed modules and their rules (JSON)",
            "  hmui --accent                         Resolved system accent color",
            "  hmui --version                        Installed module version",
            "",
            "Changes:",
            "  hmui --reset-config                   Regenerate the default configuration",
            "",
            "Options:",
            "  --mock                                Use built-in sample data (no device access)",
            "  --binary <path>                       Path to the hybrid-mount binary",
            "  --state-file <path>                   Path to the daemon state file",
            "",
            "Environment:",
            "  HMUI_BINARY, HMUI_STATE_FILE          Same as --binary / --state-file",
            "  HMUI_DEV=1                            Same as --mock",
            "  HMUI_SU                               Privilege command (default: su)",
            "  HMUI_MOCK_LATENCY                     Scale of simulated mock delays (default: 1.0)",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for hmui CLI."""
    parser = argparse.ArgumentParser(
        prog="hmui",
        formatter_class=HmuiHelpFormatter,
        add_help=True,
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("--status", action="store_true", help=argparse.SUPPRESS)
    actions.add_argument("--show-config", action="store_true", help=argparse.SUPPRESS)
    actions.add_argument("--modules", action="store_true", help=argparse.SUPPRESS)
    actions.add_argument("--accent", action="store_true", help=argparse.SUPPRESS)
    actions.add_argument("--version", action="store_true", help=argparse.SUPPRESS)
    actions.add_argument("--reset-config", action="store_true", help=argparse.SUPPRESS)

    parser.add_argument("--mock", action="store_true", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--binary", metavar="PATH", help=argparse.SUPPRESS)
    parser.add_argument("--state-file", metavar="PATH", help=argparse.SUPPRESS)

    return parser


async def collect_status(client: Client) -> dict[str, Any]:
    """Gather every status query into one JSON-ready dict."""
    system, storage, device, version = await asyncio.gather(
        client.get_system_info(),
        client.get_storage_usage(),
        client.get_device_status(),
        client.get_version(),
    )
    return {
        "backend": client.backend,
        "version": version,
        "device": device.to_dict(),
        "storage": storage.to_dict(),
        "system": system.to_dict(),
    }


async def run_command(client: Client, args: argparse.Namespace) -> int:
    """Run one non-interactive action. Returns the process exit code."""
    if args.status:
        print_json(await collect_status(client))
    elif args.show_config:
        config = await client.load_config()
        print_json(config.to_dict())
    elif args.modules:
        modules = await client.scan_modules()
        print_json([module.to_dict() for module in modules])
    elif args.accent:
        color = await client.fetch_system_color()
        print(color if color else "none")
    elif args.version:
        print(await client.get_version())
    elif args.reset_config:
        try:
            await client.reset_config()
        except ClientError as e:
            log.error(f"Reset config failed: {e}")
            print_error_box("Could not reset configuration", str(e))
            return 1
        print("Configuration reset to defaults.")
    return 0


def has_action(args: argparse.Namespace) -> bool:
    return any((args.status, args.show_config, args.modules, args.accent, args.version, args.reset_config))


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = create_parser().parse_args(argv)
    configure_logging()

    settings = load_settings(
        binary=args.binary,
        state_file=args.state_file,
        dev_mode=args.mock,
    )
    client = init_client(settings)
    log.info(f"hmui {APP_VERSION} starting with {client.backend} backend")

    if has_action(args):
        sys.exit(asyncio.run(run_command(client, args)))

    app = HybridMountTUI(client, version=APP_VERSION)
    app.run()


if __name__ == "__main__":
    main()
