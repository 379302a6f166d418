#!/usr/bin/env python3
"""
nsupdate-cloudflare - Command Line Interface

Main entry point for replaying an nsupdate file against a Cloudflare zone.
"""

import argparse
import logging
import os
import sys
from typing import Dict, Optional

import yaml
from rich.console import Console
from rich.table import Table

from .. import __description__, __version__
from ..core.dns_manager import DNSManager, RunSummary
from ..exceptions import NSUpdateError
from ..utils.validators import validate_zone_id

LOG_LEVEL_VAR = "NSUPDATE_CLOUDFLARE_LOG"
TOKEN_VAR = "CLOUDFLARE_API_TOKEN"
VERBOSE_LEVELS = ["WARNING", "INFO", "DEBUG"]
LEVEL_ALIASES = {"WARN": "WARNING", "TRACE": "DEBUG", "OFF": "CRITICAL"}

console = Console()
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nsupdate-cloudflare", description=__description__)

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("--file", "-f", required=True, help="Path to nsupdate file")

    parser.add_argument("--zone", "-z", help="Zone ID retrieved from Cloudflare")

    parser.add_argument(
        "--token",
        "-t",
        help=f"API token retrieved from Cloudflare (default: ${TOKEN_VAR})",
    )

    parser.add_argument(
        "--config",
        "-c",
        help="Configuration file path",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the requests each batch would send without contacting the provider",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase verbosity (-v for info, -vv for debug)",
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    config = load_config(args.config) if args.config else get_default_config()
    config_logger(config, args.verbose)

    zone = args.zone or config.get("zone")
    if not zone:
        console.print("[red]Error: no zone given, use --zone or set 'zone' in the config[/red]")
        sys.exit(1)

    provider_name = config.get("default_provider", "cloudflare")
    if provider_name == "cloudflare":
        providers = config["dns_providers"] = config.get("dns_providers") or {}
        provider_config = providers["cloudflare"] = providers.get("cloudflare") or {}
        token = args.token or os.environ.get(TOKEN_VAR) or provider_config.get("api_token")
        if not token and not args.dry_run:
            console.print(f"[red]Error: no API token given, use --token or ${TOKEN_VAR}[/red]")
            sys.exit(1)
        provider_config["api_token"] = token or ""
        if not validate_zone_id(zone):
            logger.warning(f"Zone '{zone}' does not look like a Cloudflare zone ID")

    if args.dry_run:
        config["default_provider"] = "mock"

    try:
        logger.info("Reading nsupdate file...")
        with open(args.file, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except OSError as e:
        console.print(f"[red]Error: cannot read nsupdate file '{args.file}': {e}[/red]")
        sys.exit(1)

    try:
        logger.info("Start parsing...")
        summary = DNSManager(config).execute(text, zone, dry_run=args.dry_run)
    except NSUpdateError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    display_summary(summary, dry_run=args.dry_run)
    sys.exit(0)


def display_summary(summary: RunSummary, dry_run: bool = False):
    """Print per-batch and grand totals."""
    table = Table(title="DRY RUN - Planned Requests" if dry_run else "nsupdate Summary")
    table.add_column("Batch", style="cyan")
    table.add_column("Commands", style="magenta")
    if dry_run:
        table.add_column("Requests", style="white")
    else:
        table.add_column("Processed", style="green")
        table.add_column("Failed", style="red")

    for batch in summary.batches:
        if not batch.send:
            status = ["not sent"] if dry_run else ["-", "not sent"]
        elif dry_run:
            status = [str(len(batch.requests))]
        else:
            status = [str(batch.tally.processed), str(batch.tally.failed)]
        table.add_row(str(batch.number), str(batch.commands), *status)

    console.print(table)
    if not dry_run:
        total = summary.total
        console.print(
            f"\n[bold]Processed {total.processed} requests in total, {total.failed} failed[/bold]"
        )


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        console.print(f"[red]Error parsing config file: {e}[/red]")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"cloudflare": {}},
        "default_provider": "cloudflare",
        "logging": {"level": "WARNING"},
    }


def _resolve_level(config: Dict, verbose: int) -> str:
    env_level = os.environ.get(LOG_LEVEL_VAR)
    if env_level:
        # env_logger filter syntax, e.g. "warn,nsupdate_cloudflare=debug"
        directive = env_level.split(",")[-1].strip()
        level = directive.rpartition("=")[2].strip().upper()
        return LEVEL_ALIASES.get(level, level)
    if verbose:
        return VERBOSE_LEVELS[min(verbose, len(VERBOSE_LEVELS) - 1)]
    return str((config.get("logging") or {}).get("level", "WARNING")).upper()


def config_logger(config: Dict, verbose: int = 0):
    """Configure logging."""
    log_level = _resolve_level(config, verbose)
    log_file: Optional[str] = (config.get("logging") or {}).get("file")
    level = getattr(logging, log_level, None)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{log_level}', using WARNING")


if __name__ == "__main__":
    main()
