#!/usr/bin/env python3
"""
EC2 SSH Sync - SSH Configuration Generator for AWS EC2

This tool generates an SSH config by:
1. Describing the EC2 instances visible to the current AWS credentials
2. Keeping instances that have a key pair, a public address and a clean Name tag
3. Rendering one Host block per instance
4. Writing the configuration to a file or stdout

Usage:
    ec2-ssh-sync [-region REGION] [-output PATH] [-profile PROFILE]
"""

import argparse
import logging
import sys
from typing import Any, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .client import EC2Client
from .exceptions import SSHSyncError
from .models import SyncConfig
from .utils.display import display_completion, display_error, display_ssh_config_summary
from .utils.output import write_ssh_config
from .utils.ssh_config import build_ssh_config_entries, render_ssh_config

logger = logging.getLogger(__name__)

BANNER = "Reach for the heavens! Engrave the chronicle! It's time to go beyond!"


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    for noisy in ("botocore", "boto3", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ec2-ssh-sync",
        description=f"{BANNER}\n\nGenerate SSH config entries for AWS EC2 instances.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ec2-ssh-sync -region us-west-2
  ec2-ssh-sync -region eu-central-1 -output ~/.ssh/aws_config
  ec2-ssh-sync --profile staging --use-public-ip
        """
    )

    parser.add_argument(
        '-region', '--region',
        default='',
        help='AWS region name (default: resolved from the AWS environment/config)'
    )

    parser.add_argument(
        '-output', '--output',
        default='',
        help='Output configuration path, should not be ~/.ssh/config (default: stdout)'
    )

    parser.add_argument(
        '-profile', '--profile',
        default='',
        help='AWS shared config profile (default: standard credential chain)'
    )

    parser.add_argument(
        '--use-public-ip',
        action='store_true',
        help='Use the public IP address instead of the public DNS name as HostName'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging, including skipped instances'
    )

    return parser.parse_args(argv)


def run(config: SyncConfig, lister: Optional[Any] = None) -> int:
    """
    Run one sync: list instances, build entries, render and write.

    Args:
        config: Run configuration
        lister: Object providing ``describe_instances()``; defaults to an EC2Client

    Returns:
        Number of entries written

    Raises:
        InstanceListError: If the instance inventory cannot be fetched
        OutputError: If the output cannot be written
    """
    if lister is None:
        lister = EC2Client(config)

    reservations = lister.describe_instances()
    entries = build_ssh_config_entries(reservations, config.address_field)
    content = render_ssh_config(entries)

    write_ssh_config(content, config.output_path)

    if not config.writes_to_stdout():
        display_ssh_config_summary(entries)
        display_completion(config.output_path)

    return len(entries)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to generate SSH configuration for EC2 instances."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    config = SyncConfig.from_args(args)
    logger.debug(f"Configuration: {config.model_dump()}")

    try:
        run(config)
    except SSHSyncError as e:
        display_error(str(e))
        return 1

    return 0


def cli() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[yellow]Program interrupted by user.[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    cli()
