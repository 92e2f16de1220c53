"""
EC2 SSH Sync - SSH Configuration Generator for AWS EC2

Describes the EC2 instances of an AWS account and renders an SSH config with
one Host block per reachable, key-bearing, cleanly named instance.
"""

__version__ = "1.0.0"
__description__ = "SSH Configuration Generator for AWS EC2"

from .ssh_sync import main

__all__ = ["main"]
