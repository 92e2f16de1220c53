"""
Session management utilities for AWS authentication.
"""

import logging

import boto3

from ..models import SyncConfig

logger = logging.getLogger(__name__)


def create_session(config: SyncConfig) -> boto3.Session:
    """
    Create a boto3 session for the given configuration.

    With no region and no profile the session relies entirely on the shared
    config resolution chain (environment variables, ~/.aws/config,
    ~/.aws/credentials, instance metadata).

    Raises:
        botocore.exceptions.BotoCoreError: e.g. ProfileNotFound for an unknown profile
    """
    kwargs = {}
    if config.region:
        kwargs["region_name"] = config.region
    if config.profile_name:
        kwargs["profile_name"] = config.profile_name

    session = boto3.Session(**kwargs)
    logger.debug(
        f"Created AWS session (profile: {config.profile_name or 'default chain'}, "
        f"region: {session.region_name or 'unresolved'})"
    )
    return session
