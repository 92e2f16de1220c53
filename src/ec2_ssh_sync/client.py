"""EC2 client wrapper used to fetch the instance inventory."""

import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import InstanceListError
from .models import SyncConfig
from .utils.session import create_session

logger = logging.getLogger(__name__)


class EC2Client:
    """Thin EC2 client bound to an explicit configuration."""

    def __init__(self, config: SyncConfig, ec2_client: Optional[Any] = None):
        """
        Initialize the client.

        Args:
            config: Run configuration (region and profile are used here)
            ec2_client: Optional pre-built botocore EC2 client; created lazily if omitted
        """
        self.config = config
        self._ec2_client = ec2_client

    @property
    def ec2_client(self) -> Any:
        """Lazy-load the EC2 API client."""
        if self._ec2_client is None:
            try:
                session = create_session(self.config)
                self._ec2_client = session.client("ec2")
            except (BotoCoreError, ClientError) as e:
                logger.debug(f"Failed to create EC2 client: {e}")
                raise InstanceListError(str(e)) from e
        return self._ec2_client

    def describe_instances(self) -> List[Dict[str, Any]]:
        """
        Describe all instances visible to the configured credentials.

        A single DescribeInstances call is made; neither pagination nor API
        side filtering is applied.

        Returns:
            The list of reservations, each holding an ``Instances`` list

        Raises:
            InstanceListError: If the session cannot be created or the call fails
        """
        client = self.ec2_client
        try:
            response = client.describe_instances()
        except (BotoCoreError, ClientError) as e:
            logger.debug(f"DescribeInstances failed: {e}")
            raise InstanceListError(str(e)) from e

        reservations = response.get("Reservations", [])
        logger.info(f"Found {len(reservations)} reservations")
        return reservations
