"""
Utility functions for SSH config generation from EC2 instances.
"""

import logging
from typing import Any, Dict, Iterable, Tuple, Union

from ..models import AddressField, InstanceInfo, SSHConfigEntry

logger = logging.getLogger(__name__)

CONFIG_HEADER = "# generated configurations by chronus"


def validate_name(name: str) -> bool:
    """Check that a Name tag can be used as an SSH Host alias."""
    return name != "" and " " not in name


def build_ssh_config_entries(
    reservations: Iterable[Dict[str, Any]],
    address_field: Union[AddressField, str] = AddressField.PUBLIC_DNS,
) -> Tuple[SSHConfigEntry, ...]:
    """
    Map DescribeInstances reservations to SSH config entries.

    Instances without a key pair, without a public address or without a
    usable Name tag are dropped. Encounter order is preserved.

    Args:
        reservations: ``Reservations`` list from a DescribeInstances response
        address_field: Which public address becomes the HostName

    Returns:
        Tuple of SSH config entries
    """
    address_field = AddressField(address_field)
    entries = []

    for reservation in reservations:
        for raw in reservation.get("Instances") or []:
            instance = InstanceInfo.from_ec2(raw)
            address = instance.address(address_field)

            if not instance.key_name:
                logger.debug(f"Skipping {instance.instance_id}: no key pair")
                continue
            if not address:
                logger.debug(f"Skipping {instance.instance_id}: no {address_field.value} address")
                continue
            if not validate_name(instance.name):
                logger.debug(f"Skipping {instance.instance_id}: invalid name {instance.name!r}")
                continue

            entries.append(
                SSHConfigEntry(
                    name=instance.name,
                    hostname=address,
                    key_name=instance.key_name,
                )
            )

    logger.info(f"Generated {len(entries)} SSH config entries")
    return tuple(entries)


def render_ssh_config(entries: Iterable[SSHConfigEntry]) -> str:
    """Render entries as SSH config text, header first, one Host block per entry."""
    parts = ["\n", CONFIG_HEADER, "\n"]
    for entry in entries:
        parts.append("\n")
        parts.append(entry.to_config_text())
    parts.append("\n")
    return "".join(parts)
