"""Data models for EC2 SSH Sync."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class AddressField(str, Enum):
    """Instance attribute used as the SSH HostName."""
    PUBLIC_DNS = "public_dns"
    PUBLIC_IP = "public_ip"


def _tag_value(tags: Optional[Iterable[Dict[str, str]]], key: str) -> str:
    for tag in tags or []:
        if tag.get("Key") == key:
            return tag.get("Value") or ""
    return ""


@dataclass(frozen=True)
class InstanceInfo:
    """Information about an EC2 instance taken from a DescribeInstances record."""
    instance_id: str
    name: str
    key_name: str
    public_dns_name: str
    public_ip: str

    @classmethod
    def from_ec2(cls, instance: Dict[str, Any]) -> "InstanceInfo":
        """Normalize a raw instance dict; missing attributes become empty strings."""
        return cls(
            instance_id=instance.get("InstanceId") or "",
            name=_tag_value(instance.get("Tags"), "Name"),
            key_name=instance.get("KeyName") or "",
            public_dns_name=instance.get("PublicDnsName") or "",
            public_ip=instance.get("PublicIpAddress") or "",
        )

    def address(self, address_field: AddressField = AddressField.PUBLIC_DNS) -> str:
        """Return the public address selected by ``address_field``."""
        if AddressField(address_field) is AddressField.PUBLIC_IP:
            return self.public_ip
        return self.public_dns_name


@dataclass(frozen=True)
class SSHConfigEntry:
    """Represents a single SSH config entry."""
    name: str
    hostname: str
    key_name: str

    @property
    def identity_file(self) -> str:
        return f"~/.ssh/{self.key_name}.pem"

    def to_config_text(self) -> str:
        """Convert to SSH config text format."""
        return (
            f"Host {self.name}\n"
            f"   HostName {self.hostname}\n"
            f"   IdentityFile {self.identity_file}\n"
        )


class SyncConfig(BaseModel):
    """Run configuration with validation.

    Empty strings are treated as "not set" so that ``region=""`` falls back to
    the boto3 default resolution chain and ``output_path=""`` means stdout.
    """
    model_config = ConfigDict(validate_assignment=True)

    region: Optional[str] = None
    profile_name: Optional[str] = None
    output_path: Optional[str] = None
    address_field: AddressField = AddressField.PUBLIC_DNS

    @field_validator("region", "profile_name", "output_path", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @classmethod
    def from_args(cls, args: Any) -> "SyncConfig":
        """Build configuration from parsed command line arguments."""
        return cls(
            region=args.region,
            profile_name=args.profile,
            output_path=args.output,
            address_field=AddressField.PUBLIC_IP if args.use_public_ip else AddressField.PUBLIC_DNS,
        )

    def writes_to_stdout(self) -> bool:
        """Check if the rendered config goes to standard output."""
        return self.output_path is None
