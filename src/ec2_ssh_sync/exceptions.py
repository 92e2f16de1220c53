"""Exceptions raised by EC2 SSH Sync."""


class SSHSyncError(Exception):
    """Base class for errors that abort a sync run."""


class InstanceListError(SSHSyncError):
    """Raised when the EC2 instance inventory cannot be retrieved."""


class OutputError(SSHSyncError):
    """Raised when the SSH config cannot be written to its destination."""
