from .ssh_sync import cli

cli()
