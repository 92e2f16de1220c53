"""
Output helpers for writing the generated SSH config.
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from ..exceptions import OutputError

logger = logging.getLogger(__name__)

OUTPUT_FILE_MODE = 0o600


@contextmanager
def open_output(path: Optional[str] = None) -> Iterator[TextIO]:
    """
    Open the destination for the SSH config.

    An empty path yields ``sys.stdout``, which is left open. Otherwise the
    file is created or truncated with owner-only permissions and closed when
    the block exits.

    Raises:
        OutputError: If the file cannot be opened or written
    """
    if not path:
        try:
            yield sys.stdout
            sys.stdout.flush()
        except OSError as e:
            raise OutputError(f"failed to write to stdout: {e}") from e
        return

    try:
        fd = os.open(path, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, OUTPUT_FILE_MODE)
    except OSError as e:
        raise OutputError(f"open {path}: {e.strerror or e}") from e

    logger.debug(f"Opened {path} for writing")
    handle = os.fdopen(fd, "w", encoding="utf-8")
    try:
        yield handle
        handle.flush()
    except OSError as e:
        raise OutputError(f"write {path}: {e.strerror or e}") from e
    finally:
        handle.close()


def write_ssh_config(content: str, path: Optional[str] = None) -> None:
    """Write rendered SSH config text to ``path`` or stdout."""
    with open_output(path) as handle:
        handle.write(content)
