"""Ephemeral TCP port allocation."""

from __future__ import annotations

import contextlib
import socket

from mcpbrowse.errors import PortAllocationError
from mcpbrowse.logging_config import get_logger

logger = get_logger(__name__)


def allocate_free_port() -> int:
    """Ask the OS for a free TCP port on the wildcard interface.

    The socket is closed before returning, so the port is not reserved: another
    process may bind it before the browser does. Callers that start several
    browsers concurrently must serialize allocation if they need distinct ports.

    Raises:
        PortAllocationError: If the socket cannot be bound or put into listening state.

    """
    try:
        with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as sock:
            sock.bind(("", 0))
            sock.listen(1)
            port: int = sock.getsockname()[1]
    except OSError as exc:
        msg = f"Failed to allocate a free port: {exc}"
        raise PortAllocationError(msg) from exc
    logger.debug("Allocated free port", port=port)
    return port
