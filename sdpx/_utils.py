"""Utilities and constants for SDP processing."""

from __future__ import annotations

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Get logger for the package
logger = logging.getLogger("sdpx")

EOL = "\n"
CRLF = "\r\n"

# Network type used by every origin and connection line (RFC 4566 Section 8.2.6)
NETTYPE = "IN"

# Signed integer bounds for the numeric grammar rules
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure logging with a RichHandler.

    The library never installs handlers on import; applications (and the
    bundled CLI) call this once at startup.

    Args:
        level: Root log level
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )
