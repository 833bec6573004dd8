"""Terminal dimension probe backed by the rich console."""

from __future__ import annotations

import logging

from rich.console import Console

from dash_core.models import TerminalDimensions

logger = logging.getLogger(__name__)

FALLBACK_WIDTH = 80
FALLBACK_HEIGHT = 24


def probe_dimensions(console: Console) -> TerminalDimensions:
    """Read the console size, falling back to 80x24 off a terminal.

    Errors raised by the console itself are not caught.
    """
    if not console.is_terminal:
        logger.debug("console is not a terminal, using %dx%d fallback", FALLBACK_WIDTH, FALLBACK_HEIGHT)
        return TerminalDimensions(FALLBACK_WIDTH, FALLBACK_HEIGHT, is_available=False)

    size = console.size
    if size.width <= 0 or size.height <= 0:
        logger.debug("console reported %dx%d, using fallback", size.width, size.height)
        return TerminalDimensions(FALLBACK_WIDTH, FALLBACK_HEIGHT, is_available=False)
    return TerminalDimensions(size.width, size.height, is_available=True)
