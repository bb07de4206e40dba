# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Log level resolution and logging setup for the Shadow launcher."""

import logging
import sys
from enum import IntEnum
from typing import Optional, TextIO

MESSAGE = 25
logging.addLevelName(MESSAGE, "MESSAGE")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Severity(IntEnum):
    """Log severity ordered by verbosity: ERROR is the quietest, DEBUG the loudest."""

    ERROR = 0
    CRITICAL = 1
    WARNING = 2
    MESSAGE = 3
    INFO = 4
    DEBUG = 5

    @property
    def logging_level(self) -> int:
        """The stdlib ``logging`` threshold that shows this severity and everything quieter."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    Severity.ERROR: logging.CRITICAL,
    Severity.CRITICAL: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.MESSAGE: MESSAGE,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}


class ShadowLogHandler(logging.StreamHandler):
    """Stream handler installed by configure_shadow_logging."""


DEFAULT_LOG_LEVEL = "message"
DEFAULT_SEVERITY = Severity.MESSAGE

LOG_LEVEL_NAMES = tuple(severity.name.lower() for severity in Severity)


def resolve_log_level(tag: Optional[str]) -> Severity:
    """
    Map a user-supplied level name onto a Severity.

    Matching ignores case and surrounding whitespace. Unknown or missing names
    resolve to DEFAULT_SEVERITY rather than failing, so a bad --log-level never
    prevents startup.

    Examples:
        >>> resolve_log_level("Warning")
        <Severity.WARNING: 2>
        >>> resolve_log_level("bogus")
        <Severity.MESSAGE: 3>
    """
    if not tag:
        return DEFAULT_SEVERITY
    try:
        return Severity[tag.strip().upper()]
    except KeyError:
        return DEFAULT_SEVERITY


def configure_shadow_logging(
    severity: Severity = DEFAULT_SEVERITY, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Point the ``shadow`` logger at a single stream handler at the given severity.

    Calling this again replaces the previous handler instead of adding another.
    """
    logger = logging.getLogger("shadow")
    for handler in list(logger.handlers):
        if isinstance(handler, ShadowLogHandler):
            logger.removeHandler(handler)

    handler = ShadowLogHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(severity.logging_level)
    logger.propagate = False
    return logger
