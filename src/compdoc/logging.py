# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logger hierarchy and console configuration for compdoc."""

from __future__ import annotations

import logging

# ###############
# Public Interface
# ###############

LOGGER_NAME = "compdoc"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the compdoc hierarchy."""
    full_name = f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Route compdoc warnings (and debug output when *verbose*) to stderr.

    Calling this repeatedly replaces the previously installed handler so a
    CLI invoked several times in one process does not duplicate output.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_compdoc_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[compdoc] %(levelname)s %(message)s"))
    handler._compdoc_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
