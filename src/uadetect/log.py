# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for uadetect."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
# Non-fatal detection diagnostics are logged here at DEBUG.
DIAGNOSTICS_LOGGER = "uadetect.utils.diagnostics"


def _default_level() -> str:
    return os.getenv("UADETECT_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None, *, diagnostics: bool | None = None) -> None:
    """
    Configure standard logging for CLI/library use.

    `diagnostics=True` surfaces detection diagnostics (unrecognized strings, high-detail
    timeouts) without lowering every other logger to DEBUG. It defaults to the
    `UADETECT_LOG_DIAGNOSTICS` environment flag.
    """
    effective_level = (level or _default_level()).upper()
    logging.basicConfig(level=getattr(logging, effective_level, logging.WARNING), format=LOG_FORMAT)

    if diagnostics is None:
        diagnostics = os.getenv("UADETECT_LOG_DIAGNOSTICS", "").strip().lower() in {"1", "true", "yes", "on"}
    if diagnostics:
        logging.getLogger(DIAGNOSTICS_LOGGER).setLevel(logging.DEBUG)


__all__ = ["DIAGNOSTICS_LOGGER", "setup_logging"]
