# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structured diagnostic events for non-fatal detection problems."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory
from .context import DiagnosticObserver, get_detection_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosticEvent:
    code: str
    message: str
    category: ErrorCategory = ErrorCategory.NONE
    detail: dict[str, Any] = field(default_factory=dict)


def emit_diagnostic(
    code: str,
    message: str,
    *,
    category: ErrorCategory = ErrorCategory.NONE,
    observer: DiagnosticObserver | None = None,
    **detail: Any,
) -> DiagnosticEvent:
    """
    Log a diagnostic event and forward it to the observer.

    The explicit `observer` wins over the ambient one. Observer failures are logged and
    dropped so reporting can never turn a total extractor into a raising one.
    """
    event = DiagnosticEvent(code=code, message=message, category=category, detail=dict(detail))
    logger.debug("%s: %s %s", code, message, detail or "")
    target = observer or get_detection_context().observer
    if target is None:
        return event
    try:
        target(event)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Diagnostic observer failed for %s: %s", code, exc)
    return event


class DiagnosticCollector:
    """Observer that keeps every event it receives; handy for tests and debugging."""

    def __init__(self):
        self.events: list[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    @property
    def codes(self) -> list[str]:
        return [event.code for event in self.events]

    def clear(self) -> None:
        self.events.clear()


__all__ = ["DiagnosticCollector", "DiagnosticEvent", "emit_diagnostic"]
