# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Per-detection ambient context.

This module provides a ContextVar-backed DetectionContext that carries common detection
plumbing (settings, diagnostic observer). Helpers read from this context when explicit
arguments are omitted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from ..config import DetectionSettings, load_detection_settings

if TYPE_CHECKING:
    from .diagnostics import DiagnosticEvent

DiagnosticObserver = Callable[["DiagnosticEvent"], Any]


@dataclass(frozen=True)
class DetectionContext:
    settings: DetectionSettings | None = None
    observer: DiagnosticObserver | None = None


_current_detection_context: ContextVar[DetectionContext | None] = ContextVar("uadetect_detection_context", default=None)


def get_detection_context() -> DetectionContext:
    """Return the current ambient detection context."""
    return _current_detection_context.get() or DetectionContext()


def get_detection_settings() -> DetectionSettings:
    """Return DetectionSettings from context, falling back to loading defaults."""
    context = get_detection_context()
    if context.settings is not None:
        return context.settings
    return load_detection_settings()


@contextmanager
def detection_context(**overrides: Any) -> Iterator[DetectionContext]:
    """
    Context manager that layers overrides onto the ambient DetectionContext.

    None-valued overrides are ignored to preserve outer context values.
    """
    current = get_detection_context()
    filtered = {key: value for key, value in overrides.items() if value is not None}
    new_context = replace(current, **filtered) if filtered else current
    token = _current_detection_context.set(new_context)
    try:
        yield new_context
    finally:
        _current_detection_context.reset(token)


__all__ = [
    "DetectionContext",
    "DiagnosticObserver",
    "detection_context",
    "get_detection_context",
    "get_detection_settings",
]
