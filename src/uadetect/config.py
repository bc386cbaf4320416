# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for uadetect."""

import os
from dataclasses import dataclass, field

from .models.enums import DEFAULT_HIGH_DETAIL_HINTS, HighDetailHint, coerce_hint

DEFAULT_HIGH_DETAIL_TIMEOUT = 5.0


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _hints_env(name: str, default: tuple[HighDetailHint, ...]) -> tuple[HighDetailHint, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    hints: list[HighDetailHint] = []
    for raw in value.split(","):
        hint = coerce_hint(raw.strip())
        if hint is not None and hint not in hints:
            hints.append(hint)
    return tuple(hints) or default


@dataclass
class DetectionSettings:
    """Detection defaults."""

    high_detail_timeout: float = DEFAULT_HIGH_DETAIL_TIMEOUT
    default_hints: tuple[HighDetailHint, ...] = field(default=DEFAULT_HIGH_DETAIL_HINTS)
    high_detail: bool = False

    @classmethod
    def from_env(cls) -> "DetectionSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("UADETECT_HIGH_DETAIL_TIMEOUT", DEFAULT_HIGH_DETAIL_TIMEOUT)
        if timeout <= 0:
            timeout = DEFAULT_HIGH_DETAIL_TIMEOUT
        return cls(
            high_detail_timeout=timeout,
            default_hints=_hints_env("UADETECT_DEFAULT_HINTS", DEFAULT_HIGH_DETAIL_HINTS),
            high_detail=_bool_env("UADETECT_HIGH_DETAIL", False),
        )


def load_detection_settings() -> DetectionSettings:
    """Load detection settings from environment with sensible defaults."""
    return DetectionSettings.from_env()
