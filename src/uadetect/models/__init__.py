# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for uadetect."""

from .agent import UNKNOWN_VERSION, BrowserInfo, DetectionResult, DeviceInfo, RenderingEngineInfo
from .enums import (
    DEFAULT_HIGH_DETAIL_HINTS,
    BrowserName,
    DetectionMethod,
    Device,
    DeviceType,
    HighDetailHint,
    Platform,
    RenderingEngine,
    coerce_hint,
)
from .environment import ClientEnvironment, EnvironmentAccessor
from .hints import Brand, HighDetailValues, StructuredHints, UseOptions

__all__ = [
    "DEFAULT_HIGH_DETAIL_HINTS",
    "UNKNOWN_VERSION",
    "Brand",
    "BrowserInfo",
    "BrowserName",
    "ClientEnvironment",
    "DetectionMethod",
    "DetectionResult",
    "Device",
    "DeviceInfo",
    "DeviceType",
    "EnvironmentAccessor",
    "HighDetailHint",
    "HighDetailValues",
    "Platform",
    "RenderingEngine",
    "RenderingEngineInfo",
    "StructuredHints",
    "UseOptions",
    "coerce_hint",
]
