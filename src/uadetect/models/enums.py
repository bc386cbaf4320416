# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Closed vocabularies used across detection results."""

from __future__ import annotations

from enum import Enum


class BrowserName(str, Enum):
    CHROME = "Chrome"
    CHROMIUM = "Chromium"
    EDGE = "Edge"
    FIREFOX = "Firefox"
    SAFARI = "Safari"
    OPERA = "Opera"
    BRAVE = "Brave"
    SAMSUNG_INTERNET = "Samsung Internet"
    VIVALDI = "Vivaldi"
    ARC = "Arc"
    SEAMONKEY = "Seamonkey"
    OPERA_15_PLUS = "Opera15+"
    OPERA_12_MINUS = "Opera12-"
    UNKNOWN = "Unknown"


class Platform(str, Enum):
    ANDROID = "Android"
    IOS = "iOS"
    WINDOWS = "Windows"
    LINUX = "Linux"
    MAC_OS = "Mac OS"
    CHROME_OS = "Chrome OS"
    UNKNOWN = "Unknown"


class Device(str, Enum):
    ANDROID = "Android"
    IPHONE = "iPhone"
    IPAD = "iPad"
    IPOD = "iPod"
    DESKTOP_PC = "Desktop PC"
    TABLET = "Tablet"
    UNKNOWN = "Unknown"


class RenderingEngine(str, Enum):
    BLINK = "Blink"
    GECKO = "Gecko"
    WEBKIT = "WebKit"
    UNKNOWN = "Unknown"


class DetectionMethod(str, Enum):
    STRUCTURED_HINTS = "structured-hints"
    STRING_PARSING = "string-parsing"
    NO_ENVIRONMENT = "no-environment"


class DeviceType(str, Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


class HighDetailHint(str, Enum):
    ARCHITECTURE = "architecture"
    MODEL = "model"
    PLATFORM = "platform"
    PLATFORM_VERSION = "platformVersion"
    FULL_VERSION = "fullVersion"


DEFAULT_HIGH_DETAIL_HINTS: tuple[HighDetailHint, ...] = (
    HighDetailHint.ARCHITECTURE,
    HighDetailHint.MODEL,
    HighDetailHint.PLATFORM_VERSION,
    HighDetailHint.FULL_VERSION,
)

# Runtime spellings that predate the current hint names.
_HINT_ALIASES = {
    "uaFullVersion": HighDetailHint.FULL_VERSION,
    "platform_version": HighDetailHint.PLATFORM_VERSION,
    "full_version": HighDetailHint.FULL_VERSION,
}


def coerce_hint(value: object) -> HighDetailHint | None:
    """Return the HighDetailHint for `value`, or None when it names no known hint."""
    if isinstance(value, HighDetailHint):
        return value
    if not isinstance(value, str):
        return None
    if value in _HINT_ALIASES:
        return _HINT_ALIASES[value]
    try:
        return HighDetailHint(value)
    except ValueError:
        return None


__all__ = [
    "BrowserName",
    "DEFAULT_HIGH_DETAIL_HINTS",
    "DetectionMethod",
    "Device",
    "DeviceType",
    "HighDetailHint",
    "Platform",
    "RenderingEngine",
    "coerce_hint",
]
