# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device and platform classification shared by both extraction paths."""

from __future__ import annotations

from typing import Any

from ..errors import ErrorCategory
from ..models import Device, DeviceInfo, DeviceType, Platform, StructuredHints
from ..utils.diagnostics import emit_diagnostic
from .base import never_raises
from .constants import (
    ANDROID_TOKEN,
    CHROME_OS_TOKEN,
    DESKTOP_MAX_TOUCH_POINTS,
    IPAD_TOKEN,
    IPHONE_TOKEN,
    IPOD_TOKEN,
    LINUX_TOKEN,
    MAC_TOKEN,
    MACINTOSH_TOKEN,
    MOBILE_TOKEN,
    PLATFORM_MARKERS,
    WINDOWS_TOKEN,
)
from .keys import EVT_INVALID_USER_AGENT, EVT_UNRECOGNIZED_PLATFORM

UNKNOWN_DEVICE = DeviceInfo(is_mobile=False, platform=Platform.UNKNOWN, device=Device.UNKNOWN)
TABLET_DEVICES = frozenset({Device.TABLET, Device.IPAD})


def classify_device_type(is_mobile: bool, device: Device | str | None) -> DeviceType:
    """Coarse device label. Tablet-shaped devices win over the mobile flag."""
    if _as_device(device) in TABLET_DEVICES:
        return DeviceType.TABLET
    if is_mobile:
        return DeviceType.MOBILE
    return DeviceType.DESKTOP


def _as_device(value: Any) -> Device | None:
    try:
        return Device(value)
    except ValueError:
        return None


def has_multi_touch(max_touch_points: Any) -> bool:
    """True when the client reports more simultaneous touch points than a desktop does."""
    if isinstance(max_touch_points, bool) or not isinstance(max_touch_points, (int, float)):
        return False
    return max_touch_points > DESKTOP_MAX_TOUCH_POINTS


def map_platform(platform: Any) -> Platform:
    """Map a structured platform string onto Platform by case-insensitive containment."""
    if not isinstance(platform, str):
        return Platform.UNKNOWN
    lowered = platform.lower()
    for markers, mapped in PLATFORM_MARKERS:
        if any(marker in lowered for marker in markers):
            return mapped
    return Platform.UNKNOWN


def determine_device(is_mobile: bool, platform: Platform) -> Device:
    if platform == Platform.ANDROID:
        return Device.ANDROID if is_mobile else Device.TABLET
    if platform == Platform.IOS:
        return Device.IPHONE if is_mobile else Device.IPAD
    if is_mobile:
        # Mobile, but neither Android nor iOS.
        return Device.UNKNOWN
    return Device.DESKTOP_PC


def _desktop_or_unknown(platform: Platform, user_agent: str) -> DeviceInfo:
    is_mobile = bool(MOBILE_TOKEN.search(user_agent))
    return DeviceInfo(
        is_mobile=is_mobile,
        platform=platform,
        device=Device.UNKNOWN if is_mobile else Device.DESKTOP_PC,
    )


@never_raises(fallback=None)
def detect_device_from_ua(user_agent: Any, max_touch_points: Any = None) -> DeviceInfo | None:
    """
    Classify platform and device from an identification string.

    Returns None only for empty or non-string input; an unrecognized platform yields the
    all-Unknown classification instead.
    """
    if not user_agent or not isinstance(user_agent, str):
        emit_diagnostic(
            EVT_INVALID_USER_AGENT,
            "Invalid or empty identification string in device detection",
            category=ErrorCategory.INVALID_INPUT,
            value_type=type(user_agent).__name__,
        )
        return None

    if ANDROID_TOKEN.search(user_agent):
        # Android tablets omit the Mobile token.
        is_mobile = bool(MOBILE_TOKEN.search(user_agent))
        return DeviceInfo(
            is_mobile=is_mobile,
            platform=Platform.ANDROID,
            device=Device.ANDROID if is_mobile else Device.TABLET,
        )
    if IPHONE_TOKEN.search(user_agent):
        return DeviceInfo(is_mobile=True, platform=Platform.IOS, device=Device.IPHONE)
    if IPAD_TOKEN.search(user_agent):
        return DeviceInfo(is_mobile=False, platform=Platform.IOS, device=Device.IPAD)
    if IPOD_TOKEN.search(user_agent):
        return DeviceInfo(is_mobile=True, platform=Platform.IOS, device=Device.IPOD)
    if WINDOWS_TOKEN.search(user_agent):
        return _desktop_or_unknown(Platform.WINDOWS, user_agent)
    if MAC_TOKEN.search(user_agent):
        if has_multi_touch(max_touch_points):
            # iPadOS presents a desktop Mac string but exposes multi-touch.
            return DeviceInfo(is_mobile=False, platform=Platform.IOS, device=Device.IPAD)
        return DeviceInfo(is_mobile=False, platform=Platform.MAC_OS, device=Device.DESKTOP_PC)
    if CHROME_OS_TOKEN.search(user_agent):
        return DeviceInfo(is_mobile=False, platform=Platform.CHROME_OS, device=Device.DESKTOP_PC)
    if LINUX_TOKEN.search(user_agent):
        return _desktop_or_unknown(Platform.LINUX, user_agent)

    emit_diagnostic(
        EVT_UNRECOGNIZED_PLATFORM,
        "Unrecognized platform in identification string",
        category=ErrorCategory.UNRECOGNIZED_INPUT,
        user_agent=user_agent,
    )
    return UNKNOWN_DEVICE


@never_raises(fallback=UNKNOWN_DEVICE)
def detect_device_from_hints(hints: StructuredHints | Any) -> DeviceInfo:
    """Classify platform and device from low-detail structured hints. Never fails."""
    platform = map_platform(hints.platform)
    is_mobile = hints.mobile
    if not isinstance(is_mobile, bool):
        raise TypeError(f"mobile flag must be a bool, got {type(is_mobile).__name__}")
    return DeviceInfo(
        is_mobile=is_mobile,
        platform=platform,
        device=determine_device(is_mobile, platform),
    )


@never_raises(fallback=False)
def is_ipad(user_agent: Any, max_touch_points: Any = None) -> bool:
    if not isinstance(user_agent, str):
        return False
    if IPAD_TOKEN.search(user_agent):
        return True
    return bool(MACINTOSH_TOKEN.search(user_agent)) and has_multi_touch(max_touch_points)


@never_raises(fallback=False)
def is_android_tablet(user_agent: Any) -> bool:
    if not isinstance(user_agent, str) or not ANDROID_TOKEN.search(user_agent):
        return False
    return not MOBILE_TOKEN.search(user_agent)


__all__ = [
    "UNKNOWN_DEVICE",
    "classify_device_type",
    "detect_device_from_hints",
    "detect_device_from_ua",
    "determine_device",
    "has_multi_touch",
    "is_android_tablet",
    "is_ipad",
    "map_platform",
]
