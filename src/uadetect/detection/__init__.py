# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection engine exports."""

from .client_hints import (
    detect_from_structured_hints,
    detect_low_detail,
    detect_with_high_detail,
    extract_browser_from_brands,
)
from .device import (
    classify_device_type,
    detect_device_from_hints,
    detect_device_from_ua,
    is_android_tablet,
    is_ipad,
)
from .engine import DetectionEngine
from .registry import EXTRACTORS
from .string_parser import detect_browser, detect_device, detect_from_user_agent, detect_rendering_engine

__all__ = [
    "DetectionEngine",
    "EXTRACTORS",
    "classify_device_type",
    "detect_browser",
    "detect_device",
    "detect_device_from_hints",
    "detect_device_from_ua",
    "detect_from_structured_hints",
    "detect_from_user_agent",
    "detect_low_detail",
    "detect_rendering_engine",
    "detect_with_high_detail",
    "extract_browser_from_brands",
    "is_android_tablet",
    "is_ipad",
]
