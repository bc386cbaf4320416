# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structural equality over detection results."""

from __future__ import annotations

from ..models import BrowserInfo, DetectionResult, DeviceInfo, RenderingEngineInfo

_DEVICE_FIELDS = ("is_mobile", "platform", "device", "architecture", "model", "platform_version")
_BROWSER_FIELDS = ("name", "version", "full_version")
_ENGINE_FIELDS = ("name", "version")


def _fields_equal(a: object | None, b: object | None, fields: tuple[str, ...]) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    return all(getattr(a, name, None) == getattr(b, name, None) for name in fields)


def device_info_equal(a: DeviceInfo | None, b: DeviceInfo | None) -> bool:
    return _fields_equal(a, b, _DEVICE_FIELDS)


def browser_info_equal(a: BrowserInfo | None, b: BrowserInfo | None) -> bool:
    return _fields_equal(a, b, _BROWSER_FIELDS)


def rendering_engine_info_equal(a: RenderingEngineInfo | None, b: RenderingEngineInfo | None) -> bool:
    return _fields_equal(a, b, _ENGINE_FIELDS)


def results_equal(a: DetectionResult | None, b: DetectionResult | None) -> bool:
    """
    Return True when two results describe the same detection.

    Absent on both sides compares equal; absent on one side only does not. Every declared
    field is compared, including the optional high-detail ones.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if a.detection_method != b.detection_method:
        return False
    if a.device_type != b.device_type:
        return False
    return (
        device_info_equal(a.device, b.device)
        and browser_info_equal(a.browser, b.browser)
        and rendering_engine_info_equal(a.rendering_engine, b.rendering_engine)
    )


__all__ = [
    "browser_info_equal",
    "device_info_equal",
    "rendering_engine_info_equal",
    "results_equal",
]
