# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from dataclasses import replace

import pytest

from uadetect.detection.string_parser import detect_from_user_agent
from uadetect.models import (
    BrowserInfo,
    BrowserName,
    DetectionMethod,
    DetectionResult,
    Device,
    DeviceInfo,
    DeviceType,
    Platform,
    RenderingEngine,
    RenderingEngineInfo,
)
from uadetect.utils.comparison import (
    browser_info_equal,
    device_info_equal,
    rendering_engine_info_equal,
    results_equal,
)

import ua_samples as ua


def _result(**overrides):
    base = DetectionResult(
        device=DeviceInfo(is_mobile=False, platform=Platform.WINDOWS, device=Device.DESKTOP_PC),
        browser=BrowserInfo(name=BrowserName.CHROME, version="120"),
        rendering_engine=RenderingEngineInfo(name=RenderingEngine.BLINK, version="120"),
        detection_method=DetectionMethod.STRUCTURED_HINTS,
        device_type=DeviceType.DESKTOP,
    )
    return replace(base, **overrides)


def test_independently_built_results_are_equal():
    first = _result()
    second = _result()
    assert first is not second
    assert results_equal(first, second)
    assert results_equal(second, first)
    assert results_equal(first, first)


def test_detections_of_same_string_are_equal():
    assert results_equal(detect_from_user_agent(ua.SAFARI_IPHONE), detect_from_user_agent(ua.SAFARI_IPHONE))


@pytest.mark.parametrize(
    "overrides",
    [
        {"detection_method": DetectionMethod.STRING_PARSING},
        {"device_type": DeviceType.MOBILE},
        {"device": None},
        {"browser": None},
        {"rendering_engine": None},
        {"browser": BrowserInfo(name=BrowserName.EDGE, version="120")},
        {"browser": BrowserInfo(name=BrowserName.CHROME, version="121")},
        {"browser": BrowserInfo(name=BrowserName.CHROME, version="120", full_version="120.0.1")},
        {"rendering_engine": RenderingEngineInfo(name=RenderingEngine.BLINK, version="121")},
        {"rendering_engine": RenderingEngineInfo(name=RenderingEngine.WEBKIT, version="120")},
        {"device": DeviceInfo(is_mobile=True, platform=Platform.WINDOWS, device=Device.DESKTOP_PC)},
        {"device": DeviceInfo(is_mobile=False, platform=Platform.LINUX, device=Device.DESKTOP_PC)},
        {"device": DeviceInfo(is_mobile=False, platform=Platform.WINDOWS, device=Device.UNKNOWN)},
        {"device": DeviceInfo(is_mobile=False, platform=Platform.WINDOWS, device=Device.DESKTOP_PC, architecture="x86")},
        {"device": DeviceInfo(is_mobile=False, platform=Platform.WINDOWS, device=Device.DESKTOP_PC, model="Surface")},
        {"device": DeviceInfo(is_mobile=False, platform=Platform.WINDOWS, device=Device.DESKTOP_PC, platform_version="15")},
    ],
)
def test_any_changed_field_breaks_equality(overrides):
    changed = _result(**overrides)
    assert not results_equal(_result(), changed)
    assert not results_equal(changed, _result())


def test_absent_results():
    assert results_equal(None, None)
    assert not results_equal(None, _result())
    assert not results_equal(_result(), None)
    assert results_equal(DetectionResult(), DetectionResult())


def test_component_comparisons():
    assert device_info_equal(None, None)
    assert not device_info_equal(None, _result().device)
    assert browser_info_equal(BrowserInfo(BrowserName.SAFARI, "17.2"), BrowserInfo(BrowserName.SAFARI, "17.2"))
    assert not browser_info_equal(BrowserInfo(BrowserName.SAFARI, "17.2"), None)
    assert rendering_engine_info_equal(
        RenderingEngineInfo(RenderingEngine.GECKO, "121.0"), RenderingEngineInfo(RenderingEngine.GECKO, "121.0")
    )
