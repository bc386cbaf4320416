# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Identification-string extractor: browser, rendering engine and device."""

from __future__ import annotations

from typing import Any

from ..errors import ErrorCategory
from ..models import (
    UNKNOWN_VERSION,
    BrowserInfo,
    BrowserName,
    ClientEnvironment,
    DetectionMethod,
    DetectionResult,
    DeviceInfo,
    RenderingEngine,
    RenderingEngineInfo,
)
from ..utils.diagnostics import emit_diagnostic
from .base import Extractor, PatternRule, never_raises
from .constants import BROWSER_RULES, CHROME_VERSION_PATTERN, ENGINE_FAMILIES, ENGINE_VERSION_PATTERNS
from .device import classify_device_type, detect_device_from_ua, is_android_tablet, is_ipad
from .keys import EVT_INVALID_USER_AGENT, EVT_NO_ENGINE_FAMILY, EVT_UNRECOGNIZED_BROWSER


def match_browser_rule(user_agent: str, rules: tuple[PatternRule, ...] = BROWSER_RULES) -> PatternRule | None:
    """Return the first catalog rule that matches and is not excluded."""
    for rule in rules:
        if rule.matches(user_agent):
            return rule
    return None


@never_raises(fallback=None)
def detect_browser(user_agent: Any, *, is_brave: bool = False) -> BrowserInfo | None:
    """
    Detect the browser from an identification string.

    `is_brave` carries the vendor capability signal; Brave ships an unmodified Chrome
    string, so the signal short-circuits the catalog.
    """
    if not user_agent or not isinstance(user_agent, str):
        emit_diagnostic(
            EVT_INVALID_USER_AGENT,
            "Invalid or empty identification string",
            category=ErrorCategory.INVALID_INPUT,
            value_type=type(user_agent).__name__,
        )
        return None

    if is_brave:
        match = CHROME_VERSION_PATTERN.search(user_agent)
        return BrowserInfo(name=BrowserName.BRAVE, version=match.group(1) if match else UNKNOWN_VERSION)

    rule = match_browser_rule(user_agent)
    if rule is None:
        emit_diagnostic(
            EVT_UNRECOGNIZED_BROWSER,
            "Unrecognized identification string",
            category=ErrorCategory.UNRECOGNIZED_INPUT,
            user_agent=user_agent,
        )
        return None
    return BrowserInfo(name=rule.name, version=rule.extract_version(user_agent))


def engine_family(browser: BrowserName | str | None) -> RenderingEngine | None:
    """Engine family for a browser name; None means no opinion (distinct from Unknown)."""
    try:
        name = BrowserName(browser)
    except ValueError:
        return None
    for engine, members in ENGINE_FAMILIES.items():
        if name in members:
            return engine
    return None


@never_raises(fallback=None)
def detect_rendering_engine(
    browser: BrowserName | str | None,
    user_agent: Any = None,
) -> RenderingEngineInfo | None:
    """Map a browser onto its engine family, reading the engine version from `user_agent`."""
    if not browser:
        return None

    engine = engine_family(browser)
    if engine is None:
        emit_diagnostic(
            EVT_NO_ENGINE_FAMILY,
            "Unable to determine rendering engine for browser",
            category=ErrorCategory.UNRECOGNIZED_INPUT,
            browser=str(getattr(browser, "value", browser)),
        )
        return None

    version = UNKNOWN_VERSION
    if isinstance(user_agent, str) and user_agent:
        for pattern in ENGINE_VERSION_PATTERNS[engine]:
            match = pattern.search(user_agent)
            if match:
                version = match.group(1)
                break
    return RenderingEngineInfo(name=engine, version=version)


@never_raises(fallback=None)
def detect_device(user_agent: Any, max_touch_points: Any = None) -> DeviceInfo | None:
    return detect_device_from_ua(user_agent, max_touch_points)


@never_raises(fallback=DetectionResult(detection_method=DetectionMethod.STRING_PARSING))
def detect_from_user_agent(
    user_agent: Any,
    *,
    max_touch_points: Any = None,
    is_brave: bool = False,
) -> DetectionResult:
    """Run all identification-string extractors and assemble a result."""
    browser = detect_browser(user_agent, is_brave=is_brave)
    device = detect_device(user_agent, max_touch_points)
    rendering_engine = detect_rendering_engine(browser.name if browser else None, user_agent)
    return DetectionResult(
        device=device,
        browser=browser,
        rendering_engine=rendering_engine,
        detection_method=DetectionMethod.STRING_PARSING,
        device_type=classify_device_type(device.is_mobile, device.device) if device else None,
    )


class UserAgentStringExtractor(Extractor):
    name = "string-parsing"
    priority = 100

    def is_available(self, environment: ClientEnvironment) -> bool:
        return True

    def detect(self, environment: ClientEnvironment) -> DetectionResult:
        return detect_from_user_agent(
            environment.user_agent,
            max_touch_points=environment.max_touch_points,
            is_brave=environment.is_brave,
        )


__all__ = [
    "UserAgentStringExtractor",
    "detect_browser",
    "detect_device",
    "detect_from_user_agent",
    "detect_rendering_engine",
    "engine_family",
    "is_android_tablet",
    "is_ipad",
    "match_browser_rule",
]
