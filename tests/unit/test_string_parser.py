# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import random
import string

import pytest

from uadetect.detection.constants import BLINK_BROWSERS, BROWSER_RULES, ENGINE_FAMILIES, GECKO_BROWSERS, WEBKIT_BROWSERS
from uadetect.detection.string_parser import (
    detect_browser,
    detect_device,
    detect_from_user_agent,
    detect_rendering_engine,
    engine_family,
    match_browser_rule,
)
from uadetect.models import BrowserName, DetectionMethod, DeviceType, RenderingEngine

import ua_samples as ua


@pytest.mark.parametrize(
    ("user_agent", "name", "version"),
    [
        (ua.CHROME_WINDOWS, "Chrome", "120.0.0.0"),
        (ua.EDGE_WINDOWS, "Edge", "120.0.2210.91"),
        (ua.SAMSUNG_ANDROID, "Samsung Internet", "23.0"),
        (ua.VIVALDI_WINDOWS, "Vivaldi", "6.5.3206.48"),
        (ua.OPERA_WINDOWS, "Opera15+", "106.0.0.0"),
        (ua.CHROMIUM_LINUX, "Chromium", "119.0.6045.159"),
        (ua.FIREFOX_WINDOWS, "Firefox", "121.0"),
        (ua.SEAMONKEY_WINDOWS, "Seamonkey", "2.53.18"),
        (ua.SAFARI_MAC, "Safari", "17.2"),
        (ua.SAFARI_IPHONE, "Safari", "17.2"),
        (ua.OPERA_PRESTO, "Opera12-", "9.80"),
    ],
)
def test_detect_browser_catalog(user_agent, name, version):
    browser = detect_browser(user_agent)
    assert browser is not None
    assert browser.name == name
    assert browser.version == version
    assert browser.full_version is None


def test_edge_token_beats_chrome_token():
    user_agent = "Mozilla/5.0 Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
    browser = detect_browser(user_agent)
    assert browser.name == BrowserName.EDGE
    assert browser.version == "120.0.0.0"


@pytest.mark.parametrize("token", ["Edg/99.1", "SamsungBrowser/99.1", "Vivaldi/99.1", "OPR/99.1"])
def test_chromium_derivatives_never_report_chrome(token):
    for chrome_version in ("1.0", "120.0.0.0", "999"):
        user_agent = f"Mozilla/5.0 (X11) Chrome/{chrome_version} Safari/537.36 {token}"
        browser = detect_browser(user_agent)
        assert browser is not None
        assert browser.name != BrowserName.CHROME
        assert browser.version == "99.1"


def test_seamonkey_excluded_from_firefox_in_either_spelling():
    assert detect_browser("Gecko/20100101 Firefox/115.0 Seamonkey/2.53").name == BrowserName.SEAMONKEY
    assert detect_browser("Gecko/20100101 Firefox/115.0 SeaMonkey/2.53").name == BrowserName.SEAMONKEY


def test_missing_version_token_reports_unknown():
    # Safari entry reads its version from `Version/`, which this string lacks.
    browser = detect_browser("Mozilla/5.0 AppleWebKit/605.1.15 Safari/605.1.15")
    assert browser.name == BrowserName.SAFARI
    assert browser.version == "Unknown"


def test_brave_signal_short_circuits_catalog():
    browser = detect_browser(ua.CHROME_WINDOWS, is_brave=True)
    assert browser.name == BrowserName.BRAVE
    assert browser.version == "120.0.0.0"
    assert detect_browser("Mozilla/5.0 (X11)", is_brave=True).version == "Unknown"


def test_unrecognized_browser_is_absent():
    assert detect_browser("curl/8.4.0") is None


def test_catalog_order_puts_chrome_after_derivatives():
    names = [rule.name for rule in BROWSER_RULES]
    chrome_index = names.index(BrowserName.CHROME)
    for derivative in (
        BrowserName.EDGE,
        BrowserName.SAMSUNG_INTERNET,
        BrowserName.VIVALDI,
        BrowserName.OPERA_15_PLUS,
    ):
        assert names.index(derivative) < chrome_index
    assert names.index(BrowserName.FIREFOX) < names.index(BrowserName.SEAMONKEY)


def test_match_browser_rule_skips_excluded_entries():
    rule = match_browser_rule(ua.EDGE_WINDOWS)
    assert rule.name == BrowserName.EDGE
    chrome_rule = next(r for r in BROWSER_RULES if r.name == BrowserName.CHROME)
    assert chrome_rule.is_excluded(ua.EDGE_WINDOWS)
    assert not chrome_rule.matches(ua.EDGE_WINDOWS)
    assert chrome_rule.matches(ua.CHROME_WINDOWS)


def test_engine_families_partition_catalog():
    families = list(ENGINE_FAMILIES.values())
    for i, left in enumerate(families):
        for right in families[i + 1 :]:
            assert not (left & right)
    members = BLINK_BROWSERS | GECKO_BROWSERS | WEBKIT_BROWSERS
    catalog_names = {rule.name for rule in BROWSER_RULES} | {BrowserName.BRAVE}
    # Legacy Presto Opera is intentionally outside every family.
    assert catalog_names - members == {BrowserName.OPERA_12_MINUS}


@pytest.mark.parametrize("browser", sorted(BLINK_BROWSERS, key=lambda b: b.value))
def test_blink_family(browser):
    engine = detect_rendering_engine(browser, ua.CHROME_WINDOWS)
    assert engine.name == RenderingEngine.BLINK
    assert engine.version == "120.0.0.0"


@pytest.mark.parametrize("browser", ["Firefox", "Seamonkey"])
def test_gecko_family_reads_rv_token(browser):
    engine = detect_rendering_engine(browser, ua.FIREFOX_WINDOWS)
    assert engine.name == RenderingEngine.GECKO
    assert engine.version == "121.0"


def test_webkit_family_reads_webkit_token():
    engine = detect_rendering_engine(BrowserName.SAFARI, ua.SAFARI_MAC)
    assert engine.name == RenderingEngine.WEBKIT
    assert engine.version == "605.1.15"


def test_blink_falls_back_to_chromium_token():
    engine = detect_rendering_engine(BrowserName.CHROMIUM, ua.CHROMIUM_LINUX)
    assert engine.version == "119.0.6045.159"


def test_engine_without_string_has_unknown_version():
    engine = detect_rendering_engine(BrowserName.FIREFOX)
    assert engine.name == RenderingEngine.GECKO
    assert engine.version == "Unknown"


@pytest.mark.parametrize("browser", [None, "", "Opera12-", "Unknown", "Arc", "Opera", "NotABrowser"])
def test_engine_has_no_opinion_outside_families(browser):
    assert detect_rendering_engine(browser, ua.OPERA_PRESTO) is None
    if browser:
        assert engine_family(browser) is None


def test_detect_from_user_agent_assembles_result():
    result = detect_from_user_agent(ua.EDGE_WINDOWS)
    assert result.detection_method == DetectionMethod.STRING_PARSING
    assert result.browser.name == BrowserName.EDGE
    assert result.rendering_engine.name == RenderingEngine.BLINK
    assert result.device.platform == "Windows"
    assert result.device_type == DeviceType.DESKTOP


def test_detect_from_user_agent_with_invalid_input_keeps_method():
    result = detect_from_user_agent(None)
    assert result.detection_method == DetectionMethod.STRING_PARSING
    assert result.browser is None
    assert result.device is None
    assert result.rendering_engine is None
    assert result.device_type is None


class _Unstringable:
    def __str__(self):
        raise RuntimeError("boom")


def _random_strings(count: int, length: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    alphabet = string.printable + "éü中文/;()"
    return ["".join(rng.choice(alphabet) for _ in range(length)) for _ in range(count)]


@pytest.mark.parametrize(
    "value",
    ["", "   ", "\n\t", None, 0, 123, 4.5, b"Chrome/1.0", [], {}, ("Chrome/1",), object(), _Unstringable()]
    + _random_strings(20, 1000, seed=7)
    + _random_strings(20, 16, seed=11),
)
def test_string_extractors_never_raise(value):
    detect_browser(value)
    detect_browser(value, is_brave=True)
    detect_device(value)
    detect_device(value, max_touch_points=5)
    detect_rendering_engine("Chrome", value)
    detect_rendering_engine(value, value)
    detect_from_user_agent(value, max_touch_points=value)


@pytest.mark.parametrize("value", ["", None, 42, b"bytes", ["Chrome/1.0"]])
def test_invalid_input_is_absent(value):
    assert detect_browser(value) is None
    assert detect_device(value) is None
