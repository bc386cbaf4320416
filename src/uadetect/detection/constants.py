# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pattern catalog: browser tokens, engine families and platform markers."""

import re

from ..models import BrowserName, Platform, RenderingEngine
from .base import PatternRule

# Browser identification tokens.
EDGE_TOKEN = re.compile(r"Edg/")
SAMSUNG_TOKEN = re.compile(r"SamsungBrowser/")
VIVALDI_TOKEN = re.compile(r"Vivaldi/")
OPERA_NEW_TOKEN = re.compile(r"OPR/")
CHROME_TOKEN = re.compile(r"Chrome/")
CHROMIUM_TOKEN = re.compile(r"Chromium/")
FIREFOX_TOKEN = re.compile(r"Firefox/")
# Real builds spell it "SeaMonkey/"; match either casing.
SEAMONKEY_TOKEN = re.compile(r"Seamonkey/", re.IGNORECASE)
SAFARI_TOKEN = re.compile(r"Safari/")
OPERA_LEGACY_TOKEN = re.compile(r"Opera/")

EDGE_VERSION_PATTERN = re.compile(r"Edg/([0-9.]+)")
SAMSUNG_VERSION_PATTERN = re.compile(r"SamsungBrowser/([0-9.]+)")
VIVALDI_VERSION_PATTERN = re.compile(r"Vivaldi/([0-9.]+)")
OPERA_NEW_VERSION_PATTERN = re.compile(r"OPR/([0-9.]+)")
CHROME_VERSION_PATTERN = re.compile(r"Chrome/([0-9.]+)")
CHROMIUM_VERSION_PATTERN = re.compile(r"Chromium/([0-9.]+)")
FIREFOX_VERSION_PATTERN = re.compile(r"Firefox/([0-9.]+)")
SEAMONKEY_VERSION_PATTERN = re.compile(r"Seamonkey/([0-9.]+)", re.IGNORECASE)
SAFARI_VERSION_PATTERN = re.compile(r"Version/([0-9.]+)")
OPERA_LEGACY_VERSION_PATTERN = re.compile(r"Opera/([0-9.]+)")

# Chromium derivatives whose strings also carry the Chrome token.
CHROMIUM_DERIVATIVE_TOKENS = (EDGE_TOKEN, SAMSUNG_TOKEN, VIVALDI_TOKEN, OPERA_NEW_TOKEN)

# Order is load-bearing: specific Chromium derivatives before Chrome, Chrome before Safari.
BROWSER_RULES: tuple[PatternRule, ...] = (
    PatternRule(BrowserName.EDGE, EDGE_TOKEN, EDGE_VERSION_PATTERN),
    PatternRule(BrowserName.SAMSUNG_INTERNET, SAMSUNG_TOKEN, SAMSUNG_VERSION_PATTERN),
    PatternRule(BrowserName.VIVALDI, VIVALDI_TOKEN, VIVALDI_VERSION_PATTERN),
    PatternRule(BrowserName.OPERA_15_PLUS, OPERA_NEW_TOKEN, OPERA_NEW_VERSION_PATTERN),
    PatternRule(BrowserName.CHROME, CHROME_TOKEN, CHROME_VERSION_PATTERN, excludes=CHROMIUM_DERIVATIVE_TOKENS),
    PatternRule(BrowserName.CHROMIUM, CHROMIUM_TOKEN, CHROMIUM_VERSION_PATTERN),
    PatternRule(BrowserName.FIREFOX, FIREFOX_TOKEN, FIREFOX_VERSION_PATTERN, excludes=(SEAMONKEY_TOKEN,)),
    PatternRule(BrowserName.SEAMONKEY, SEAMONKEY_TOKEN, SEAMONKEY_VERSION_PATTERN),
    PatternRule(BrowserName.SAFARI, SAFARI_TOKEN, SAFARI_VERSION_PATTERN),
    PatternRule(BrowserName.OPERA_12_MINUS, OPERA_LEGACY_TOKEN, OPERA_LEGACY_VERSION_PATTERN),
)

# Rendering-engine families. A browser outside every family has no engine opinion.
BLINK_BROWSERS = frozenset(
    {
        BrowserName.CHROME,
        BrowserName.CHROMIUM,
        BrowserName.EDGE,
        BrowserName.BRAVE,
        BrowserName.SAMSUNG_INTERNET,
        BrowserName.VIVALDI,
        BrowserName.OPERA_15_PLUS,
    }
)
GECKO_BROWSERS = frozenset({BrowserName.FIREFOX, BrowserName.SEAMONKEY})
WEBKIT_BROWSERS = frozenset({BrowserName.SAFARI})

ENGINE_FAMILIES: dict[RenderingEngine, frozenset[BrowserName]] = {
    RenderingEngine.BLINK: BLINK_BROWSERS,
    RenderingEngine.GECKO: GECKO_BROWSERS,
    RenderingEngine.WEBKIT: WEBKIT_BROWSERS,
}

# Engine version tokens, tried in order.
ENGINE_VERSION_PATTERNS: dict[RenderingEngine, tuple[re.Pattern[str], ...]] = {
    RenderingEngine.BLINK: (CHROME_VERSION_PATTERN, CHROMIUM_VERSION_PATTERN),
    RenderingEngine.GECKO: (re.compile(r"rv:([0-9.]+)"),),
    RenderingEngine.WEBKIT: (re.compile(r"AppleWebKit/([0-9.]+)"),),
}

# Platform / device markers (case-insensitive).
ANDROID_TOKEN = re.compile(r"Android", re.IGNORECASE)
MOBILE_TOKEN = re.compile(r"Mobile", re.IGNORECASE)
IPHONE_TOKEN = re.compile(r"iPhone", re.IGNORECASE)
IPAD_TOKEN = re.compile(r"iPad", re.IGNORECASE)
IPOD_TOKEN = re.compile(r"iPod", re.IGNORECASE)
WINDOWS_TOKEN = re.compile(r"Win", re.IGNORECASE)
MAC_TOKEN = re.compile(r"Mac", re.IGNORECASE)
MACINTOSH_TOKEN = re.compile(r"Macintosh", re.IGNORECASE)
CHROME_OS_TOKEN = re.compile(r"CrOS", re.IGNORECASE)
LINUX_TOKEN = re.compile(r"Linux", re.IGNORECASE)

# Touch-capable tablets that present desktop Mac strings report more than this many points.
DESKTOP_MAX_TOUCH_POINTS = 1

# Structured-hints brand priority (case-insensitive substring match on the brand name).
BRAND_PRIORITY: tuple[tuple[re.Pattern[str], BrowserName], ...] = (
    (re.compile(r"Microsoft Edge", re.IGNORECASE), BrowserName.EDGE),
    (re.compile(r"Brave", re.IGNORECASE), BrowserName.BRAVE),
    (re.compile(r"Samsung Internet", re.IGNORECASE), BrowserName.SAMSUNG_INTERNET),
    (re.compile(r"Vivaldi", re.IGNORECASE), BrowserName.VIVALDI),
    (re.compile(r"Arc", re.IGNORECASE), BrowserName.ARC),
    (re.compile(r"Opera", re.IGNORECASE), BrowserName.OPERA),
    (re.compile(r"Google Chrome", re.IGNORECASE), BrowserName.CHROME),
    (re.compile(r"Chromium", re.IGNORECASE), BrowserName.CHROMIUM),
)

# Placeholder brands injected to defeat exact-list fingerprinting ("Not A;Brand", "Not/A)Brand", ...).
GREASE_MARKER = "Not"
GENERIC_CHROMIUM_BRAND = "Chromium"

# Structured platform strings, matched by lowercase substring in this order.
PLATFORM_MARKERS = (
    (("android",), Platform.ANDROID),
    (("windows",), Platform.WINDOWS),
    (("mac",), Platform.MAC_OS),
    (("linux",), Platform.LINUX),
    (("chrome os", "chromeos"), Platform.CHROME_OS),
    (("ios", "iphone", "ipad"), Platform.IOS),
)
