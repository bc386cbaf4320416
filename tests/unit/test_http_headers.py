# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from uadetect.detection.engine import DetectionEngine
from uadetect.http.headers import (
    HeaderDetailSource,
    as_httpx_headers,
    environment_from_headers,
    environment_from_request,
    high_detail_values_from_headers,
    parse_brand_list,
    parse_sf_boolean,
    parse_sf_string,
    structured_hints_from_headers,
)
from uadetect.models import Brand, BrowserName, DetectionMethod, Device, Platform, UseOptions

import ua_samples as ua

SEC_CH_UA = '"Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"'
REQUEST_HEADERS = {
    "User-Agent": ua.ANDROID_PHONE_CHROME,
    "Sec-CH-UA": SEC_CH_UA,
    "Sec-CH-UA-Mobile": "?1",
    "Sec-CH-UA-Platform": '"Android"',
    "Sec-CH-UA-Model": '"Pixel 8"',
    "Sec-CH-UA-Platform-Version": '"14.0.0"',
    "Sec-CH-UA-Full-Version-List": '"Chromium";v="120.0.6099.43", "Google Chrome";v="120.0.6099.43"',
}


def test_parse_brand_list():
    assert parse_brand_list(SEC_CH_UA) == (
        Brand("Not_A Brand", "8"),
        Brand("Chromium", "120"),
        Brand("Google Chrome", "120"),
    )


def test_parse_brand_list_handles_commas_and_escapes_in_strings():
    brands = parse_brand_list('"Not,A\\"Brand";v="99", "Brave";v="120"')
    assert brands == (Brand('Not,A"Brand', "99"), Brand("Brave", "120"))


@pytest.mark.parametrize("value", [None, "", "garbage", '"Chrome"', "Chrome;v=1"])
def test_parse_brand_list_skips_unparseable(value):
    assert parse_brand_list(value) == ()


@pytest.mark.parametrize(
    ("value", "expected"),
    [('"Windows"', "Windows"), ("  \"macOS\" ", "macOS"), ("x86", "x86"), ("", None), (None, None)],
)
def test_parse_sf_string(value, expected):
    assert parse_sf_string(value) == expected


@pytest.mark.parametrize(("value", "expected"), [("?1", True), ("?0", False), (" ?1 ", True), ("1", None), (None, None)])
def test_parse_sf_boolean(value, expected):
    assert parse_sf_boolean(value) is expected


def test_as_httpx_headers_accepts_common_containers():
    for container in (
        REQUEST_HEADERS,
        list(REQUEST_HEADERS.items()),
        httpx.Headers(REQUEST_HEADERS),
    ):
        headers = as_httpx_headers(container)
        assert headers["sec-ch-ua-platform"] == '"Android"'
    assert len(as_httpx_headers(None)) == 0
    assert len(as_httpx_headers(42)) == 0
    assert len(as_httpx_headers({"User-Agent": None})) == 0


def test_structured_hints_from_headers():
    hints = structured_hints_from_headers(REQUEST_HEADERS)
    assert hints.mobile is True
    assert hints.platform == "Android"
    assert hints.brands[-1] == Brand("Google Chrome", "120")
    assert structured_hints_from_headers({"User-Agent": ua.CHROME_WINDOWS}) is None


def test_environment_from_headers():
    environment = environment_from_headers(REQUEST_HEADERS)
    assert environment.user_agent == ua.ANDROID_PHONE_CHROME
    assert environment.has_structured_hints

    string_only = environment_from_headers({"user-agent": ua.FIREFOX_LINUX})
    assert string_only.user_agent == ua.FIREFOX_LINUX
    assert string_only.hints is None

    assert environment_from_headers({"Accept": "*/*"}) is None
    assert environment_from_headers(None) is None


def test_environment_from_request():
    request = httpx.Request("GET", "https://example.test/", headers=REQUEST_HEADERS)
    result = DetectionEngine(environment_from_request(request)).detect()
    assert result.detection_method == DetectionMethod.STRUCTURED_HINTS
    assert result.browser.name == BrowserName.CHROME
    assert result.device.platform == Platform.ANDROID
    assert result.device.device == Device.ANDROID


def test_missing_headers_yield_no_environment():
    request = httpx.Request("GET", "https://example.test/", headers={"Accept": "*/*"})
    result = DetectionEngine(environment_from_request(request)).detect()
    assert result.detection_method == DetectionMethod.NO_ENVIRONMENT


@pytest.mark.asyncio
async def test_header_detail_source_answers_requested_hints():
    source = HeaderDetailSource(as_httpx_headers(REQUEST_HEADERS))
    values = await source(["model", "architecture", "bogus"])
    assert values["model"] == "Pixel 8"
    assert "architecture" not in values
    assert "platformVersion" not in values
    assert values["mobile"] is True
    assert "fullBrandList" not in values

    values = await source(["fullVersion"])
    assert values["fullBrandList"][0] == {"brand": "Chromium", "version": "120.0.6099.43"}


@pytest.mark.asyncio
async def test_unrequested_full_brand_list_leaves_versions_alone():
    environment = environment_from_headers(REQUEST_HEADERS)
    result = await DetectionEngine(environment).detect_async(UseOptions(high_detail=True, hints=("model",)))
    assert result.device.model == "Pixel 8"
    assert result.device.platform_version is None
    assert result.browser.version == "120"
    assert result.browser.full_version is None
    assert result.rendering_engine.version == "120"


@pytest.mark.asyncio
async def test_high_detail_from_headers_through_engine():
    environment = environment_from_headers(REQUEST_HEADERS)
    result = await DetectionEngine(environment).detect_async(UseOptions(high_detail=True))
    assert result.device.model == "Pixel 8"
    assert result.device.platform_version == "14.0.0"
    assert result.browser.name == BrowserName.CHROME
    assert result.browser.version == "120.0.6099.43"
    assert result.rendering_engine.version == "120.0.6099.43"


def test_high_detail_values_from_headers():
    values = high_detail_values_from_headers(REQUEST_HEADERS)
    assert values.model == "Pixel 8"
    assert values.platform_version == "14.0.0"
    assert values.architecture is None
    assert len(values.full_brand_list) == 2
    assert high_detail_values_from_headers({"Sec-CH-UA": SEC_CH_UA}) is None
