# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client-hint request headers.

Browsers that support structured hints send them as `Sec-CH-UA*` request headers
(RFC 8941 structured fields). This module turns such headers into a ClientEnvironment so
the detection engine also runs server-side. Header field names are case-insensitive
(RFC 9110); every container is normalized through `httpx.Headers` first.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from ..models import Brand, ClientEnvironment, HighDetailValues, StructuredHints

SEC_CH_UA = "sec-ch-ua"
SEC_CH_UA_MOBILE = "sec-ch-ua-mobile"
SEC_CH_UA_PLATFORM = "sec-ch-ua-platform"
SEC_CH_UA_ARCH = "sec-ch-ua-arch"
SEC_CH_UA_BITNESS = "sec-ch-ua-bitness"
SEC_CH_UA_MODEL = "sec-ch-ua-model"
SEC_CH_UA_PLATFORM_VERSION = "sec-ch-ua-platform-version"
SEC_CH_UA_FULL_VERSION = "sec-ch-ua-full-version"
SEC_CH_UA_FULL_VERSION_LIST = "sec-ch-ua-full-version-list"

# Hint name -> (header, detail key) answered from request headers.
HIGH_DETAIL_HEADERS = {
    "architecture": (SEC_CH_UA_ARCH, "architecture"),
    "model": (SEC_CH_UA_MODEL, "model"),
    "platformVersion": (SEC_CH_UA_PLATFORM_VERSION, "platformVersion"),
    "fullVersion": (SEC_CH_UA_FULL_VERSION, "fullVersion"),
    "bitness": (SEC_CH_UA_BITNESS, "bitness"),
}
# The full brand list only answers full-version requests.
FULL_BRAND_LIST_HINTS = frozenset({"fullVersion", "fullVersionList"})

_SF_STRING = r'"((?:[^"\\]|\\.)*)"'
_BRAND_MEMBER_RE = re.compile(r"^\s*" + _SF_STRING + r"\s*;\s*v\s*=\s*" + _SF_STRING + r"\s*$")
_LIST_SPLIT_RE = re.compile(r',(?=(?:[^"\\]|\\.|"(?:[^"\\]|\\.)*")*$)')
_ESCAPE_RE = re.compile(r"\\(.)")


def _unescape(value: str) -> str:
    return _ESCAPE_RE.sub(r"\1", value)


def as_httpx_headers(headers: Any) -> httpx.Headers:
    """
    Best-effort coercion of header containers into `httpx.Headers`.

    Accepts httpx.Headers, plain mappings, and iterables of pairs. Anything else yields an
    empty header set.
    """
    if isinstance(headers, httpx.Headers):
        return headers
    if not headers:
        return httpx.Headers()
    items = headers.items() if isinstance(headers, Mapping) else headers
    pairs: list[tuple[str, str]] = []
    try:
        for key, value in items:
            if key is None or value is None:
                continue
            pairs.append((str(key), str(value)))
    except (TypeError, ValueError):
        return httpx.Headers()
    return httpx.Headers(pairs)


def parse_sf_string(value: str | None) -> str | None:
    """Decode an RFC 8941 sf-string (`"Windows"` -> `Windows`); bare tokens pass through."""
    if value is None:
        return None
    stripped = value.strip()
    match = re.fullmatch(_SF_STRING, stripped)
    if match:
        return _unescape(match.group(1))
    return stripped or None


def parse_sf_boolean(value: str | None) -> bool | None:
    if value is None:
        return None
    stripped = value.strip()
    if stripped == "?1":
        return True
    if stripped == "?0":
        return False
    return None


def parse_brand_list(value: str | None) -> tuple[Brand, ...]:
    """Parse a `Sec-CH-UA`-style brand list, skipping members that do not parse."""
    if not value:
        return ()
    brands: list[Brand] = []
    for member in _LIST_SPLIT_RE.split(value):
        match = _BRAND_MEMBER_RE.match(member)
        if not match:
            continue
        brands.append(Brand(brand=_unescape(match.group(1)), version=_unescape(match.group(2))))
    return tuple(brands)


def _brand_mappings(brands: Sequence[Brand]) -> list[dict[str, str]]:
    return [{"brand": brand.brand, "version": brand.version} for brand in brands]


class HeaderDetailSource:
    """Answers high-detail requests from the hint headers already present on the request."""

    def __init__(self, headers: httpx.Headers):
        self.headers = headers

    async def __call__(self, hints: Sequence[str]) -> dict[str, Any]:
        brands = parse_brand_list(self.headers.get(SEC_CH_UA))
        values: dict[str, Any] = {
            "brands": _brand_mappings(brands),
            "mobile": bool(parse_sf_boolean(self.headers.get(SEC_CH_UA_MOBILE))),
            "platform": parse_sf_string(self.headers.get(SEC_CH_UA_PLATFORM)) or "",
        }
        for hint in hints:
            header_and_key = HIGH_DETAIL_HEADERS.get(hint)
            if header_and_key is None:
                continue
            header, key = header_and_key
            parsed = parse_sf_string(self.headers.get(header))
            if parsed is not None:
                values[key] = parsed
        if FULL_BRAND_LIST_HINTS.intersection(hints):
            full_list = parse_brand_list(self.headers.get(SEC_CH_UA_FULL_VERSION_LIST))
            if full_list:
                values["fullBrandList"] = _brand_mappings(full_list)
        return values


def structured_hints_from_headers(headers: Any) -> StructuredHints | None:
    """StructuredHints for requests carrying `Sec-CH-UA`; None when the header is absent."""
    normalized = as_httpx_headers(headers)
    brand_header = normalized.get(SEC_CH_UA)
    if brand_header is None:
        return None
    return StructuredHints(
        brands=parse_brand_list(brand_header),
        mobile=bool(parse_sf_boolean(normalized.get(SEC_CH_UA_MOBILE))),
        platform=parse_sf_string(normalized.get(SEC_CH_UA_PLATFORM)) or "",
        detail_source=HeaderDetailSource(normalized),
    )


def high_detail_values_from_headers(headers: Any) -> HighDetailValues | None:
    """Every high-detail value the request headers carry, without going through a retrieval."""
    normalized = as_httpx_headers(headers)
    if not any(header in normalized for header, _ in HIGH_DETAIL_HEADERS.values()) and SEC_CH_UA_FULL_VERSION_LIST not in normalized:
        return None
    values: dict[str, Any] = {}
    for header, key in HIGH_DETAIL_HEADERS.values():
        parsed = parse_sf_string(normalized.get(header))
        if parsed is not None:
            values[key] = parsed
    full_list = parse_brand_list(normalized.get(SEC_CH_UA_FULL_VERSION_LIST))
    if full_list:
        values["fullBrandList"] = _brand_mappings(full_list)
    return HighDetailValues.from_mapping(values)


def environment_from_headers(headers: Any) -> ClientEnvironment | None:
    """
    Build a ClientEnvironment from request headers.

    Returns None when neither `User-Agent` nor `Sec-CH-UA` is present, which the engine
    reports as `no-environment`.
    """
    normalized = as_httpx_headers(headers)
    user_agent = normalized.get("user-agent")
    hints = structured_hints_from_headers(normalized)
    if user_agent is None and hints is None:
        return None
    return ClientEnvironment(user_agent=user_agent, hints=hints)


def environment_from_request(request: httpx.Request) -> ClientEnvironment | None:
    return environment_from_headers(request.headers)


__all__ = [
    "HeaderDetailSource",
    "as_httpx_headers",
    "environment_from_headers",
    "environment_from_request",
    "high_detail_values_from_headers",
    "parse_brand_list",
    "parse_sf_boolean",
    "parse_sf_string",
    "structured_hints_from_headers",
]
