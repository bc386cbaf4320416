# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client-hint header exports."""

from .headers import (
    as_httpx_headers,
    environment_from_headers,
    environment_from_request,
    high_detail_values_from_headers,
    parse_brand_list,
    parse_sf_boolean,
    parse_sf_string,
    structured_hints_from_headers,
)

__all__ = [
    "as_httpx_headers",
    "environment_from_headers",
    "environment_from_request",
    "high_detail_values_from_headers",
    "parse_brand_list",
    "parse_sf_boolean",
    "parse_sf_string",
    "structured_hints_from_headers",
]
