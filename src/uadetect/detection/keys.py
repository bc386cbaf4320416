# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared diagnostic event codes used across extractors and the engine."""

# Identification-string extractor
EVT_INVALID_USER_AGENT = "invalid_user_agent"
EVT_UNRECOGNIZED_BROWSER = "unrecognized_browser"
EVT_UNRECOGNIZED_PLATFORM = "unrecognized_platform"
EVT_NO_ENGINE_FAMILY = "no_engine_family"

# Structured-hints extractor
EVT_INVALID_HINTS = "invalid_structured_hints"
EVT_EMPTY_BRANDS = "empty_brands"
EVT_UNRECOGNIZED_BRANDS = "unrecognized_brands"
EVT_UNKNOWN_HINT_NAME = "unknown_hint_name"
EVT_HIGH_DETAIL_TIMEOUT = "high_detail_timeout"
EVT_HIGH_DETAIL_FAILED = "high_detail_failed"
EVT_HIGH_DETAIL_EMPTY = "high_detail_empty"
EVT_HIGH_DETAIL_LATE = "high_detail_late_result"

# Engine
EVT_EXTRACTOR_ERROR = "extractor_error"
EVT_NO_ENVIRONMENT = "no_environment"
