# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Extractor registry, ordered by priority (lowest first)."""

from .client_hints import StructuredHintsExtractor
from .string_parser import UserAgentStringExtractor

EXTRACTORS = sorted(
    [
        StructuredHintsExtractor(),
        UserAgentStringExtractor(),
    ],
    key=lambda extractor: extractor.priority,
)

__all__ = ["EXTRACTORS"]
