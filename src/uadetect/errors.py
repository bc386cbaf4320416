# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

import asyncio
from enum import Enum
from typing import Optional


class UadetectError(Exception):
    """Base class for uadetect exceptions."""


class HighDetailUnavailable(UadetectError):
    """The structured hints carry no way to retrieve high-detail values."""


class ErrorCategory(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNRECOGNIZED_INPUT = "UNRECOGNIZED_INPUT"
    HIGH_DETAIL_TIMEOUT = "HIGH_DETAIL_TIMEOUT"
    HIGH_DETAIL_REJECTED = "HIGH_DETAIL_REJECTED"
    HIGH_DETAIL_UNAVAILABLE = "HIGH_DETAIL_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException, *, during_retrieval: bool = False) -> ErrorCategory:
    """
    Map an exception to ErrorCategory.

    `during_retrieval` marks exceptions raised by a high-detail retrieval call, where any
    failure the environment reports counts as a rejection.
    """
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return ErrorCategory.HIGH_DETAIL_TIMEOUT

    if isinstance(exc, HighDetailUnavailable):
        return ErrorCategory.HIGH_DETAIL_UNAVAILABLE

    if during_retrieval:
        return ErrorCategory.HIGH_DETAIL_REJECTED

    if isinstance(exc, (TypeError, ValueError, AttributeError, KeyError)):
        return ErrorCategory.INVALID_INPUT

    return ErrorCategory.INTERNAL_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.INVALID_INPUT: "Malformed or wrong-typed input",
        ErrorCategory.UNRECOGNIZED_INPUT: "Input matched no known pattern",
        ErrorCategory.HIGH_DETAIL_TIMEOUT: "High-detail values were not delivered in time",
        ErrorCategory.HIGH_DETAIL_REJECTED: "High-detail retrieval was rejected",
        ErrorCategory.HIGH_DETAIL_UNAVAILABLE: "High-detail retrieval is not supported",
        ErrorCategory.INTERNAL_ERROR: "Unexpected error during detection",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Detection degraded due to an error")
