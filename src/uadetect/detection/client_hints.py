# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Structured-hints extractor.

The low-detail path is synchronous and reads only `brands`, `mobile` and `platform`. The
high-detail path asks the environment for extra values, races that request against a
timeout and degrades to the low-detail result on timeout or rejection.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any

from ..errors import ErrorCategory, categorize_exception
from ..models import (
    UNKNOWN_VERSION,
    Brand,
    BrowserInfo,
    BrowserName,
    ClientEnvironment,
    DetectionMethod,
    DetectionResult,
    HighDetailHint,
    HighDetailValues,
    RenderingEngine,
    RenderingEngineInfo,
    StructuredHints,
    UseOptions,
)
from ..models.hints import coerce_brands
from ..utils.context import get_detection_settings
from ..utils.diagnostics import emit_diagnostic
from .base import Extractor, never_raises
from .constants import BRAND_PRIORITY, GENERIC_CHROMIUM_BRAND, GREASE_MARKER
from .device import classify_device_type, detect_device_from_hints
from .keys import (
    EVT_EMPTY_BRANDS,
    EVT_HIGH_DETAIL_EMPTY,
    EVT_HIGH_DETAIL_FAILED,
    EVT_HIGH_DETAIL_LATE,
    EVT_HIGH_DETAIL_TIMEOUT,
    EVT_INVALID_HINTS,
    EVT_UNRECOGNIZED_BRANDS,
)
from .string_parser import engine_family

logger = logging.getLogger(__name__)

MINIMAL_RESULT = DetectionResult(detection_method=DetectionMethod.STRUCTURED_HINTS)


def is_placeholder_brand(brand: Brand) -> bool:
    """Grease entries and the generic Chromium brand say nothing about the browser."""
    return GREASE_MARKER in brand.brand or brand.brand == GENERIC_CHROMIUM_BRAND


@never_raises(fallback=None)
def extract_browser_from_brands(brands: Iterable[Brand] | Any) -> BrowserInfo | None:
    """
    Pick the browser from a brand list by table priority, not list order.

    A brand outside the table that is not a placeholder yields `Unknown` with that brand's
    version.
    """
    candidates = coerce_brands(brands)
    if not candidates:
        emit_diagnostic(EVT_EMPTY_BRANDS, "Empty or invalid brand list", category=ErrorCategory.INVALID_INPUT)
        return None

    for pattern, name in BRAND_PRIORITY:
        for brand in candidates:
            if pattern.search(brand.brand):
                return BrowserInfo(name=name, version=brand.version or UNKNOWN_VERSION)

    for brand in candidates:
        if not is_placeholder_brand(brand):
            return BrowserInfo(name=BrowserName.UNKNOWN, version=brand.version or UNKNOWN_VERSION)

    emit_diagnostic(
        EVT_UNRECOGNIZED_BRANDS,
        "Unable to identify browser from brands",
        category=ErrorCategory.UNRECOGNIZED_INPUT,
        brands=[brand.brand for brand in candidates],
    )
    return None


def engine_from_brands(browser: BrowserInfo | None, brands: Iterable[Brand]) -> RenderingEngineInfo | None:
    """Engine family for a hints-derived browser; Blink takes its version from the Chromium brand."""
    if browser is None:
        return None
    engine = engine_family(browser.name)
    if engine is None:
        return None
    version = UNKNOWN_VERSION
    if engine == RenderingEngine.BLINK:
        for brand in brands:
            if brand.brand == GENERIC_CHROMIUM_BRAND and brand.version:
                version = brand.version
                break
    return RenderingEngineInfo(name=engine, version=version)


@never_raises(fallback=MINIMAL_RESULT)
def detect_low_detail(hints: StructuredHints | Any) -> DetectionResult:
    """Synchronous detection from low-detail hints. Never raises."""
    structured = StructuredHints.coerce(hints)
    if structured is None:
        emit_diagnostic(
            EVT_INVALID_HINTS,
            "Invalid structured hints provided",
            category=ErrorCategory.INVALID_INPUT,
            value_type=type(hints).__name__,
        )
        return MINIMAL_RESULT

    browser = extract_browser_from_brands(structured.brands)
    device = detect_device_from_hints(structured)
    return DetectionResult(
        device=device,
        browser=browser,
        rendering_engine=engine_from_brands(browser, structured.brands),
        detection_method=DetectionMethod.STRUCTURED_HINTS,
        device_type=classify_device_type(device.is_mobile, device.device),
    )


def merge_high_detail(result: DetectionResult, values: HighDetailValues) -> DetectionResult:
    """Fold high-detail values into a low-detail result, returning a new snapshot."""
    device = result.device
    if device is not None:
        device = replace(
            device,
            architecture=values.architecture,
            model=values.model,
            platform_version=values.platform_version,
        )

    browser = result.browser
    rendering_engine = result.rendering_engine
    if browser is not None and values.full_version:
        browser = replace(browser, full_version=values.full_version)

    if values.full_brand_list:
        richer = extract_browser_from_brands(values.full_brand_list)
        if richer is not None:
            browser = replace(richer, full_version=values.full_version)
            rendering_engine = engine_from_brands(richer, values.full_brand_list)

    return replace(result, device=device, browser=browser, rendering_engine=rendering_engine)


def _discard_late_result(task: asyncio.Future) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    emit_diagnostic(
        EVT_HIGH_DETAIL_LATE,
        "Ignoring high-detail values delivered after the timeout",
        category=ErrorCategory.HIGH_DETAIL_TIMEOUT,
        failed=exc is not None,
    )


async def retrieve_high_detail(
    hints: StructuredHints,
    requested: Sequence[HighDetailHint],
    timeout: float,
) -> HighDetailValues | None:
    """
    Request high-detail values once, bounded by `timeout` seconds.

    Returns None on timeout or failure. A request that outlives the timeout is abandoned,
    not cancelled; whatever it eventually produces is consumed and dropped.
    """
    task = asyncio.ensure_future(hints.get_high_entropy_values([hint.value for hint in requested]))
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout)
    except asyncio.CancelledError:
        task.add_done_callback(_discard_late_result)
        raise

    if not done:
        task.add_done_callback(_discard_late_result)
        emit_diagnostic(
            EVT_HIGH_DETAIL_TIMEOUT,
            f"High-detail retrieval exceeded {timeout:g}s",
            category=ErrorCategory.HIGH_DETAIL_TIMEOUT,
            timeout=timeout,
        )
        return None

    if task.cancelled():
        emit_diagnostic(EVT_HIGH_DETAIL_FAILED, "High-detail retrieval was cancelled", category=ErrorCategory.HIGH_DETAIL_REJECTED)
        return None

    exc = task.exception()
    if exc is not None:
        emit_diagnostic(
            EVT_HIGH_DETAIL_FAILED,
            f"Failed to retrieve high-detail values: {exc}",
            category=categorize_exception(exc, during_retrieval=True),
            error_type=exc.__class__.__name__,
        )
        return None

    values = task.result()
    if values is None:
        emit_diagnostic(EVT_HIGH_DETAIL_EMPTY, "High-detail retrieval returned no values", category=ErrorCategory.INVALID_INPUT)
    return values


async def detect_with_high_detail(
    hints: StructuredHints | Any,
    options: UseOptions | None = None,
    *,
    timeout: float | None = None,
) -> DetectionResult:
    """
    Low-detail detection enriched with high-detail values.

    Any failure of the enrichment step returns the low-detail result unchanged.
    """
    low_detail = detect_low_detail(hints)
    try:
        structured = StructuredHints.coerce(hints)
    except Exception:  # noqa: BLE001
        structured = None
    if structured is None:
        return low_detail

    settings = get_detection_settings()
    requested = (options or UseOptions(high_detail=True)).resolve_hints(settings.default_hints)
    effective_timeout = settings.high_detail_timeout if timeout is None else timeout

    values = await retrieve_high_detail(structured, requested, effective_timeout)
    if values is None:
        return low_detail
    try:
        return merge_high_detail(low_detail, values)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Merging high-detail values failed", exc_info=True)
        emit_diagnostic(
            EVT_HIGH_DETAIL_FAILED,
            f"Merging high-detail values failed: {exc}",
            category=categorize_exception(exc),
        )
        return low_detail


async def detect_from_structured_hints(
    hints: StructuredHints | Any,
    options: UseOptions | None = None,
) -> DetectionResult:
    """Dispatch to the high-detail path when the caller opted in, else the low-detail one."""
    if options is not None and options.high_detail:
        return await detect_with_high_detail(hints, options)
    return detect_low_detail(hints)


class StructuredHintsExtractor(Extractor):
    name = "structured-hints"
    priority = 10

    def is_available(self, environment: ClientEnvironment) -> bool:
        return environment.has_structured_hints

    def detect(self, environment: ClientEnvironment) -> DetectionResult:
        return detect_low_detail(environment.hints)

    async def detect_async(self, environment: ClientEnvironment, options: UseOptions) -> DetectionResult:
        return await detect_from_structured_hints(environment.hints, options)


__all__ = [
    "MINIMAL_RESULT",
    "StructuredHintsExtractor",
    "detect_from_structured_hints",
    "detect_low_detail",
    "detect_with_high_detail",
    "engine_from_brands",
    "extract_browser_from_brands",
    "is_placeholder_brand",
    "merge_high_detail",
    "retrieve_high_detail",
]
