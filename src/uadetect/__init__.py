# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
uadetect package entrypoint.

This package classifies a client's browser, rendering engine and device from either
structured client hints or a legacy identification (User-Agent) string. Every extractor
is a total function: unrecognized or malformed input shows up as absent fields, never as
an exception. The client environment is injected into the engine, so detection runs the
same in browsers-as-data tests, server-side request handlers and the CLI.
"""

from .config import DetectionSettings, load_detection_settings
from .detection import (
    DetectionEngine,
    classify_device_type,
    detect_browser,
    detect_device,
    detect_device_from_hints,
    detect_device_from_ua,
    detect_from_structured_hints,
    detect_from_user_agent,
    detect_low_detail,
    detect_rendering_engine,
    detect_with_high_detail,
    is_android_tablet,
    is_ipad,
)
from .errors import ErrorCategory, HighDetailUnavailable, UadetectError
from .http import environment_from_headers, environment_from_request
from .log import setup_logging
from .models import (
    Brand,
    BrowserInfo,
    BrowserName,
    ClientEnvironment,
    DetectionMethod,
    DetectionResult,
    Device,
    DeviceInfo,
    DeviceType,
    HighDetailHint,
    Platform,
    RenderingEngine,
    RenderingEngineInfo,
    StructuredHints,
    UseOptions,
)
from .runtime import AgentSession
from .utils import DiagnosticCollector, DiagnosticEvent, detection_context, results_equal
from .version import __version__

__all__ = [
    "AgentSession",
    "Brand",
    "BrowserInfo",
    "BrowserName",
    "ClientEnvironment",
    "DetectionEngine",
    "DetectionMethod",
    "DetectionResult",
    "DetectionSettings",
    "Device",
    "DeviceInfo",
    "DeviceType",
    "DiagnosticCollector",
    "DiagnosticEvent",
    "ErrorCategory",
    "HighDetailHint",
    "HighDetailUnavailable",
    "Platform",
    "RenderingEngine",
    "RenderingEngineInfo",
    "StructuredHints",
    "UadetectError",
    "UseOptions",
    "classify_device_type",
    "detect_browser",
    "detect_device",
    "detect_device_from_hints",
    "detect_device_from_ua",
    "detect_from_structured_hints",
    "detect_from_user_agent",
    "detect_low_detail",
    "detect_rendering_engine",
    "detect_with_high_detail",
    "detection_context",
    "environment_from_headers",
    "environment_from_request",
    "is_android_tablet",
    "is_ipad",
    "load_detection_settings",
    "results_equal",
    "setup_logging",
    "__version__",
]
