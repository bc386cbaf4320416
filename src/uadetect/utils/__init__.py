# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .comparison import browser_info_equal, device_info_equal, rendering_engine_info_equal, results_equal
from .context import DetectionContext, detection_context, get_detection_context, get_detection_settings
from .diagnostics import DiagnosticCollector, DiagnosticEvent, emit_diagnostic

__all__ = [
    "DetectionContext",
    "DiagnosticCollector",
    "DiagnosticEvent",
    "browser_info_equal",
    "detection_context",
    "device_info_equal",
    "emit_diagnostic",
    "get_detection_context",
    "get_detection_settings",
    "rendering_engine_info_equal",
    "results_equal",
]
