# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import DetectionSettings
from ..models import ClientEnvironment, DetectionMethod, DetectionResult, EnvironmentAccessor, UseOptions
from ..utils.context import DiagnosticObserver, detection_context, get_detection_settings
from ..utils.diagnostics import emit_diagnostic
from .base import Extractor
from .keys import EVT_EXTRACTOR_ERROR, EVT_NO_ENVIRONMENT
from .registry import EXTRACTORS

logger = logging.getLogger(__name__)

NO_ENVIRONMENT_RESULT = DetectionResult(detection_method=DetectionMethod.NO_ENVIRONMENT)
NO_EXTRACTOR_RESULT = DetectionResult()


def _fixed_environment(environment: ClientEnvironment | None) -> EnvironmentAccessor:
    return lambda: environment


class DetectionEngine:
    """
    Reads the client environment through an injected accessor and runs the first
    available extractor.

    Structured hints win over the identification string; without any environment the
    result is tagged `no-environment` and no extractor runs. Each call is one detection
    run; deciding whether a new result differs from a held one is the caller's job
    (see `uadetect.utils.comparison.results_equal`).
    """

    def __init__(
        self,
        environment: EnvironmentAccessor | ClientEnvironment | None = None,
        *,
        observer: DiagnosticObserver | None = None,
        settings: DetectionSettings | None = None,
        extractors: Sequence[Extractor] | None = None,
    ):
        if environment is None or isinstance(environment, ClientEnvironment):
            self.environment_accessor = _fixed_environment(environment)
        else:
            self.environment_accessor = environment
        self.observer = observer
        self.settings = settings
        self.extractors = sorted(extractors, key=lambda e: e.priority) if extractors is not None else EXTRACTORS

    def detect(self) -> DetectionResult:
        """Run one low-detail detection."""
        with detection_context(observer=self.observer, settings=self.settings):
            environment = self._read_environment()
            if environment is None:
                return NO_ENVIRONMENT_RESULT
            extractor = self._select_extractor(environment)
            if extractor is None:
                return NO_EXTRACTOR_RESULT
            try:
                return extractor.detect(environment)
            except Exception as exc:  # noqa: BLE001
                return self._extractor_failed(extractor, exc)

    async def detect_async(self, options: UseOptions | None = None) -> DetectionResult:
        """Run one detection, enriching structured hints with high-detail values when requested."""
        with detection_context(observer=self.observer, settings=self.settings):
            environment = self._read_environment()
            if environment is None:
                return NO_ENVIRONMENT_RESULT
            if options is None:
                options = UseOptions(high_detail=get_detection_settings().high_detail)
            extractor = self._select_extractor(environment)
            if extractor is None:
                return NO_EXTRACTOR_RESULT
            try:
                return await extractor.detect_async(environment, options)
            except Exception as exc:  # noqa: BLE001
                return self._extractor_failed(extractor, exc)

    def _read_environment(self) -> ClientEnvironment | None:
        try:
            environment = self.environment_accessor()
        except Exception as exc:  # noqa: BLE001
            logger.exception("Environment accessor failed: %s", exc)
            environment = None
        if environment is None:
            emit_diagnostic(EVT_NO_ENVIRONMENT, "No client environment available")
        return environment

    def _select_extractor(self, environment: ClientEnvironment) -> Extractor | None:
        if not self.extractors:
            emit_diagnostic(EVT_EXTRACTOR_ERROR, "No extractors registered")
            return None
        for extractor in self.extractors:
            if extractor.is_available(environment):
                return extractor
        # The string extractor accepts every environment, so this only triggers with a custom list.
        return self.extractors[-1]

    @staticmethod
    def _extractor_failed(extractor: Extractor, exc: Exception) -> DetectionResult:
        logger.exception("Extractor %s failed: %s", extractor.name, exc)
        emit_diagnostic(EVT_EXTRACTOR_ERROR, f"Extractor {extractor.name} failed: {exc}", extractor=extractor.name)
        try:
            method = DetectionMethod(extractor.name)
        except ValueError:
            method = None
        return DetectionResult(detection_method=method)


__all__ = ["DetectionEngine", "NO_ENVIRONMENT_RESULT", "NO_EXTRACTOR_RESULT"]
