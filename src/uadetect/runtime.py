# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level session facade: detect, compare against the held result, notify on change."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .detection.engine import DetectionEngine
from .models import ClientEnvironment, DetectionResult, EnvironmentAccessor, UseOptions
from .utils.comparison import results_equal

logger = logging.getLogger(__name__)

ResultListener = Callable[[DetectionResult], None]


class AgentSession:
    """
    Holds the latest detection result for one client session.

    Listeners hear about a result only when it differs structurally from the one held
    before, so repeated detections of an unchanged client stay silent. The session assumes
    at most one detection in flight at a time.
    """

    def __init__(
        self,
        engine: DetectionEngine | None = None,
        *,
        environment: EnvironmentAccessor | ClientEnvironment | None = None,
        options: UseOptions | None = None,
    ):
        self.engine = engine or DetectionEngine(environment)
        self.options = options
        self._result: DetectionResult | None = None
        self._listeners: list[ResultListener] = []

    @property
    def result(self) -> DetectionResult | None:
        return self._result

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Register `listener`; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> DetectionResult:
        """Run one low-detail detection and publish it if it changed."""
        return self._publish(self.engine.detect())

    async def refresh_async(self) -> DetectionResult:
        """Run one detection with the session options (high detail when requested)."""
        return self._publish(await self.engine.detect_async(self.options))

    def _publish(self, result: DetectionResult) -> DetectionResult:
        if results_equal(self._result, result):
            return self._result  # type: ignore[return-value]
        self._result = result
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Result listener %r failed: %s", listener, exc)
        return result


__all__ = ["AgentSession", "ResultListener"]
