# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection base classes and the total-function guard."""

from __future__ import annotations

import functools
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..errors import categorize_exception
from ..models import UNKNOWN_VERSION, BrowserName, ClientEnvironment, DetectionResult, UseOptions
from ..utils.diagnostics import emit_diagnostic
from .keys import EVT_EXTRACTOR_ERROR

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class PatternRule:
    """
    One entry of the ordered browser catalog.

    A rule matches when `pattern` is found and none of `excludes` is; the first matching
    rule in catalog order wins. `version_pattern` capture group 1 is the version.
    """

    name: BrowserName
    pattern: re.Pattern[str]
    version_pattern: re.Pattern[str] | None = None
    excludes: tuple[re.Pattern[str], ...] = ()

    def is_excluded(self, text: str) -> bool:
        return any(exclude.search(text) for exclude in self.excludes)

    def matches(self, text: str) -> bool:
        return bool(self.pattern.search(text)) and not self.is_excluded(text)

    def extract_version(self, text: str) -> str:
        if self.version_pattern is None:
            return UNKNOWN_VERSION
        match = self.version_pattern.search(text)
        return match.group(1) if match else UNKNOWN_VERSION


def never_raises(fallback: Any = None) -> Callable[[F], F]:
    """
    Make an extractor total: any exception is reported as a diagnostic and `fallback` is
    returned instead.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as exc:  # noqa: BLE001
                logger.debug("Extractor %s failed", func.__name__, exc_info=True)
                emit_diagnostic(
                    EVT_EXTRACTOR_ERROR,
                    f"{func.__name__} failed: {exc}",
                    category=categorize_exception(exc),
                    extractor=func.__name__,
                )
                return fallback

        return wrapper  # type: ignore[return-value]

    return decorator


class Extractor(ABC):
    """A detection path the engine can pick for a client environment."""

    name: str = "base"
    priority: int = 50

    @abstractmethod
    def is_available(self, environment: ClientEnvironment) -> bool: ...

    @abstractmethod
    def detect(self, environment: ClientEnvironment) -> DetectionResult: ...

    async def detect_async(self, environment: ClientEnvironment, options: UseOptions) -> DetectionResult:
        return self.detect(environment)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(priority={self.priority})"
