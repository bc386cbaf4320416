# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client environment snapshot handed to the detection engine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from .hints import StructuredHints


@dataclass(frozen=True)
class ClientEnvironment:
    """
    Everything the engine may read about the client.

    - `user_agent` is the identification string; it is not validated here so malformed
      values reach the extractors, which treat them as "absent".
    - `max_touch_points` is the simultaneous touch-point count, when the client reports one.
    - `hints` are structured client hints; when present they take priority over `user_agent`.
    - `is_brave` mirrors the vendor-specific Brave capability signal.
    """

    user_agent: Any = None
    max_touch_points: int | None = None
    hints: StructuredHints | None = None
    is_brave: bool = False

    @property
    def has_structured_hints(self) -> bool:
        return self.hints is not None


# Returns None when there is no addressable client context.
EnvironmentAccessor = Callable[[], Optional[ClientEnvironment]]
