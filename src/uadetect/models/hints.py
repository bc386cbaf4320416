# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structured client-hint input models."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from ..errors import HighDetailUnavailable
from .enums import HighDetailHint, coerce_hint

DetailSource = Callable[[Sequence[str]], Union[Awaitable[Any], Any]]


@dataclass(frozen=True)
class Brand:
    brand: str
    version: str = ""

    @classmethod
    def from_value(cls, value: Any) -> Brand | None:
        """Accept a Brand, a `{brand, version}` mapping or a `(brand, version)` pair."""
        if isinstance(value, Brand):
            return value
        if isinstance(value, Mapping):
            name = value.get("brand")
            version = value.get("version")
        elif isinstance(value, (tuple, list)) and len(value) == 2:
            name, version = value
        else:
            return None
        if not isinstance(name, str):
            return None
        return cls(brand=name, version="" if version is None else str(version))


def coerce_brands(value: Any) -> tuple[Brand, ...]:
    """Coerce a brand list, silently skipping members that are not brand-shaped."""
    if value is None or isinstance(value, (str, bytes, Mapping)):
        return ()
    if not isinstance(value, Iterable):
        return ()
    brands = []
    for item in value:
        brand = Brand.from_value(item)
        if brand is not None:
            brands.append(brand)
    return tuple(brands)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class HighDetailValues:
    """Values returned by a high-detail retrieval."""

    brands: tuple[Brand, ...] = ()
    mobile: bool | None = None
    platform: str | None = None
    architecture: str | None = None
    bitness: str | None = None
    model: str | None = None
    platform_version: str | None = None
    full_version: str | None = None
    full_brand_list: tuple[Brand, ...] = ()

    @classmethod
    def from_mapping(cls, data: Any) -> HighDetailValues | None:
        if isinstance(data, HighDetailValues):
            return data
        if not isinstance(data, Mapping):
            return None
        full_version = data.get("fullVersion", data.get("uaFullVersion"))
        full_brand_list = data.get("fullBrandList", data.get("fullVersionList"))
        mobile = data.get("mobile")
        return cls(
            brands=coerce_brands(data.get("brands")),
            mobile=bool(mobile) if mobile is not None else None,
            platform=_optional_str(data.get("platform")),
            architecture=_optional_str(data.get("architecture")),
            bitness=_optional_str(data.get("bitness")),
            model=_optional_str(data.get("model")),
            platform_version=_optional_str(data.get("platformVersion")),
            full_version=_optional_str(full_version),
            full_brand_list=coerce_brands(full_brand_list),
        )


def _mobile_flag(value: Any) -> Any:
    return False if value is None else value


@dataclass(frozen=True)
class StructuredHints:
    """
    Low-detail structured hints plus an optional high-detail retrieval capability.

    `detail_source` is called with the requested hint names and may return either the
    detail mapping or an awaitable resolving to it. A `mobile` value that is not a bool is
    kept as given; device classification treats it as malformed.
    """

    brands: tuple[Brand, ...] = ()
    mobile: Any = False
    platform: str = ""
    detail_source: DetailSource | None = field(default=None, compare=False, repr=False)

    async def get_high_entropy_values(self, hints: Sequence[str]) -> HighDetailValues | None:
        if self.detail_source is None:
            raise HighDetailUnavailable("structured hints expose no high-detail retrieval")
        raw = self.detail_source(list(hints))
        if inspect.isawaitable(raw):
            raw = await raw
        return HighDetailValues.from_mapping(raw)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StructuredHints:
        source = data.get("getHighEntropyValues") or data.get("detail_source")
        return cls(
            brands=coerce_brands(data.get("brands")),
            mobile=_mobile_flag(data.get("mobile")),
            platform=data.get("platform") if isinstance(data.get("platform"), str) else "",
            detail_source=source if callable(source) else None,
        )

    @classmethod
    def coerce(cls, value: Any) -> StructuredHints | None:
        """Return StructuredHints for a model, mapping or hints-shaped object; None otherwise."""
        if value is None:
            return None
        if isinstance(value, StructuredHints):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        if hasattr(value, "brands"):
            source = getattr(value, "get_high_entropy_values", None) or getattr(value, "getHighEntropyValues", None)
            return cls.from_mapping(
                {
                    "brands": getattr(value, "brands", None),
                    "mobile": getattr(value, "mobile", False),
                    "platform": getattr(value, "platform", ""),
                    "detail_source": source,
                }
            )
        return None


@dataclass(frozen=True)
class UseOptions:
    """Consumer-supplied detection options. `hints=None` selects the configured default set."""

    high_detail: bool = False
    hints: tuple[HighDetailHint, ...] | None = None

    def __post_init__(self) -> None:
        if self.hints is not None:
            object.__setattr__(self, "hints", normalize_hints(self.hints))

    def resolve_hints(self, default: Sequence[HighDetailHint]) -> tuple[HighDetailHint, ...]:
        return tuple(self.hints) if self.hints is not None else tuple(default)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> UseOptions:
        if not isinstance(data, Mapping):
            return cls()
        high_detail = data.get("highDetail", data.get("high_detail", False))
        hints = data.get("hints")
        return cls(
            high_detail=bool(high_detail),
            hints=tuple(hints) if isinstance(hints, (list, tuple)) else None,
        )


def normalize_hints(values: Iterable[Any]) -> tuple[HighDetailHint, ...]:
    """Map hint names onto HighDetailHint, dropping unknown names and duplicates."""
    from ..detection.keys import EVT_UNKNOWN_HINT_NAME
    from ..utils.diagnostics import emit_diagnostic

    hints: list[HighDetailHint] = []
    for value in values:
        hint = coerce_hint(value)
        if hint is None:
            emit_diagnostic(EVT_UNKNOWN_HINT_NAME, f"Ignoring unknown high-detail hint {value!r}", hint=repr(value))
            continue
        if hint not in hints:
            hints.append(hint)
    return tuple(hints)
