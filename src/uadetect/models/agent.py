# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .enums import BrowserName, DetectionMethod, Device, DeviceType, Platform, RenderingEngine

UNKNOWN_VERSION = "Unknown"


def _enum_or_unknown(enum_cls, value: Any, unknown):
    try:
        return enum_cls(value)
    except ValueError:
        return unknown


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class BrowserInfo:
    """Browser name plus best-available version."""

    name: BrowserName
    version: str = UNKNOWN_VERSION
    full_version: str | None = None

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name.value, "version": self.version}
        if self.full_version is not None:
            data["fullVersion"] = self.full_version
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> BrowserInfo | None:
        if not isinstance(data, Mapping) or "name" not in data:
            return None
        return cls(
            name=_enum_or_unknown(BrowserName, data.get("name"), BrowserName.UNKNOWN),
            version=str(data.get("version") or UNKNOWN_VERSION),
            full_version=_optional_str(data.get("fullVersion")),
        )


@dataclass(frozen=True)
class DeviceInfo:
    """
    Platform and device category.

    `architecture`, `model` and `platform_version` are only ever set by the high-detail
    structured-hints path; everywhere else they stay None.
    """

    is_mobile: bool
    platform: Platform
    device: Device
    architecture: str | None = None
    model: str | None = None
    platform_version: str | None = None

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "isMobile": self.is_mobile,
            "platform": self.platform.value,
            "device": self.device.value,
        }
        if self.architecture is not None:
            data["architecture"] = self.architecture
        if self.model is not None:
            data["model"] = self.model
        if self.platform_version is not None:
            data["platformVersion"] = self.platform_version
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> DeviceInfo | None:
        if not isinstance(data, Mapping):
            return None
        return cls(
            is_mobile=bool(data.get("isMobile", False)),
            platform=_enum_or_unknown(Platform, data.get("platform"), Platform.UNKNOWN),
            device=_enum_or_unknown(Device, data.get("device"), Device.UNKNOWN),
            architecture=_optional_str(data.get("architecture")),
            model=_optional_str(data.get("model")),
            platform_version=_optional_str(data.get("platformVersion")),
        )


@dataclass(frozen=True)
class RenderingEngineInfo:
    name: RenderingEngine
    version: str = UNKNOWN_VERSION

    def to_mapping(self) -> dict[str, Any]:
        return {"name": self.name.value, "version": self.version}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> RenderingEngineInfo | None:
        if not isinstance(data, Mapping) or "name" not in data:
            return None
        return cls(
            name=_enum_or_unknown(RenderingEngine, data.get("name"), RenderingEngine.UNKNOWN),
            version=str(data.get("version") or UNKNOWN_VERSION),
        )


@dataclass(frozen=True)
class DetectionResult:
    """
    Normalized detection outcome.

    Every field is optional: an absent field means "could not be determined", never an
    error. Results are immutable snapshots and are compared by value through
    `uadetect.utils.comparison.results_equal`.
    """

    device: DeviceInfo | None = None
    browser: BrowserInfo | None = None
    rendering_engine: RenderingEngineInfo | None = None
    detection_method: DetectionMethod | None = None
    device_type: DeviceType | None = None

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.device is not None:
            data["device"] = self.device.to_mapping()
        if self.browser is not None:
            data["browser"] = self.browser.to_mapping()
        if self.rendering_engine is not None:
            data["renderingEngine"] = self.rendering_engine.to_mapping()
        if self.detection_method is not None:
            data["detectionMethod"] = self.detection_method.value
        if self.device_type is not None:
            data["deviceType"] = self.device_type.value
        return data

    def to_dict(self) -> dict[str, Any]:
        return self.to_mapping()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> DetectionResult:
        if not isinstance(data, Mapping):
            return cls()
        method = data.get("detectionMethod")
        device_type = data.get("deviceType")
        return cls(
            device=DeviceInfo.from_mapping(data.get("device")),
            browser=BrowserInfo.from_mapping(data.get("browser")),
            rendering_engine=RenderingEngineInfo.from_mapping(data.get("renderingEngine")),
            detection_method=_enum_or_unknown(DetectionMethod, method, None) if method is not None else None,
            device_type=_enum_or_unknown(DeviceType, device_type, None) if device_type is not None else None,
        )
