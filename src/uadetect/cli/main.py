# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""uadetect CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from ..config import load_detection_settings
from ..detection.engine import DetectionEngine
from ..http.headers import environment_from_headers
from ..log import setup_logging
from ..models import ClientEnvironment, DetectionResult, HighDetailHint, UseOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify browser, rendering engine and device from client identification data")
    parser.add_argument("user_agent", nargs="?", help="Identification (User-Agent) string")
    parser.add_argument("--touch-points", type=int, default=None, help="Simultaneous touch points the client reports")
    parser.add_argument("--brave", action="store_true", help="Client exposes the Brave capability signal")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="'Name: value'",
        help="Request header, e.g. Sec-CH-UA (repeatable)",
    )
    parser.add_argument("--high-detail", action="store_true", help="Request high-detail client hints")
    parser.add_argument(
        "--hint",
        action="append",
        choices=[hint.value for hint in HighDetailHint],
        help="High-detail hint to request (repeatable; defaults to the configured set)",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON instead of a human-friendly summary")
    parser.add_argument("--log-level", default=None, help="Logging level (default: UADETECT_LOG_LEVEL or WARNING)")
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        default=None,
        help="Log detection diagnostics (unrecognized input, high-detail failures) to stderr",
    )
    return parser


def parse_header_args(values: list[str]) -> list[tuple[str, str]]:
    headers: list[tuple[str, str]] = []
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"invalid header {raw!r}, expected 'Name: value'")
        headers.append((name.strip(), value.strip()))
    return headers


def build_environment(args: argparse.Namespace) -> ClientEnvironment | None:
    headers = parse_header_args(args.header)
    from_headers = environment_from_headers(headers) if headers else None
    user_agent = args.user_agent if args.user_agent is not None else (from_headers.user_agent if from_headers else None)
    hints = from_headers.hints if from_headers else None
    if user_agent is None and hints is None:
        return None
    return ClientEnvironment(
        user_agent=user_agent,
        max_touch_points=args.touch_points,
        hints=hints,
        is_brave=args.brave,
    )


def _print_json(data: DetectionResult | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(result: DetectionResult | Any) -> None:
    payload = result.to_dict() if hasattr(result, "to_dict") else result
    if not isinstance(payload, dict):
        print(payload)
        return

    browser = payload.get("browser") or {}
    engine = payload.get("renderingEngine") or {}
    device = payload.get("device") or {}

    print(f"[uadetect] Detection method: {payload.get('detectionMethod') or '-'}")
    if browser:
        full = f" (full {browser['fullVersion']})" if browser.get("fullVersion") else ""
        print(f"Browser: {browser.get('name')} {browser.get('version')}{full}")
    else:
        print("Browser: -")
    print(f"Rendering engine: {engine.get('name')} {engine.get('version')}" if engine else "Rendering engine: -")
    if device:
        print(f"Device: {device.get('device')} on {device.get('platform')} ({payload.get('deviceType') or '-'})")
        extras = {key: device[key] for key in ("architecture", "model", "platformVersion") if device.get(key)}
        if extras:
            print("Details: " + ", ".join(f"{k}={v}" for k, v in extras.items()))
    else:
        print("Device: -")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, diagnostics=args.diagnostics)

    try:
        environment = build_environment(args)
    except ValueError as exc:
        parser.error(str(exc))

    settings = load_detection_settings()
    options = UseOptions(
        high_detail=args.high_detail or settings.high_detail,
        hints=tuple(args.hint) if args.hint else None,
    )
    engine = DetectionEngine(environment, settings=settings)
    result = asyncio.run(engine.detect_async(options)) if options.high_detail else engine.detect()

    if args.json:
        _print_json(result)
    else:
        _pretty_print(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
