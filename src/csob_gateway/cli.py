"""
Command-line interface rendering a saved trace of gateway calls.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Sequence, Tuple

from .api import ConfigError, DiagnosticsContext, load_gateway_config
from .core.panel import DiagnosticsPanel


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _load_calls(path: str) -> List[Tuple[int, Any, Any]]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Calls file must contain a JSON list")

    calls: List[Tuple[int, Any, Any]] = []
    for item in data:
        if not isinstance(item, dict) or "id" not in item:
            raise ValueError(f"Call entries need an 'id' field, got {item!r}")
        calls.append((int(item["id"]), item.get("request") or {}, item.get("response")))
    return calls


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csob-diagnostics",
        description="Render the diagnostics panel for a trace of CSOB gateway calls",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing CSOB_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--calls",
        metavar="PATH",
        help="JSON file with a list of {id, request, response} objects",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print only the compact summary instead of the full report",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Do not load the gateway configuration",
    )
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    context = DiagnosticsContext()

    if not args.no_config:
        overrides = _collect_overrides(args.set or ())
        try:
            config = load_gateway_config(env_file=args.env_file, overrides=overrides)
        except ConfigError as exc:
            logging.error("Invalid configuration: %s", exc)
            return 1
        context.set_active_config(config)
        logging.info("Loaded configuration for merchant %s", config.merchant_id)

    if args.calls:
        try:
            calls = _load_calls(args.calls)
        except (OSError, TypeError, ValueError) as exc:
            logging.error("Unable to read calls from %s: %s", args.calls, exc)
            return 1
        for call_id, request, response in calls:
            context.record_call(call_id, request, response)
        logging.info("Recorded %d calls from %s", len(context), args.calls)

    panel = DiagnosticsPanel(context)
    print(panel.render_summary() if args.summary else panel.render_detail())
    return 0


def main() -> None:
    raise SystemExit(run_cli())
