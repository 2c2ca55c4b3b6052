"""
Minimal script that records gateway calls made through a requests session and
writes the diagnostics report to an HTML file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import requests

from csob_gateway import ConfigError, DiagnosticsPanel, create_diagnostics


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Record CSOB gateway calls")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing CSOB_* settings",
    )
    parser.add_argument(
        "--output",
        default="csob-diagnostics.html",
        help="Where to write the rendered report",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        context = create_diagnostics(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    session = requests.Session()
    session.hooks["response"].append(context.response_hook())

    echo_url = f"{context.config.api_url}/echo/{context.config.merchant_id}"
    try:
        session.get(echo_url, timeout=30)
    except requests.RequestException as exc:
        logging.error("Echo request failed: %s", exc)

    Path(args.output).write_text(DiagnosticsPanel(context).render_detail(), encoding="utf-8")
    total, errors = context.summary_counts()
    logging.info("Wrote %s (%d calls, %d errors)", args.output, total, errors)
    return 0


if __name__ == "__main__":
    sys.exit(main())
