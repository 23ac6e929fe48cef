# ruff: noqa: T201

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, cast

import httpx
from dotenv import load_dotenv

from claimsync.adapters.sparql import GraphStoreError
from claimsync.app import reconcile_login_claims
from claimsync.config import ConfigurationError, configure_logging
from claimsync.domain.reconciliation import UnresolvableIdentityError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from claimsync.domain.model import Claims

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile login claims with person and organization resources"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log SPARQL traffic and attribute drift",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Resolve or create the resources for one claim set",
    )
    reconcile.add_argument(
        "claims",
        nargs="?",
        type=str,
        default="-",
        help="Path to a JSON object of claims, or '-' for stdin (default: %(default)s)",
    )
    return parser.parse_args(list(argv))


def _load_claims(source: str) -> Claims:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read claims from {source}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Claims are not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Claims must be a JSON object")  # noqa: TRY004
    return cast("dict[str, object]", payload)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        claims = _load_claims(parsed_args.claims)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        resources = asyncio.run(reconcile_login_claims(claims))
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except (UnresolvableIdentityError, GraphStoreError, httpx.HTTPError):
        log.exception("Could not reconcile login claims")
        sys.exit(1)

    print(f"person: {resources.person_uri}")
    print(f"organization: {resources.organization_uri or 'none'}")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
