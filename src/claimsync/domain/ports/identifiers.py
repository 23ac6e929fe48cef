"""Identifier and clock capabilities injected into the creator."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from uuid import uuid4

type IdFactory = Callable[[], str]
type Clock = Callable[[], datetime]


def new_id() -> str:
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(tz=UTC)
