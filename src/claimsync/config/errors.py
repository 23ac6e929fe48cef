"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """An environment setting holds a value claimsync cannot use.

    ``variable`` names the offending environment variable when there is one.
    """

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable
