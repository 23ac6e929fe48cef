"""Errors raised on the synchronous reconciliation path."""

from __future__ import annotations


class UnresolvableIdentityError(ValueError):
    """Raised when the claims carry no usable identifier for the authenticated subject."""

    def __init__(self, claim: str) -> None:
        super().__init__(
            f"No user identifier found in claim {claim!r}. Cannot identify user."
        )
        self.claim = claim
