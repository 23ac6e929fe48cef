"""Claim-name configuration for the authentication provider."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default

DEFAULT_USERID_CLAIM = "vo_id"
DEFAULT_FIRST_NAME_CLAIM = "given_name"
DEFAULT_FAMILY_NAME_CLAIM = "family_name"
DEFAULT_ORG_CODE_CLAIM = "vo_orgcode"
DEFAULT_ORG_NAME_CLAIM = "vo_orgnaam"


@dataclass(frozen=True, slots=True)
class ClaimKeyConfig:
    """Names of the claims carrying each recognized attribute."""

    subject_id: str = DEFAULT_USERID_CLAIM
    first_name: str = DEFAULT_FIRST_NAME_CLAIM
    family_name: str = DEFAULT_FAMILY_NAME_CLAIM
    org_code: str = DEFAULT_ORG_CODE_CLAIM
    org_name: str = DEFAULT_ORG_NAME_CLAIM


def get_claim_key_config() -> ClaimKeyConfig:
    return ClaimKeyConfig(
        subject_id=env_or_default("AUTH_USERID_CLAIM", DEFAULT_USERID_CLAIM),
        first_name=env_or_default("AUTH_FIRST_NAME_CLAIM", DEFAULT_FIRST_NAME_CLAIM),
        family_name=env_or_default("AUTH_FAMILY_NAME_CLAIM", DEFAULT_FAMILY_NAME_CLAIM),
        org_code=env_or_default("AUTH_ORG_CODE_CLAIM", DEFAULT_ORG_CODE_CLAIM),
        org_name=env_or_default("AUTH_ORG_NAME_CLAIM", DEFAULT_ORG_NAME_CLAIM),
    )
