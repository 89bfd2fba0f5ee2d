"""Ranking policy and parsing configuration for the jurisdiction matcher."""

from __future__ import annotations

import os
import re
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import MatchReason

DIRECTORY_URL_ENV = "CIVICMATCH_DIRECTORY_URL"
API_KEY_ENV = "CIVICMATCH_API_KEY"
TIMEOUT_ENV = "CIVICMATCH_TIMEOUT"

DEFAULT_REGION_NAMES: Tuple[str, ...] = (
    "maharashtra",
    "karnataka",
    "delhi",
    "tamil nadu",
    "telangana",
    "andhra pradesh",
    "gujarat",
    "rajasthan",
    "west bengal",
    "madhya pradesh",
    "uttar pradesh",
    "kerala",
    "punjab",
    "haryana",
)


class TierWeights(BaseModel):
    """Confidence assigned per match tier and authority priority.

    "primary" applies to priority tier 1, "secondary" to tiers 2 and 3.
    """

    geohash_primary: float = Field(default=0.9, ge=0.0, le=1.0)
    geohash_secondary: float = Field(default=0.7, ge=0.0, le=1.0)
    city_primary: float = Field(default=0.8, ge=0.0, le=1.0)
    city_secondary: float = Field(default=0.6, ge=0.0, le=1.0)
    state_primary: float = Field(default=0.6, ge=0.0, le=1.0)
    state_secondary: float = Field(default=0.4, ge=0.0, le=1.0)
    national: float = Field(default=0.3, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)

    def for_tier(self, reason: MatchReason, priority_tier: int) -> float:
        if reason is MatchReason.NATIONAL_FALLBACK:
            return self.national
        primary = priority_tier == 1
        if reason is MatchReason.GEOHASH_CATEGORY:
            return self.geohash_primary if primary else self.geohash_secondary
        if reason is MatchReason.CITY_CATEGORY:
            return self.city_primary if primary else self.city_secondary
        return self.state_primary if primary else self.state_secondary


class MatcherConfig(BaseModel):
    geohash_precision: int = Field(default=4, ge=1, le=12)
    prefix_length: int = Field(default=3, ge=1, le=12)
    regional_threshold: int = Field(default=3, ge=0)
    national_threshold: int = Field(default=2, ge=0)
    max_results: int = Field(default=5, ge=1)
    region_names: Tuple[str, ...] = DEFAULT_REGION_NAMES
    postal_code_pattern: str = r"^\d{6}$"
    weights: TierWeights = Field(default_factory=TierWeights)

    model_config = ConfigDict(frozen=True)

    @field_validator("region_names")
    @classmethod
    def _lower_regions(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(name.strip().lower() for name in value if name.strip())

    @field_validator("postal_code_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid postal code pattern: {exc}") from exc
        return value

    @property
    def postal_code_regex(self) -> "re.Pattern[str]":
        return re.compile(self.postal_code_pattern)


class RemoteSettings(BaseModel):
    base_url: str
    api_key: Optional[str] = None
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> Optional["RemoteSettings"]:
        base_url = os.getenv(DIRECTORY_URL_ENV)
        if not base_url:
            return None
        return cls(
            base_url=base_url,
            api_key=os.getenv(API_KEY_ENV) or None,
            timeout=float(os.getenv(TIMEOUT_ENV, "10.0")),
        )
