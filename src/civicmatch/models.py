from typing import FrozenSet, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import BASE32, IssueCategory, JurisdictionType, MatchReason


class ContactInfo(BaseModel):
    phone: Optional[str] = None
    toll_free: Optional[str] = Field(default=None, alias="tollFree")
    email: Optional[str] = None
    website: Optional[str] = None
    whatsapp: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Authority(BaseModel):
    id: str
    name: str
    jurisdiction_type: JurisdictionType = Field(alias="jurisdictionType")
    geohash_prefixes: FrozenSet[str] = Field(
        default_factory=frozenset, alias="geohashPrefixes"
    )
    issue_categories: FrozenSet[IssueCategory] = Field(
        default_factory=frozenset, alias="issueCategories"
    )
    priority_tier: Literal[1, 2, 3] = Field(default=1, alias="priorityTier")
    handle: Optional[str] = None
    name_local: Optional[str] = Field(default=None, alias="nameLocal")
    country: str = "India"
    state: Optional[str] = None
    city: Optional[str] = None
    contact: ContactInfo = Field(default_factory=ContactInfo)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("geohash_prefixes")
    @classmethod
    def _check_prefixes(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        for prefix in value:
            if not prefix or any(ch not in BASE32 for ch in prefix):
                raise ValueError(f"invalid geohash prefix {prefix!r}")
        return value

    @field_validator("handle")
    @classmethod
    def _normalize_handle(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        return value if value.startswith("@") else f"@{value}"

    def serves(self, category: IssueCategory) -> bool:
        return category in self.issue_categories


class MatchResult(BaseModel):
    authority_id: str
    confidence: float = Field(ge=0.0, le=1.0)
    match_reason: MatchReason
    handle: Optional[str] = None
    name: str = ""

    model_config = ConfigDict(frozen=True)
