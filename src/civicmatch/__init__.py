"""civicmatch: route civic issue reports to the responsible authorities."""

from .address import ParsedAddress, parse_address
from .client import DirectoryClient
from .config import MatcherConfig, RemoteSettings, TierWeights
from .directory import AuthorityDirectory, SnapshotDirectory, StaticAuthorityDirectory
from .distance import format_distance, haversine, sort_by_distance
from .exceptions import (
    AuthenticationError,
    CivicMatchError,
    ConnectionError,
    DirectoryError,
    GeohashError,
    InvalidCoordinateError,
    InvalidGeohashError,
    InvalidPrecisionError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from .geohash import Neighbors, adjacent, bounds, decode, encode, neighbors, precision_for_km
from .matcher import JurisdictionMatcher
from .models import Authority, ContactInfo, MatchResult
from .seed import seed_authorities, seed_directory
from .session import get_matcher, reload, setup, setup_from_env
from .types import (
    BoundingBox,
    Coordinate,
    DecodedGeohash,
    IssueCategory,
    JurisdictionType,
    MatchReason,
)

__all__ = [
    "AuthenticationError",
    "Authority",
    "AuthorityDirectory",
    "BoundingBox",
    "CivicMatchError",
    "ConnectionError",
    "ContactInfo",
    "Coordinate",
    "DecodedGeohash",
    "DirectoryClient",
    "DirectoryError",
    "GeohashError",
    "InvalidCoordinateError",
    "InvalidGeohashError",
    "InvalidPrecisionError",
    "IssueCategory",
    "JurisdictionMatcher",
    "JurisdictionType",
    "MatchReason",
    "MatchResult",
    "MatcherConfig",
    "Neighbors",
    "NotFoundError",
    "ParsedAddress",
    "RemoteSettings",
    "ServerError",
    "SnapshotDirectory",
    "StaticAuthorityDirectory",
    "TierWeights",
    "ValidationError",
    "adjacent",
    "bounds",
    "decode",
    "encode",
    "format_distance",
    "get_matcher",
    "haversine",
    "neighbors",
    "parse_address",
    "precision_for_km",
    "reload",
    "seed_authorities",
    "seed_directory",
    "setup",
    "setup_from_env",
    "sort_by_distance",
]
