"""Route a civic issue report to the authorities that should handle it.

Matching runs in tiers, each one only when the earlier tiers found too few
authorities:

1. geohash prefix (~150 km around the report) + category, always;
2. parsed city + category, when fewer than 3 matches;
3. parsed state + category, when fewer than 3 matches;
4. national authorities serving the category, when fewer than 2 matches.

An authority keeps the score of the first tier that found it. Results are
sorted by confidence and capped at five.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Union

from .address import parse_address
from .config import MatcherConfig
from .directory import AuthorityDirectory
from .geohash import encode
from .models import Authority, MatchResult
from .types import Coordinate, IssueCategory, JurisdictionType, MatchReason

logger = logging.getLogger(__name__)

CategoryLike = Union[IssueCategory, str]


def _normalize_handle(handle: str) -> str:
    handle = handle.strip()
    if not handle.startswith("@"):
        handle = f"@{handle}"
    return handle.lower()


def _same(a: Optional[str], b: str) -> bool:
    return a is not None and a.lower() == b.lower()


class JurisdictionMatcher:
    def __init__(
        self,
        directory: AuthorityDirectory,
        config: Optional[MatcherConfig] = None,
    ) -> None:
        self.directory = directory
        self.config = config or MatcherConfig()

    def find_authorities(
        self,
        coord: Coordinate,
        address: Optional[str],
        category: CategoryLike,
    ) -> List[MatchResult]:
        category = IssueCategory(category)
        config = self.config
        snapshot = self.directory.list_authorities()

        parsed = parse_address(address, config)
        logger.debug("Parsed address: %s", parsed)

        cell = encode(coord, config.geohash_precision)
        prefix = cell[: config.prefix_length]
        logger.debug("Geohash: %s prefix: %s", cell, prefix)

        matches: Dict[str, MatchResult] = {}
        self._run_tier(
            matches,
            snapshot,
            category,
            MatchReason.GEOHASH_CATEGORY,
            lambda a: any(p.startswith(prefix) for p in a.geohash_prefixes),
        )

        if parsed.city and len(matches) < config.regional_threshold:
            city = parsed.city
            self._run_tier(
                matches,
                snapshot,
                category,
                MatchReason.CITY_CATEGORY,
                lambda a: _same(a.city, city),
            )

        if parsed.state and len(matches) < config.regional_threshold:
            state = parsed.state
            self._run_tier(
                matches,
                snapshot,
                category,
                MatchReason.STATE_CATEGORY,
                lambda a: _same(a.state, state),
            )

        if len(matches) < config.national_threshold:
            self._run_tier(
                matches,
                snapshot,
                category,
                MatchReason.NATIONAL_FALLBACK,
                lambda a: a.jurisdiction_type is JurisdictionType.NATIONAL,
            )

        # sorted() is stable: equal scores keep tier, then directory, order.
        ranked = sorted(matches.values(), key=lambda m: m.confidence, reverse=True)
        ranked = ranked[: config.max_results]
        logger.debug(
            "Matched authorities: %s",
            [(m.authority_id, m.confidence, m.match_reason.value) for m in ranked],
        )
        return ranked

    def _run_tier(
        self,
        matches: Dict[str, MatchResult],
        snapshot: Sequence[Authority],
        category: IssueCategory,
        reason: MatchReason,
        predicate: Callable[[Authority], bool],
    ) -> None:
        weights = self.config.weights
        for authority in snapshot:
            if authority.id in matches:
                continue
            if not authority.serves(category) or not predicate(authority):
                continue
            matches[authority.id] = MatchResult(
                authority_id=authority.id,
                confidence=weights.for_tier(reason, authority.priority_tier),
                match_reason=reason,
                handle=authority.handle,
                name=authority.name,
            )

    def get_authority_handles(
        self,
        coord: Coordinate,
        address: Optional[str],
        category: CategoryLike,
    ) -> List[str]:
        return [
            match.handle
            for match in self.find_authorities(coord, address, category)
            if match.handle
        ]

    def get_authority_by_handle(self, handle: str) -> Optional[Authority]:
        wanted = _normalize_handle(handle)
        for authority in self.directory.list_authorities():
            if authority.handle and authority.handle.lower() == wanted:
                return authority
        return None

    def validate_authority_handle(self, handle: str) -> bool:
        return self.get_authority_by_handle(handle) is not None
