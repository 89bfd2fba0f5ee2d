from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import MatcherConfig


@dataclass(frozen=True)
class ParsedAddress:
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None


def parse_address(address: Optional[str], config: Optional[MatcherConfig] = None) -> ParsedAddress:
    """Pull city, state and postal code out of a comma separated address.

    Expects reverse-geocoded strings such as
    ``"Casa Rio Gold Road, Kalyan, Maharashtra, 421204, India"``. The city is
    the token right before the state, or the first token when no known state
    is present. Missing parts come back as ``None``.
    """
    config = config or MatcherConfig()
    if not address:
        return ParsedAddress()

    parts = [part.strip() for part in address.split(",")]
    parts = [part for part in parts if part]
    if not parts:
        return ParsedAddress()

    pattern = config.postal_code_regex
    postal_code = next((p for p in parts if pattern.fullmatch(p)), None)

    state_index = next(
        (i for i, p in enumerate(parts) if p.lower() in config.region_names),
        -1,
    )
    state = parts[state_index] if state_index >= 0 else None
    city = parts[state_index - 1] if state_index > 0 else parts[0]

    return ParsedAddress(city=city, state=state, postal_code=postal_code)
