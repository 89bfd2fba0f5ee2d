from __future__ import annotations

import logging
from typing import Optional

from .client import DirectoryClient
from .config import MatcherConfig, RemoteSettings
from .directory import AuthorityDirectory, Loader, SnapshotDirectory
from .matcher import JurisdictionMatcher
from .seed import seed_authorities

logger = logging.getLogger(__name__)

_default_matcher: Optional[JurisdictionMatcher] = None
_default_loader: Optional[Loader] = None


def setup(
    directory: Optional[AuthorityDirectory] = None,
    config: Optional[MatcherConfig] = None,
    base_url: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: float = 10.0,
) -> JurisdictionMatcher:
    """Install the process-wide matcher.

    With no arguments the bundled seed directory is used. Passing
    ``base_url`` loads the directory from a remote configuration service
    instead; ``reload()`` fetches from the same source again.
    """
    global _default_matcher, _default_loader
    if directory is None:
        if base_url:
            loader: Loader = DirectoryClient(
                base_url=base_url, api_key=api_key, timeout=timeout
            )
        else:
            loader = seed_authorities
        snapshot_directory = SnapshotDirectory()
        snapshot_directory.load(loader)
        directory = snapshot_directory
        _default_loader = loader
    else:
        _default_loader = None
    _default_matcher = JurisdictionMatcher(directory, config=config)
    return _default_matcher


def setup_from_env(config: Optional[MatcherConfig] = None) -> JurisdictionMatcher:
    settings = RemoteSettings.from_env()
    if settings is None:
        return setup(config=config)
    return setup(
        config=config,
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout=settings.timeout,
    )


def get_matcher() -> JurisdictionMatcher:
    if _default_matcher is None:
        raise RuntimeError("civicmatch.setup(...) must be called before matching")
    return _default_matcher


def reload(loader: Optional[Loader] = None) -> int:
    """Republish the default directory from ``loader`` (or the configured source).

    Returns the number of authorities in the new snapshot. In-flight matches
    keep the snapshot they started with.
    """
    matcher = get_matcher()
    directory = matcher.directory
    if not isinstance(directory, SnapshotDirectory):
        raise RuntimeError("the configured directory does not support reloading")
    source = loader or _default_loader
    if source is None:
        raise RuntimeError("no loader configured for reload")
    snapshot = directory.load(source)
    return len(snapshot)
