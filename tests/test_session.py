import pytest

import civicmatch
from civicmatch import Coordinate, StaticAuthorityDirectory, session
from civicmatch.config import DIRECTORY_URL_ENV


def test_get_matcher_requires_setup() -> None:
    with pytest.raises(RuntimeError):
        civicmatch.get_matcher()


def test_setup_defaults_to_seed_directory() -> None:
    matcher = civicmatch.setup()
    assert civicmatch.get_matcher() is matcher
    handles = matcher.get_authority_handles(
        Coordinate(17.3850, 78.4867), "Banjara Hills, Hyderabad, Telangana, 500034", "pothole"
    )
    assert handles == ["@GHMCOnline", "@HYDTP"]


def test_reload_swaps_snapshot(seed) -> None:
    matcher = civicmatch.setup()
    before = matcher.directory.list_authorities()

    assert civicmatch.reload(lambda: seed[:1]) == 1
    assert len(matcher.directory.list_authorities()) == 1
    assert len(before) == len(seed)

    # Without an explicit loader the setup source is used again.
    assert civicmatch.reload() == len(seed)


def test_reload_needs_snapshot_directory(seed_dir: StaticAuthorityDirectory) -> None:
    civicmatch.setup(directory=seed_dir)
    with pytest.raises(RuntimeError):
        civicmatch.reload()


def test_setup_from_env_without_url_uses_seed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DIRECTORY_URL_ENV, raising=False)
    matcher = session.setup_from_env()
    assert matcher.directory.count() == 15
