from typing import List

import pytest

from civicmatch import Authority, StaticAuthorityDirectory, session
from civicmatch.seed import seed_authorities


@pytest.fixture
def seed() -> List[Authority]:
    return seed_authorities()


@pytest.fixture
def seed_dir(seed: List[Authority]) -> StaticAuthorityDirectory:
    return StaticAuthorityDirectory(seed)


@pytest.fixture(autouse=True)
def _reset_session(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(session, "_default_matcher", None)
    monkeypatch.setattr(session, "_default_loader", None)
