"""Shared test fixtures."""

import pytest

from tests.helpers import STRONG_SECRET, FakeHttp, secure_routes
from warden.config import JwtSettings, ReviewSettings, Settings, UrlSettings
from warden.core.findings import FindingLog
from warden.probes.base import ReviewContext


@pytest.fixture
def settings(tmp_path):
    manifest = tmp_path / "package.json"
    manifest.write_text('{"dependencies": {}}')
    return Settings(
        urls=UrlSettings(server="http://shop.test"),
        jwt=JwtSettings(secret=STRONG_SECRET),
        review=ReviewSettings(manifest_path=str(manifest)),
        environment="development",
        reports_dir=tmp_path / "reports",
    )


@pytest.fixture
def fake_http():
    return FakeHttp(secure_routes())


@pytest.fixture
def make_ctx(settings):
    """Factory for a ReviewContext over a FakeHttp."""

    def _make(http=None, cfg=None):
        return ReviewContext(
            settings=cfg or settings,
            http=http or FakeHttp(secure_routes()),
            findings=FindingLog(),
        )

    return _make
