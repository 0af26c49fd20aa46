"""Tests for the A06 vulnerable components group."""

import json
from pathlib import Path

import pytest

from warden.config import ReviewSettings
from warden.errors import ManifestError, ReviewError
from warden.models.finding import Category, Severity
from warden.probes.components import ComponentsGroup, load_dependencies, match_vulnerable


def _write_manifest(path, deps=None, dev=None):
    path.write_text(json.dumps({
        "name": "sastabazar",
        "dependencies": deps or {},
        "devDependencies": dev or {},
    }))


class TestManifest:
    def test_merges_sections(self, tmp_path):
        path = tmp_path / "package.json"
        _write_manifest(path, {"express": "^4.18.2"}, {"cors": "^2.8.5"})
        assert load_dependencies(path) == {"express": "^4.18.2", "cors": "^2.8.5"}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{not json")
        with pytest.raises(ManifestError):
            load_dependencies(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("[]")
        with pytest.raises(ManifestError):
            load_dependencies(path)

    def test_match_vulnerable(self):
        deps = {"express": "~4.16.4", "mongoose": "4.16.0", "left-pad": "4.16"}
        assert match_vulnerable(deps) == [("express", "~4.16.4")]


class TestComponentsGroup:
    async def test_vulnerable_express(self, make_ctx, settings):
        _write_manifest(Path(settings.review.manifest_path), {"express": "^4.16.0"})
        ctx = make_ctx()
        await ComponentsGroup().run(ctx)
        assert [(f.title, f.severity) for f in ctx.findings] == [
            ("Potentially Vulnerable Package: express", Severity.MEDIUM),
            ("Package Audit Required", Severity.LOW),
        ]
        assert {f.type for f in ctx.findings} == {Category.VULNERABLE_COMPONENTS}

    async def test_missing_default_manifest_keeps_audit_reminder(
        self, make_ctx, settings, tmp_path, monkeypatch,
    ):
        empty = tmp_path / "empty"
        empty.mkdir()
        monkeypatch.chdir(empty)
        cfg = settings.model_copy(update={"review": ReviewSettings()})
        ctx = make_ctx(cfg=cfg)
        await ComponentsGroup().run(ctx)
        assert [f.title for f in ctx.findings] == ["Package Audit Required"]
        assert ctx.findings.findings[0].is_advisory

    async def test_missing_configured_manifest_raises(self, make_ctx, settings, tmp_path):
        review = ReviewSettings(manifest_path=str(tmp_path / "typo" / "package.json"))
        ctx = make_ctx(cfg=settings.model_copy(update={"review": review}))
        with pytest.raises(ReviewError, match="does not exist"):
            await ComponentsGroup().run(ctx)
        assert list(ctx.findings) == []

    async def test_unreadable_manifest_raises(self, make_ctx, settings):
        Path(settings.review.manifest_path).write_text("{not json")
        with pytest.raises(ManifestError):
            await ComponentsGroup().run(make_ctx())

    async def test_no_requests_sent(self, make_ctx, fake_http):
        await ComponentsGroup().run(make_ctx(fake_http))
        assert fake_http.calls == []
