"""Tests for the A09 logging and monitoring group."""

from tests.helpers import SECURE_HEADERS, FakeHttp, response
from warden.models.finding import Category, Severity
from warden.probes.monitoring import SECURITY_EVENTS, MonitoringGroup


class TestMonitoringGroup:
    async def test_events_always_reported(self, make_ctx):
        http = FakeHttp({"/api/health": response(200, {"status": "ok"}, SECURE_HEADERS)})
        ctx = make_ctx(http)
        await MonitoringGroup().run(ctx)

        assert [f.title for f in ctx.findings] == [
            "Security Event Logging: Failed login attempt",
            "Security Event Logging: Unauthorized access attempt",
        ]
        assert all(f.is_advisory for f in ctx.findings)
        sent = [(m, p) for m, p, _ in http.calls[:len(SECURITY_EVENTS)]]
        assert sent == [("POST", "/api/auth/login"), ("GET", "/api/admin/users")]

    async def test_burst_size(self, make_ctx, fake_http):
        await MonitoringGroup().check_rate_limit(make_ctx(fake_http))
        assert len(fake_http.calls) == 5
        assert {p for _, p, _ in fake_http.calls} == {"/api/health"}

    async def test_missing_rate_limit_header(self, make_ctx):
        ctx = make_ctx(FakeHttp({"/api/health": response(200, {"status": "ok"})}))
        await MonitoringGroup().check_rate_limit(ctx)
        assert [(f.type, f.severity, f.title) for f in ctx.findings] == [
            (Category.LOGGING, Severity.LOW, "Rate Limiting Headers Missing"),
        ]

    async def test_all_requests_failed(self, make_ctx):
        ctx = make_ctx(FakeHttp({"/api/health": None}))
        await MonitoringGroup().check_rate_limit(ctx)
        assert len(ctx.findings) == 0
