"""Tests for FindingLog."""

import logging

from warden.core.findings import FindingLog
from warden.models.finding import Category, Finding


class TestFindingLog:
    def test_insertion_order(self):
        log = FindingLog()
        a = log.record(Finding.low(Category.LOGGING, "a"))
        b = log.record(Finding.high(Category.SSRF, "b"))
        assert log.findings == (a, b)
        assert list(log) == [a, b]
        assert len(log) == 2

    def test_vulnerabilities_view(self):
        log = FindingLog()
        log.record(Finding.medium(Category.LOGGING, "m"))
        crit = log.record(Finding.critical(Category.CRYPTOGRAPHIC, "c"))
        high = log.record(Finding.high(Category.SSRF, "h"))
        assert log.vulnerabilities == (crit, high)

    def test_findings_snapshot_is_immutable(self):
        log = FindingLog()
        snapshot = log.findings
        log.record(Finding.low(Category.LOGGING, "late"))
        assert snapshot == ()

    def test_log_levels(self, caplog):
        log = FindingLog()
        with caplog.at_level(logging.WARNING, logger="warden.core.findings"):
            log.record(Finding.high(Category.SSRF, "Potential SSRF"))
            log.record(Finding.low(Category.LOGGING, "Rate limit"))
        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert levels == [
            (logging.ERROR, "HIGH: Potential SSRF"),
            (logging.WARNING, "LOW: Rate limit"),
        ]
        assert caplog.records[0].finding["type"] == "ssrf"
