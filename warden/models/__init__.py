"""Data models — findings and review reports."""

from warden.models.finding import Category, Finding, Severity
from warden.models.report import Recommendation, Report, Summary

__all__ = ["Category", "Finding", "Recommendation", "Report", "Severity", "Summary"]
