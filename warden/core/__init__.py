from warden.core.findings import FindingLog
from warden.core.runner import SecurityReviewRunner

__all__ = ["FindingLog", "SecurityReviewRunner"]
