"""JSON report renderer."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from warden.models.report import Report


class JsonRenderer:
    """Renders a review report as JSON."""

    def render(self, report: Report, output_dir: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = output_dir / f"report_{timestamp}.json"
        n = 1
        while output_path.exists():
            output_path = output_dir / f"report_{timestamp}_{n}.json"
            n += 1

        data = report.model_dump(mode="json")
        if report.duration is not None:
            data["duration"] = round(report.duration, 3)
        data["vulnerabilities"] = [f.title for f in report.vulnerabilities]

        output_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return output_path
