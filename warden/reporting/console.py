"""Final summary printed after a review."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from warden.models.finding import Severity
from warden.models.report import Report

SEV_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "green",
}


def print_summary(report: Report, console: Console | None = None) -> None:
    """Counts by severity, risk score, top findings and recommendations."""
    console = console or Console()
    summary = report.summary

    style = "red" if summary.requires_attention else "green"
    text = Text.from_markup(
        f"[bold]Security Review Summary[/]  {report.target}\n"
        f"Total Findings: [bold]{summary.total_findings}[/]  "
        f"Vulnerabilities: [bold]{summary.vulnerabilities}[/]  "
        f"Risk Score: [bold]{summary.risk_score:.2f}%[/]"
    )
    console.print(Panel(text, border_style=style))

    sev_table = Table(title="Severity Summary")
    sev_table.add_column("Severity")
    sev_table.add_column("Count", justify="right")
    for sev in Severity:
        s = SEV_STYLES[sev]
        sev_table.add_row(f"[{s}]{sev.label}[/{s}]", str(getattr(summary, sev.value)))
    console.print(sev_table)

    vulns = report.vulnerabilities
    if vulns:
        table = Table(title="Vulnerabilities")
        table.add_column("Severity", width=10)
        table.add_column("Category", style="dim")
        table.add_column("Title")
        for f in vulns[:20]:
            s = SEV_STYLES[f.severity]
            table.add_row(f"[{s}]{f.severity.label}[/{s}]", f.type.value, f.title)
        console.print(table)
        if len(vulns) > 20:
            console.print(f"  [dim]... and {len(vulns) - 20} more[/]")

    if report.recommendations:
        console.print("\n[bold]Security Recommendations:[/]")
        for rec in report.recommendations:
            color = "red" if rec.priority == "high" else "yellow"
            console.print(f"  - {rec.description} [{color}]({rec.priority})[/{color}]")
