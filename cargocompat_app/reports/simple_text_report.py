"""
Simple text-based summary of a compliance report.
"""

from __future__ import annotations

from ..models import TankPosition
from .compliance_report import ComplianceReport


def _tank_label(tank_id: str) -> str:
    return TankPosition.from_tank_id(tank_id).label


def build_compliance_summary_text(report: ComplianceReport) -> str:
    lines: list[str] = []
    lines.append("Cargo Compatibility Report")
    lines.append(f"Generated: {report.timestamp.isoformat()}")
    lines.append(f"Tank layout: {report.width} x {report.length} ({report.total_tanks} tanks)")
    lines.append("")
    lines.append(f"Loaded tanks: {len(report.manifest)}")
    for entry in report.manifest:
        group = entry.group if entry.group is not None else "Unknown"
        lines.append(f"  {entry.label}: {entry.chemical} (Group {group})")
    lines.append("")
    lines.append(f"Compatibility issues: {len(report.problems)}")
    for p in report.problems:
        lines.append(
            f"  {_tank_label(p['tank1'])} {p['chemical1']} / "
            f"{_tank_label(p['tank2'])} {p['chemical2']}: {p['compatibility']}"
        )
    lines.append("")
    lines.append(f"Status: {report.status}")
    return "\n".join(lines)
