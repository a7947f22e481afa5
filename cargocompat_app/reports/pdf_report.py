"""
PDF export of a compliance report.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from ..models import TankPosition

if TYPE_CHECKING:
    from .compliance_report import ComplianceReport

_HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), "#4472C4"),
    ("TEXTCOLOR", (0, 0), (-1, 0), "white"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("BACKGROUND", (0, 1), (-1, -1), "#E7E6E6"),
    ("GRID", (0, 0), (-1, -1), 0.5, "gray"),
    ("FONTSIZE", (0, 0), (-1, -1), 9),
]


def _label(tank_id: str) -> str:
    return TankPosition.from_tank_id(tank_id).label


def export_report_to_pdf(filepath: Path, report: "ComplianceReport") -> None:
    """
    Generate a PDF with the cargo manifest and the compatibility issues.
    """
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2 * cm,
        leftMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontSize=16,
    )

    story = []
    story.append(Paragraph("Cargo Compatibility Report", title_style))
    story.append(Spacer(1, 0.5 * cm))
    story.append(Paragraph(f"Generated: {report.timestamp.isoformat()}", styles["Normal"]))
    story.append(Paragraph(
        f"Tank layout: {report.width} x {report.length} ({report.total_tanks} tanks)",
        styles["Normal"],
    ))
    story.append(Paragraph(f"Status: {report.status}", styles["Normal"]))
    story.append(Spacer(1, 0.5 * cm))

    story.append(Paragraph("Cargo Manifest", styles["Heading2"]))
    manifest = [["Tank", "Chemical", "Group"]]
    for entry in report.manifest:
        manifest.append([
            entry.label,
            entry.chemical,
            str(entry.group) if entry.group is not None else "Unknown",
        ])
    table = Table(manifest, colWidths=[2.5 * cm, 10 * cm, 3 * cm])
    table.setStyle(TableStyle(_HEADER_STYLE))
    story.append(table)
    story.append(Spacer(1, 0.5 * cm))

    story.append(Paragraph("Compatibility Issues", styles["Heading2"]))
    if not report.problems:
        story.append(Paragraph("No incompatible adjacent cargoes.", styles["Normal"]))
    else:
        issues = [["Tank", "Chemical", "Adjacent", "Chemical", "Result"]]
        for p in report.problems:
            issues.append([
                _label(p["tank1"]),
                p["chemical1"],
                _label(p["tank2"]),
                p["chemical2"],
                p["compatibility"],
            ])
        table = Table(issues, colWidths=[1.8 * cm, 5 * cm, 1.8 * cm, 5 * cm, 3.4 * cm])
        table.setStyle(TableStyle(_HEADER_STYLE))
        story.append(table)

    doc.build(story)
