"""
Reporting utilities (JSON/text/PDF) for the cargo compatibility tool.
"""

from .compliance_report import ComplianceReport, build_compliance_report
from .simple_text_report import build_compliance_summary_text
from .pdf_report import export_report_to_pdf

__all__ = [
    "ComplianceReport",
    "build_compliance_report",
    "build_compliance_summary_text",
    "export_report_to_pdf",
]
