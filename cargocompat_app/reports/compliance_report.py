"""
Point-in-time compliance report: vessel layout, cargo manifest, compatibility
results and an overall status.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from ..services.compatibility_engine import AnalysisResult
    from ..services.tank_grid import TankGrid

STATUS_APPROVED = "APPROVED"
STATUS_ISSUES = "ISSUES FOUND"


@dataclass(slots=True)
class ManifestEntry:
    tank: str
    label: str
    chemical: str
    group: int | None
    entered: str = ""
    footnote: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tank": self.tank,
            "label": self.label,
            "chemical": self.chemical,
            "entered": self.entered,
            "group": self.group if self.group is not None else "Unknown",
            "footnote": self.footnote,
        }


@dataclass(slots=True)
class ComplianceReport:
    timestamp: datetime
    width: int
    length: int
    total_tanks: int
    manifest: List[ManifestEntry] = field(default_factory=list)
    results: Dict[str, Any] = field(default_factory=dict)
    problems: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def status(self) -> str:
        return STATUS_APPROVED if not self.problems else STATUS_ISSUES

    @property
    def default_filename(self) -> str:
        return f"cargo-compatibility-report-{self.timestamp.date().isoformat()}.json"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "vesselConfiguration": {"width": self.width, "length": self.length},
            "cargoManifest": [entry.to_dict() for entry in self.manifest],
            "compatibilityResults": {"results": self.results, "problems": self.problems},
            "summary": {
                "totalTanks": self.total_tanks,
                "loadedTanks": len(self.manifest),
                "compatibilityIssues": len(self.problems),
                "status": self.status,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def write_json(self, directory: Path) -> Path:
        """Write the report into `directory` under its default file name."""
        path = Path(directory) / self.default_filename
        path.write_text(self.to_json(), encoding="utf-8")
        return path


def build_compliance_report(
    grid: "TankGrid",
    result: "AnalysisResult | None",
    timestamp: datetime | None = None,
) -> ComplianceReport:
    """Snapshot the grid and its latest analysis into a report."""
    manifest = [
        ManifestEntry(
            tank=t.position.tank_id,
            label=t.position.label,
            chemical=t.chemical_name,
            group=t.group,
            entered=t.entered_name,
            footnote=t.record.footnote if t.record is not None else None,
        )
        for t in grid.loaded_tanks()
    ]
    analysis = result.to_dict() if result is not None else {"results": {}, "problems": []}
    return ComplianceReport(
        timestamp=timestamp or datetime.now(timezone.utc),
        width=grid.width,
        length=grid.length,
        total_tanks=len(grid),
        manifest=manifest,
        results=analysis["results"],
        problems=analysis["problems"],
    )
