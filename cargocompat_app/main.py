"""
Command line entry point for the cargo compatibility tool.

Loads the four reference workbooks, applies tank assignments given as
"<tank>=<chemical>" (e.g. "A1=Acetic acid"), runs the compatibility analysis
and writes the compliance report.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config.limits import DEFAULT_GRID_LENGTH, DEFAULT_GRID_WIDTH
from .config.settings import Settings, init_logging
from .reports import build_compliance_summary_text, export_report_to_pdf
from .services.reference_import import load_reference_data
from .services.stowage_service import StowageService
from .services.tank_grid import ChemicalNotFoundError, GridDimensionError

logger = logging.getLogger(__name__)


def parse_assignment(text: str) -> Tuple[int, int, str]:
    """Split "B3=Toluene" into (row 1, col 2, "Toluene")."""
    label, sep, chemical = text.partition("=")
    label = label.strip().upper()
    if not sep or len(label) < 2 or not label[0].isalpha() or not label[1:].isdigit():
        raise ValueError(f"Invalid assignment '{text}'. Use <tank>=<chemical>, e.g. A1=Toluene.")
    row = ord(label[0]) - ord("A")
    col = int(label[1:]) - 1
    return row, col, chemical.strip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cargocompat",
        description="Check adjacent cargo tanks for reactively incompatible chemicals.",
    )
    parser.add_argument("--chemical-index", required=True, type=Path)
    parser.add_argument("--compatibility-chart", required=True, type=Path)
    parser.add_argument("--compatible-exceptions", required=True, type=Path)
    parser.add_argument("--incompatible-exceptions", required=True, type=Path)
    parser.add_argument("--width", type=int, default=DEFAULT_GRID_WIDTH, help="tanks across")
    parser.add_argument("--length", type=int, default=DEFAULT_GRID_LENGTH, help="tank rows")
    parser.add_argument(
        "--assign",
        action="append",
        default=[],
        metavar="TANK=CHEMICAL",
        help="load a chemical into a tank; may be repeated",
    )
    parser.add_argument("--out-dir", type=Path, default=None, help="report directory")
    parser.add_argument("--pdf", action="store_true", help="also export the report as PDF")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one analysis; returns 0 when approved, 1 when issues are found, 2 on input errors."""
    args = _build_parser().parse_args(argv)

    settings = Settings.default()
    init_logging(settings)

    try:
        reference = load_reference_data(
            args.chemical_index,
            args.compatibility_chart,
            args.compatible_exceptions,
            args.incompatible_exceptions,
        )
        service = StowageService(reference, width=args.width, length=args.length)
        for text in args.assign:
            row, col, chemical = parse_assignment(text)
            service.assign(row, col, chemical)
    except (FileNotFoundError, ValueError, GridDimensionError, ChemicalNotFoundError, KeyError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    for message in reference.warnings():
        print(f"Warning: {message}", file=sys.stderr)

    report = service.build_report()
    print(build_compliance_summary_text(report))

    out_dir = args.out_dir or settings.report_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    json_path = report.write_json(out_dir)
    print(f"\nReport written to {json_path}")
    if args.pdf:
        pdf_path = json_path.with_suffix(".pdf")
        export_report_to_pdf(pdf_path, report)
        print(f"PDF written to {pdf_path}")

    return 0 if not report.problems else 1


if __name__ == "__main__":
    sys.exit(main())
