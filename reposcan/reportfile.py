"""Persist scan reports as timestamped JSON files."""

from __future__ import annotations

import os

from .report import ScanReport
from .utils import write_to_file


def report_file_name(report: ScanReport) -> str:
    """File name derived from the report's generation time."""
    return f"ScanReport {report.generated_at.strftime('%Y-%m-%d %H-%M-%S')}.json"


def write_scan_report(report: ScanReport, dir_path: str) -> str:
    """Write report as JSON into dir_path and return the file path."""
    full_path = os.path.join(dir_path, report_file_name(report))
    write_to_file(report.to_json(), full_path)
    return full_path