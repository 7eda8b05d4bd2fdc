"""Split components into cycles and singletons, and render them."""

from __future__ import annotations

import os
from pathlib import Path

from ts_cycles.models import Component, CycleReport


def build_report(components: list[Component]) -> CycleReport:
    """Sort components into reported cycles and files in no cycle."""
    report = CycleReport()
    for component in components:
        if component.is_cycle:
            report.cycles.append(component.sorted_members())
        else:
            report.singletons.extend(component.members)

    report.cycles.sort(key=lambda members: str(members[0]))
    report.singletons.sort(key=str)
    return report


def format_report(report: CycleReport, project_root: Path) -> list[str]:
    """Render the report as text lines, paths relative to ``project_root``."""
    lines: list[str] = []
    for members in report.cycles:
        lines.append(f"Found strongly connected component of size {len(members)}")
        for member in members:
            lines.append(f"    {_relative(member, project_root)}")

    lines.append(f"Found {report.cycle_count} strongly connected components")
    lines.append(
        f"Files not part of a strongly connected components ({report.singleton_count})"
    )
    for path in report.singletons:
        lines.append(f"    {_relative(path, project_root)}")
    return lines


def report_to_dict(report: CycleReport, project_root: Path) -> dict:
    """JSON-serializable form of the report."""
    return {
        "project_root": str(project_root),
        "cycle_count": report.cycle_count,
        "singleton_count": report.singleton_count,
        "cycles": [
            [_relative(member, project_root) for member in members]
            for members in report.cycles
        ],
        "singletons": [_relative(path, project_root) for path in report.singletons],
    }


def _relative(path: Path, project_root: Path) -> str:
    return Path(os.path.relpath(path, project_root)).as_posix()
