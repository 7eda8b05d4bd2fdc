"""find-cycles orchestrator: config -> collect -> detect -> report."""

from __future__ import annotations

import logging
from pathlib import Path

from ts_cycles.analysis import find_cycles
from ts_cycles.config import load_project_config
from ts_cycles.extractor import get_extractor
from ts_cycles.models import AnalysisConfig, CycleReport
from ts_cycles.reporter import build_report
from ts_cycles.scanner import collect_source_files

logger = logging.getLogger(__name__)


def run_find_cycles(config: AnalysisConfig) -> tuple[CycleReport, Path]:
    """Run the full analysis. Returns the report and the project root."""
    project = load_project_config(config.tsconfig_path)
    files = collect_source_files(
        project.project_root,
        skip_dirs=config.skip_dirs,
        include_tests=config.include_tests,
    )
    logger.info("Collected %d source files under %s", len(files), project.project_root)

    components = find_cycles(
        project.project_root,
        files,
        project.aliases,
        apply_aliases=config.apply_aliases,
        base_dir=project.base_dir,
        extractor=get_extractor(config.parser),
    )
    return build_report(components), project.project_root
