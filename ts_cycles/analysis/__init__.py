"""Import resolution and cycle detection."""

from __future__ import annotations

from ts_cycles.analysis.cycles import CycleDetector, find_cycles, strongly_connected_components
from ts_cycles.analysis.import_tracker import ImportTracker
from ts_cycles.analysis.resolver import ModuleResolver, first_existing, rejection_reason

__all__ = [
    "CycleDetector",
    "ImportTracker",
    "ModuleResolver",
    "find_cycles",
    "first_existing",
    "rejection_reason",
    "strongly_connected_components",
]
