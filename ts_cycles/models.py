"""Data models for the ts-cycles analysis."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from ts_cycles.scanner import DEFAULT_SKIP_DIRS


class ParserKind(enum.Enum):
    TREESITTER = "treesitter"
    REGEX = "regex"


@dataclass(frozen=True)
class Component:
    """A strongly connected component of the import graph."""
    members: frozenset[Path]
    self_loop: bool = False  # sole member imports itself

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def is_cycle(self) -> bool:
        return self.size > 1 or self.self_loop

    def sorted_members(self) -> list[Path]:
        return sorted(self.members, key=str)


@dataclass
class CycleReport:
    """Components split into real cycles and files that are in no cycle."""
    cycles: list[list[Path]] = field(default_factory=list)
    singletons: list[Path] = field(default_factory=list)

    @property
    def cycle_count(self) -> int:
        return len(self.cycles)

    @property
    def singleton_count(self) -> int:
        return len(self.singletons)


@dataclass
class AnalysisConfig:
    """Configuration for a find-cycles run."""
    tsconfig_path: Path = field(default_factory=lambda: Path("tsconfig.json"))
    apply_aliases: bool = False
    parser: ParserKind = ParserKind.TREESITTER
    include_tests: bool = False
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
