"""Strongly connected components of the import graph (Tarjan's algorithm)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Hashable, Iterable

from ts_cycles.analysis.import_tracker import ImportTracker
from ts_cycles.analysis.resolver import ModuleResolver
from ts_cycles.config import AliasTable
from ts_cycles.extractor import get_extractor
from ts_cycles.extractor.base import BaseImportExtractor
from ts_cycles.models import Component

logger = logging.getLogger(__name__)


class _TarjanState:
    """Mutable state for one Tarjan run."""

    def __init__(self) -> None:
        self.counter = 0
        self.index: dict[Hashable, int] = {}
        self.low_link: dict[Hashable, int] = {}
        self.on_stack: set[Hashable] = set()
        self.stack: list[Hashable] = []
        self.self_loops: set[Hashable] = set()
        self.components: list[Component] = []

    def visit(self, node: Hashable) -> None:
        self.index[node] = self.low_link[node] = self.counter
        self.counter += 1
        self.stack.append(node)
        self.on_stack.add(node)

    def pop_component(self, root: Hashable) -> None:
        members = []
        while True:
            member = self.stack.pop()
            self.on_stack.discard(member)
            members.append(member)
            if member == root:
                break
        self.components.append(Component(
            members=frozenset(members),
            self_loop=len(members) == 1 and root in self.self_loops,
        ))


def strongly_connected_components(
    nodes: Iterable[Hashable],
    successors: Callable[[Hashable], Iterable[Hashable]],
) -> list[Component]:
    """Partition ``nodes`` into strongly connected components.

    ``successors`` is queried lazily, once per node. Successors outside
    ``nodes`` are ignored. Components come out in reverse topological order.
    """
    node_set = dict.fromkeys(nodes)
    state = _TarjanState()

    for start in node_set:
        if start in state.index:
            continue
        state.visit(start)
        work = [(start, iter(successors(start)))]

        while work:
            node, neighbors = work[-1]
            descended = False
            for succ in neighbors:
                if succ not in node_set:
                    continue
                if succ == node:
                    state.self_loops.add(node)
                if succ not in state.index:
                    state.visit(succ)
                    work.append((succ, iter(successors(succ))))
                    descended = True
                    break
                if succ in state.on_stack:
                    state.low_link[node] = min(state.low_link[node], state.index[succ])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                state.low_link[parent] = min(state.low_link[parent], state.low_link[node])
            if state.low_link[node] == state.index[node]:
                state.pop_component(node)

    return state.components


class CycleDetector:
    """Computes components over a file set using an ImportTracker as edge oracle."""

    def __init__(self, tracker: ImportTracker):
        self.tracker = tracker

    def find(self, files: Iterable[Path]) -> list[Component]:
        nodes = [Path(f).resolve() for f in files]
        components = strongly_connected_components(nodes, self.tracker.get_imports)
        logger.debug(
            "Analysed %d files (%d cached) into %d components",
            len(set(nodes)), self.tracker.cached_files, len(components),
        )
        return components


def find_cycles(
    project_root: Path,
    files: Iterable[Path],
    alias_table: AliasTable | None = None,
    *,
    apply_aliases: bool = False,
    base_dir: Path | None = None,
    extractor: BaseImportExtractor | None = None,
) -> list[Component]:
    """Strongly connected components of the import graph over ``files``."""
    resolver = ModuleResolver(
        project_root, alias_table, apply_aliases=apply_aliases, base_dir=base_dir,
    )
    tracker = ImportTracker(resolver, extractor or get_extractor())
    return CycleDetector(tracker).find(files)
