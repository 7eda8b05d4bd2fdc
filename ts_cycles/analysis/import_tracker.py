"""Memoized per-file import lists (the edge oracle of the import graph)."""

from __future__ import annotations

from pathlib import Path

from ts_cycles.analysis.resolver import ModuleResolver
from ts_cycles.extractor.base import BaseImportExtractor


class ImportTracker:
    """Extracts and resolves each file's imports at most once per run."""

    def __init__(self, resolver: ModuleResolver, extractor: BaseImportExtractor):
        self.resolver = resolver
        self.extractor = extractor
        self._imports: dict[Path, list[Path]] = {}

    @property
    def cached_files(self) -> int:
        return len(self._imports)

    def get_imports(self, file: Path) -> list[Path]:
        """Resolved imports of ``file``, de-duplicated in source order."""
        key = Path(file)
        if key in self._imports:
            return self._imports[key]

        real_file = key.resolve()
        resolved: dict[Path, None] = {}
        for specifier in self.extractor.extract(real_file):
            module = self.resolver.resolve(specifier, real_file)
            if module is not None:
                resolved[module] = None

        imports = list(resolved)
        self._imports[key] = imports
        return imports
