"""Tests for the memoized import tracker."""

from pathlib import Path

import pytest

from ts_cycles.analysis import resolver as resolver_module
from ts_cycles.analysis.import_tracker import ImportTracker
from ts_cycles.analysis.resolver import ModuleResolver
from ts_cycles.errors import SourceReadError
from ts_cycles.extractor import RegexImportExtractor
from ts_cycles.extractor.base import BaseImportExtractor


class CountingExtractor(BaseImportExtractor):
    """Returns canned specifiers per file name and counts reads."""

    def __init__(self, specifiers: dict[str, list[str]]):
        self.specifiers = specifiers
        self.calls: list[Path] = []

    def extract_source(self, source: str, file_path: Path) -> list[str]:
        self.calls.append(file_path)
        return list(self.specifiers.get(file_path.name, []))


def _write(root: Path, rel: str, text: str = "export {};\n") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def root(tmp_path):
    return tmp_path.resolve()


def test_get_imports_resolves_in_source_order(root):
    a = _write(root, "a.ts")
    b = _write(root, "b.ts")
    c = _write(root, "c.tsx")
    extractor = CountingExtractor({"a.ts": ["./c", "react", "./b", "./missing"]})
    tracker = ImportTracker(ModuleResolver(root), extractor)

    assert tracker.get_imports(a) == [c, b]


def test_get_imports_is_memoized(root, monkeypatch):
    a = _write(root, "a.ts")
    _write(root, "b.ts")
    extractor = CountingExtractor({"a.ts": ["./b"]})
    tracker = ImportTracker(ModuleResolver(root), extractor)

    probes: list[Path] = []
    original = resolver_module.first_existing

    def counting_first_existing(base, suffixes=resolver_module.PROBE_SUFFIXES):
        probes.append(base)
        return original(base, suffixes)

    monkeypatch.setattr(resolver_module, "first_existing", counting_first_existing)

    first = tracker.get_imports(a)
    probe_count = len(probes)
    second = tracker.get_imports(a)

    assert first == second
    assert second is first
    assert len(extractor.calls) == 1
    assert len(probes) == probe_count
    assert tracker.cached_files == 1


def test_duplicate_imports_collapse(root):
    a = _write(root, "a.ts")
    b = _write(root, "b.ts")
    extractor = CountingExtractor({"a.ts": ["./b", "./b.ts", "./b"]})
    tracker = ImportTracker(ModuleResolver(root), extractor)
    assert tracker.get_imports(a) == [b]


def test_symlinked_targets_collapse(root):
    a = _write(root, "a.ts")
    real = _write(root, "real.ts")
    (root / "link.ts").symlink_to(real)
    extractor = CountingExtractor({"a.ts": ["./real", "./link"]})
    tracker = ImportTracker(ModuleResolver(root), extractor)
    assert tracker.get_imports(a) == [real]


def test_relative_imports_follow_the_real_importing_file(root):
    real_dir = root / "packages" / "core"
    importer = _write(root, "packages/core/entry.ts", "import { x } from './x';\n")
    x = _write(root, "packages/core/x.ts")
    (root / "linked").symlink_to(real_dir, target_is_directory=True)

    tracker = ImportTracker(ModuleResolver(root), RegexImportExtractor())
    assert tracker.get_imports(root / "linked" / "entry.ts") == [x]
    assert tracker.get_imports(importer) == [x]


def test_unreadable_source_is_fatal(root):
    tracker = ImportTracker(ModuleResolver(root), RegexImportExtractor())
    with pytest.raises(SourceReadError):
        tracker.get_imports(root / "does-not-exist.ts")
