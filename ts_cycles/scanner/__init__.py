"""Project source file collection."""

from __future__ import annotations

import fnmatch
from pathlib import Path

SOURCE_EXTENSIONS = (".ts", ".tsx")
DECLARATION_SUFFIX = ".d.ts"
TEST_SUFFIXES = (".spec.ts", ".spec.tsx", ".test.ts", ".test.tsx")

DEFAULT_SKIP_DIRS = [
    "node_modules", ".git", "dist", "build", "out", "coverage",
    ".next", ".turbo", ".cache",
]


def collect_source_files(
    root: Path,
    skip_dirs: list[str] | None = None,
    include_tests: bool = False,
) -> list[Path]:
    """Recursively collect the TypeScript sources under ``root``.

    Declaration files are never collected. Test files are dropped unless
    ``include_tests`` is set.
    """
    root = Path(root)
    patterns = DEFAULT_SKIP_DIRS if skip_dirs is None else skip_dirs
    files: list[Path] = []
    for path in sorted(root.rglob("*")):
        if _should_skip(path.relative_to(root), patterns):
            continue
        if not path.is_file():
            continue
        if not is_source_file(path.name, include_tests=include_tests):
            continue
        files.append(path)
    return files


def is_source_file(name: str, include_tests: bool = False) -> bool:
    if not name.endswith(SOURCE_EXTENSIONS) or name.endswith(DECLARATION_SUFFIX):
        return False
    if not include_tests and name.endswith(TEST_SUFFIXES):
        return False
    return True


def _should_skip(relative: Path, patterns: list[str]) -> bool:
    for part in relative.parts:
        for pattern in patterns:
            if fnmatch.fnmatch(part, pattern):
                return True
    return False


__all__ = [
    "DEFAULT_SKIP_DIRS",
    "SOURCE_EXTENSIONS",
    "TEST_SUFFIXES",
    "collect_source_files",
    "is_source_file",
]
