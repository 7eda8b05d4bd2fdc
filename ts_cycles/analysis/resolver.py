"""Import specifier resolution: raw specifier -> canonical on-disk module."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from ts_cycles.config import AliasTable
from ts_cycles.errors import DirectoryImportError
from ts_cycles.scanner import TEST_SUFFIXES

logger = logging.getLogger(__name__)

ASSET_EXTENSIONS = (
    ".css", ".scss", ".sass", ".less",
    ".svg", ".png", ".jpg", ".jpeg", ".gif", ".webp", ".ico",
    ".json",
)

# Compiled output; the matching source or .d.ts is reached through other edges.
COMPILED_EXTENSIONS = (".js", ".jsx")

_RELATIVE_PREFIXES = ("./", "../")
_RELATIVE_MARKERS = (".", "..")


def is_relative(specifier: str) -> bool:
    """True for `.`, `..` and specifiers starting with `./` or `../`."""
    return specifier in _RELATIVE_MARKERS or specifier.startswith(_RELATIVE_PREFIXES)


# Ordered (reason, predicate) pairs; the first matching rule rejects the specifier.
FILTER_RULES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("asset", lambda spec: spec.endswith(ASSET_EXTENSIONS)),
    ("test file", lambda spec: spec.endswith(TEST_SUFFIXES)),
    ("compiled output", lambda spec: spec.endswith(COMPILED_EXTENSIONS)),
    ("package", lambda spec: "/" not in spec and not is_relative(spec)),
)

# Probe order for a base path; "" is the literal path as written.
PROBE_SUFFIXES = (".ts", ".tsx", ".d.ts", "")
INDEX_SUFFIXES = (".ts", ".tsx", ".d.ts")


def rejection_reason(specifier: str) -> str | None:
    """Name of the first filter rule rejecting ``specifier``, if any."""
    for reason, rejects in FILTER_RULES:
        if rejects(specifier):
            return reason
    return None


def first_existing(base: Path, suffixes: tuple[str, ...] = PROBE_SUFFIXES) -> Path | None:
    """Return the first ``base + suffix`` that exists on disk."""
    for suffix in suffixes:
        candidate = Path(f"{base}{suffix}")
        if candidate.exists():
            return candidate
    return None


class ModuleResolver:
    """Resolve import specifiers found in project files to canonical module paths."""

    def __init__(
        self,
        project_root: Path,
        alias_table: AliasTable | None = None,
        *,
        apply_aliases: bool = False,
        base_dir: Path | None = None,
        probe_suffixes: tuple[str, ...] = PROBE_SUFFIXES,
    ):
        self.project_root = Path(project_root).resolve()
        self.alias_table = alias_table if alias_table is not None else AliasTable(base_dir=self.project_root)
        self.apply_aliases = apply_aliases
        self.base_dir = Path(base_dir).resolve() if base_dir else self.project_root
        self.probe_suffixes = probe_suffixes

    def resolve(self, specifier: str, importing_file: Path) -> Path | None:
        """Resolve ``specifier`` imported by ``importing_file``.

        Returns None for filtered and unresolved specifiers. Raises
        DirectoryImportError when the target is a directory with no index.
        """
        reason = rejection_reason(specifier)
        if reason is not None:
            logger.debug("Skipping %s import %r in %s", reason, specifier, self._display(importing_file))
            return None

        for base in self.candidate_bases(specifier, importing_file):
            module = self._probe(base, specifier, importing_file)
            if module is not None:
                return module

        logger.warning(
            "Unresolved import %r in %s", specifier, self._display(importing_file),
        )
        return None

    def candidate_bases(self, specifier: str, importing_file: Path) -> list[Path]:
        """Base paths to probe, in priority order."""
        # Path aliases never apply to relative or absolute specifiers.
        if is_relative(specifier):
            return [_normalize(Path(importing_file).parent / specifier)]
        if os.path.isabs(specifier):
            return [_normalize(Path(specifier))]

        if self.apply_aliases:
            expanded = self.alias_table.expand(specifier)
            if expanded is not None:
                return [_normalize(p) for p in expanded]
        return [_normalize(self.base_dir / specifier)]

    def _probe(self, base: Path, specifier: str, importing_file: Path) -> Path | None:
        candidate = first_existing(base, self.probe_suffixes)
        if candidate is None:
            return None

        # Follow symlinks before the directory check.
        module = candidate.resolve()
        if not module.is_dir():
            return module

        index = first_existing(module / "index", INDEX_SUFFIXES)
        if index is None:
            raise DirectoryImportError(
                specifier, self._display(importing_file), self._display(module),
            )
        logger.warning(
            "Barrel import %r (%s) in %s",
            specifier, self._display(module), self._display(importing_file),
        )
        return index.resolve()

    def _display(self, path: Path) -> str:
        return os.path.relpath(path, self.project_root)


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(path))
