"""tsconfig loading and the compilerOptions.paths alias table."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from ts_cycles.errors import ConfigError

logger = logging.getLogger(__name__)


class AliasTable:
    """Maps alias patterns (``@app/*``) to ordered candidate path templates.

    Patterns and templates follow tsconfig ``paths`` semantics: at most one
    ``*`` per pattern, and its capture replaces the ``*`` of each template.
    Templates are resolved against ``base_dir``.
    """

    def __init__(self, entries: dict[str, list[str]] | None = None, base_dir: Path | None = None):
        self.entries: dict[str, list[str]] = dict(entries or {})
        self.base_dir = base_dir or Path(".")

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, pattern: str) -> bool:
        return pattern in self.entries

    def match(self, specifier: str) -> tuple[str, str] | None:
        """Return (pattern, wildcard capture) of the best matching pattern."""
        if specifier in self.entries:
            return specifier, ""

        best: tuple[str, str] | None = None
        best_prefix = -1
        for pattern in self.entries:
            if pattern.count("*") != 1:
                continue
            prefix, suffix = pattern.split("*")
            if (
                specifier.startswith(prefix)
                and specifier.endswith(suffix)
                and len(specifier) >= len(prefix) + len(suffix)
                and len(prefix) > best_prefix
            ):
                capture = specifier[len(prefix):len(specifier) - len(suffix)]
                best = (pattern, capture)
                best_prefix = len(prefix)
        return best

    def expand(self, specifier: str) -> list[Path] | None:
        """Candidate base paths for ``specifier``, or None if no alias matches."""
        matched = self.match(specifier)
        if matched is None:
            return None
        pattern, capture = matched
        return [
            self.base_dir / template.replace("*", capture, 1)
            for template in self.entries[pattern]
        ]


@dataclass
class ProjectConfig:
    """The parts of a tsconfig the analysis cares about."""
    tsconfig_path: Path
    project_root: Path
    base_dir: Path
    aliases: AliasTable = field(default_factory=AliasTable)


def load_project_config(tsconfig_path: Path) -> ProjectConfig:
    """Read a tsconfig file and build its alias table."""
    tsconfig_path = Path(tsconfig_path).resolve()
    project_root = tsconfig_path.parent

    try:
        raw = tsconfig_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {tsconfig_path}: {e.strerror or e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {tsconfig_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{tsconfig_path} must contain a JSON object")

    logger.debug("tsconfig %s: %s", tsconfig_path, data)

    options = data.get("compilerOptions")
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise ConfigError(f"compilerOptions in {tsconfig_path} must be an object")

    base_url = options.get("baseUrl")
    if base_url is not None and not isinstance(base_url, str):
        raise ConfigError(f"compilerOptions.baseUrl in {tsconfig_path} must be a string")
    base_dir = (project_root / base_url).resolve() if base_url else project_root

    return ProjectConfig(
        tsconfig_path=tsconfig_path,
        project_root=project_root,
        base_dir=base_dir,
        aliases=AliasTable(_parse_paths(options.get("paths"), tsconfig_path), base_dir),
    )


def _parse_paths(paths: object, tsconfig_path: Path) -> dict[str, list[str]]:
    if paths is None:
        return {}
    if not isinstance(paths, dict):
        raise ConfigError(f"compilerOptions.paths in {tsconfig_path} must be an object")

    entries: dict[str, list[str]] = {}
    for pattern, templates in paths.items():
        if not isinstance(templates, list) or not all(isinstance(t, str) for t in templates):
            raise ConfigError(
                f"compilerOptions.paths[{pattern!r}] in {tsconfig_path} must be a list of strings"
            )
        entries[pattern] = list(templates)
    return entries
