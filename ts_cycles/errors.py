"""Exceptions raised by ts-cycles."""

from __future__ import annotations

from pathlib import Path


class TsCyclesError(Exception):
    """Base class for fatal analysis errors."""


class ConfigError(TsCyclesError):
    """The project configuration manifest is missing or malformed."""


class SourceReadError(TsCyclesError):
    """A source file could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read source file {path}: {reason}")


class DirectoryImportError(TsCyclesError):
    """A directory was imported but contains no index file."""

    def __init__(self, specifier: str, importing_file: str, directory: str):
        self.specifier = specifier
        self.importing_file = importing_file
        self.directory = directory
        super().__init__(
            f"Importing a directory without an index file: {directory} "
            f"(import {specifier!r} in {importing_file})"
        )
