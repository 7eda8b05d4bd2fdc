"""Abstract base import extractor."""

from __future__ import annotations

import abc
import re
from pathlib import Path

from ts_cycles.errors import SourceReadError

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}
_LINE_CONTINUATIONS = {"\n", "\r", "\r\n", "\u2028", "\u2029"}


def unescape_js_string(body: str) -> str:
    """Decode the escape sequences of a JS string literal body."""
    return _ESCAPE_RE.sub(_decode_escape, body)


def _decode_escape(match: re.Match) -> str:
    escape = match.group(1)
    if escape.startswith("u{"):
        return chr(int(escape[2:-1], 16))
    if escape[0] in "ux" and len(escape) > 1:
        return chr(int(escape[1:], 16))
    if escape in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE_ESCAPES.get(escape, escape)


class BaseImportExtractor(abc.ABC):
    """Base class for import specifier extractors."""

    @abc.abstractmethod
    def extract_source(self, source: str, file_path: Path) -> list[str]:
        """Return the raw import specifiers referenced by ``source``."""

    def extract(self, file_path: Path) -> list[str]:
        """Read ``file_path`` and return its raw import specifiers in source order."""
        return self.extract_source(self._read_source(file_path), file_path)

    def _read_source(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise SourceReadError(path, e.strerror or str(e)) from e
