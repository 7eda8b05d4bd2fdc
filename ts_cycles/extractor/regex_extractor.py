"""TypeScript import extractor using regex patterns."""

from __future__ import annotations

import re
from pathlib import Path

from ts_cycles.extractor.base import BaseImportExtractor, unescape_js_string

_COMMENT_RE = re.compile(r"/\*.*?\*/|//[^\n]*", re.DOTALL)

_SPECIFIER_RE = re.compile(
    r"""(?:^|[;\s])(?:import|export)\s+(?:type\s+)?(?:[\w*{}\s,$]+?\s+from\s+)?['"]([^'"\n]+)['"]"""
    r"""|\brequire\s*\(\s*['"]([^'"\n]+)['"]\s*\)"""
    r"""|\bimport\s*\(\s*['"]([^'"\n]+)['"]\s*\)""",
    re.MULTILINE,
)


class RegexImportExtractor(BaseImportExtractor):
    """Line-oriented extractor; does not understand strings or templates."""

    def extract_source(self, source: str, file_path: Path) -> list[str]:
        code = _COMMENT_RE.sub(" ", source)
        specifiers: list[str] = []
        for m in _SPECIFIER_RE.finditer(code):
            specifiers.append(unescape_js_string(next(g for g in m.groups() if g is not None)))
        return specifiers
