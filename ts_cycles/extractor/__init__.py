"""Import extractor registry."""

from __future__ import annotations

from ts_cycles.models import ParserKind
from ts_cycles.extractor.base import BaseImportExtractor
from ts_cycles.extractor.regex_extractor import RegexImportExtractor
from ts_cycles.extractor.treesitter_extractor import TreeSitterImportExtractor

_EXTRACTORS: dict[ParserKind, type[BaseImportExtractor]] = {
    ParserKind.TREESITTER: TreeSitterImportExtractor,
    ParserKind.REGEX: RegexImportExtractor,
}


def get_extractor(kind: ParserKind = ParserKind.TREESITTER) -> BaseImportExtractor:
    """Return a fresh extractor for the given parser kind."""
    try:
        return _EXTRACTORS[kind]()
    except KeyError:
        raise ValueError(f"No extractor for parser: {kind}") from None


__all__ = [
    "BaseImportExtractor",
    "RegexImportExtractor",
    "TreeSitterImportExtractor",
    "get_extractor",
]
