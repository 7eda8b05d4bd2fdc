"""Tree-sitter import extractor for TypeScript and TSX sources."""

from __future__ import annotations

from pathlib import Path

from tree_sitter_language_pack import get_parser

from ts_cycles.extractor.base import BaseImportExtractor, unescape_js_string

# File suffix -> tree-sitter grammar name
_GRAMMARS: dict[str, str] = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

_REQUIRE_CALLEES = {"require"}


class TreeSitterImportExtractor(BaseImportExtractor):
    """Collects specifiers from import/export statements, ``require`` and ``import()``."""

    def __init__(self):
        self._parser_cache: dict[str, object] = {}

    def extract_source(self, source: str, file_path: Path) -> list[str]:
        grammar_name = _GRAMMARS.get(file_path.suffix, "typescript")
        tree = self._get_parser(grammar_name).parse(source.encode("utf-8"))

        specifiers: list[str] = []
        # Explicit stack; deeply nested sources would overflow recursion.
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            spec = self._specifier_of(node)
            if spec is not None:
                specifiers.append(spec)
            stack.extend(reversed(node.children))
        return specifiers

    def _get_parser(self, grammar_name: str):
        if grammar_name not in self._parser_cache:
            self._parser_cache[grammar_name] = get_parser(grammar_name)
        return self._parser_cache[grammar_name]

    def _specifier_of(self, node) -> str | None:
        if node.type in ("import_statement", "export_statement"):
            source = node.child_by_field_name("source")
            if source is None:
                # import x = require("...")
                for child in node.named_children:
                    if child.type == "import_require_clause":
                        source = child.child_by_field_name("source")
                        break
            return _string_value(source)

        if node.type == "call_expression":
            callee = node.child_by_field_name("function")
            if callee is None:
                return None
            is_dynamic_import = callee.type == "import"
            is_require = callee.type == "identifier" and callee.text.decode("utf-8") in _REQUIRE_CALLEES
            if not (is_dynamic_import or is_require):
                return None
            args = node.child_by_field_name("arguments")
            if args is None or not args.named_children:
                return None
            return _string_value(args.named_children[0])

        return None


def _string_value(node) -> str | None:
    if node is None or node.type != "string":
        return None
    text = node.text.decode("utf-8")
    if len(text) < 2:
        return None
    return unescape_js_string(text[1:-1])
