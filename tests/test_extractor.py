"""Tests for import specifier extraction."""

from pathlib import Path

import pytest

from ts_cycles.extractor import (
    RegexImportExtractor,
    TreeSitterImportExtractor,
    get_extractor,
)
from ts_cycles.extractor.base import unescape_js_string
from ts_cycles.models import ParserKind

TS_SOURCE = """\
import { Injectable } from '@angular/core';
import type { Config } from "./config";
import * as utils from '../shared/utils';
import Default, { named } from './default';
import './polyfills';
import legacy = require('./legacy-module');
export { helper } from './helpers';
export * from './reexported';
export const local = 1;

// import { commented } from './commented-out';
/* import { blocked } from './block-commented'; */

const lazy = () => import('./lazy-chunk');
const cjs = require('./cjs-module');

export class Service {
  load() {
    return import("./nested/dynamic");
  }
}
"""

EXPECTED = [
    "@angular/core",
    "./config",
    "../shared/utils",
    "./default",
    "./polyfills",
    "./legacy-module",
    "./helpers",
    "./reexported",
    "./lazy-chunk",
    "./cjs-module",
    "./nested/dynamic",
]

TSX_SOURCE = """\
import React from 'react';
import { Button } from './Button';

export const App = () => <div className="app"><Button label="go" /></div>;
"""


class TestTreeSitterExtractor:
    @pytest.fixture
    def extractor(self):
        return TreeSitterImportExtractor()

    def test_all_import_forms(self, extractor):
        assert extractor.extract_source(TS_SOURCE, Path("service.ts")) == EXPECTED

    def test_tsx(self, extractor):
        assert extractor.extract_source(TSX_SOURCE, Path("App.tsx")) == ["react", "./Button"]

    def test_strings_mentioning_imports_are_ignored(self, extractor):
        source = "const s = \"import x from './fake'\";\nconst t = `require('./also-fake')`;\n"
        assert extractor.extract_source(source, Path("strings.ts")) == []

    def test_non_literal_dynamic_import_is_ignored(self, extractor):
        source = "const name = './x';\nimport(name);\nrequire(`./${name}`);\n"
        assert extractor.extract_source(source, Path("dyn.ts")) == []

    def test_escaped_specifiers_are_decoded(self, extractor):
        source = (
            "import { q } from './it\\'s';\n"
            "import { u } from \"./caf\\u00e9\";\n"
            "const x = require('./\\x41pi');\n"
        )
        assert extractor.extract_source(source, Path("esc.ts")) == ["./it's", "./caf\u00e9", "./Api"]

    def test_extract_reads_file(self, extractor, tmp_path):
        path = tmp_path / "file.ts"
        path.write_text("import { a } from './a';\n", encoding="utf-8")
        assert extractor.extract(path) == ["./a"]


class TestRegexExtractor:
    @pytest.fixture
    def extractor(self):
        return RegexImportExtractor()

    def test_all_import_forms(self, extractor):
        assert extractor.extract_source(TS_SOURCE, Path("service.ts")) == EXPECTED

    def test_multiline_named_import(self, extractor):
        source = "import {\n  a,\n  b as c,\n} from './many';\n"
        assert extractor.extract_source(source, Path("m.ts")) == ["./many"]

    def test_unicode_escape_is_decoded(self, extractor):
        source = "import { u } from \"./caf\\u00e9\";\n"
        assert extractor.extract_source(source, Path("u.ts")) == ["./caf\u00e9"]


def test_get_extractor():
    assert isinstance(get_extractor(), TreeSitterImportExtractor)
    assert isinstance(get_extractor(ParserKind.REGEX), RegexImportExtractor)
    assert get_extractor() is not get_extractor()


@pytest.mark.parametrize("body, expected", [
    ("./plain", "./plain"),
    ("./it\\'s", "./it's"),
    ("./caf\\u00e9", "./café"),
    ("./\\u{1F600}", "./\U0001F600"),
    ("./\\x41pi", "./Api"),
    ("./a\\\\b", "./a\\b"),
    ("./line\\\ncontinued", "./linecontinued"),
])
def test_unescape_js_string(body, expected):
    assert unescape_js_string(body) == expected
