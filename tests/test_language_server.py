import importlib.util
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from lsprotocol.types import (
    DocumentSymbolParams,
    HoverParams,
    Position,
    SymbolKind,
    TextDocumentIdentifier,
)
from pygls.server import LanguageServer

SERVER_PATH = Path(__file__).resolve().parents[1] / "vscode" / "server" / "main.py"


def load_server_module():
    spec = importlib.util.spec_from_file_location("meow_language_server", SERVER_PATH)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


server_module = load_server_module()


@pytest.fixture
def index():
    return server_module.SymbolIndex()


def test_indexes_top_level_bindings(index, tmp_path: Path):
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "set add = function(a, b) { a + b };\n\n  scratch total = 1;\n")
    symbols = index.symbols(uri)
    assert [(s.name, s.kind, s.line, s.column, s.detail) for s in symbols] == [
        ("add", SymbolKind.Function, 0, 4, "function add(a, b)"),
        ("total", SymbolKind.Variable, 2, 10, "set total"),
    ]


def test_nested_bindings_are_not_indexed(index, tmp_path: Path):
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "set f = function() { set inner = 1; inner };\n")
    assert [s.name for s in index.symbols(uri)] == ["f"]


def test_indexes_included_file_libraries(index, tmp_path: Path):
    (tmp_path / "helpers.meow").write_text("set helper = 1;\n", encoding="utf-8")
    main = tmp_path / "main.meow"
    index.update(main.as_uri(), 'include "helpers";\ninclude "nya:furrball";\n')
    helper = index.lookup("helper")
    assert helper.uri == (tmp_path / "helpers.meow").resolve().as_uri()


def test_mutual_includes_terminate(index, tmp_path: Path):
    (tmp_path / "a.meow").write_text('include "b";\nset from_a = 1;\n', encoding="utf-8")
    (tmp_path / "b.meow").write_text('include "a";\nset from_b = 1;\n', encoding="utf-8")
    a = (tmp_path / "a.meow").resolve()
    index.update(a.as_uri(), a.read_text(encoding="utf-8"))
    assert index.lookup("from_a") is not None
    assert index.lookup("from_b") is not None


def test_missing_include_is_skipped(index, tmp_path: Path):
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, 'include "ghost";\nset x = 1;\n')
    assert [s.name for s in index.symbols(uri)] == ["x"]


def test_syntax_errors_keep_recovered_symbols(index, tmp_path: Path):
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "set = 1;\nset ok = 2;\n")
    assert [s.name for s in index.symbols(uri)] == ["ok"]


def test_malformed_number_keeps_previous_symbols(index, tmp_path: Path):
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "set x = 1;\n")
    index.update(uri, "set x = 1.2.3;\n")
    assert [s.name for s in index.symbols(uri)] == ["x"]


def test_reindex_replaces_symbols(index, tmp_path: Path):
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "set old = 1;\n")
    index.update(uri, "set new = 1;\n")
    assert index.lookup("old") is None
    assert index.lookup("new").uri == uri


def test_document_symbols(tmp_path: Path):
    ls = server_module.server
    ls.index.clear()
    uri = (tmp_path / "main.meow").as_uri()
    ls.index.update(uri, "set x = 1;\n")
    params = DocumentSymbolParams(text_document=TextDocumentIdentifier(uri=uri))
    result = server_module.document_symbols(ls, params)
    assert [(s.name, s.detail) for s in result] == [("x", "set x")]


def test_hover_shows_detail(tmp_path: Path):
    index = server_module.SymbolIndex()
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "set add = function(a, b) { a + b };\n")
    sym = index.lookup("add")
    fake = SimpleNamespace(symbol_at=lambda doc_uri, position: sym)
    params = HoverParams(
        text_document=TextDocumentIdentifier(uri=uri),
        position=Position(line=0, character=5),
    )
    hover = server_module.hover(fake, params)
    assert hover.contents.value == "function add(a, b)"


def test_definition_points_at_name(tmp_path: Path):
    index = server_module.SymbolIndex()
    uri = (tmp_path / "main.meow").as_uri()
    index.update(uri, "\nset add = 1;\n")
    fake = SimpleNamespace(symbol_at=lambda doc_uri, position: index.lookup("add"))
    params = SimpleNamespace(
        text_document=SimpleNamespace(uri=uri),
        position=Position(line=1, character=4),
    )
    location = server_module.definition(fake, params)
    assert location.uri == uri
    assert (location.range.start.line, location.range.start.character) == (1, 4)
    assert location.range.end.character == 7


def test_server_is_a_pygls_language_server():
    assert isinstance(server_module.server, LanguageServer)
