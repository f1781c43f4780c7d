"""
MeowScript Language Server.

Editor support for `.meow` files built on `pygls`. Documents are run through
the MeowScript lexer and parser and their top-level `set` bindings collected
into a `SymbolIndex`; file libraries reached through `include` are indexed
too, so a name defined in a library resolves from the file that includes it.

Served requests: go-to-definition, hover and document symbols.


File: main.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple
from urllib.parse import unquote, urlparse

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    DefinitionParams,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from meowscript.exceptions import MalformedNumberException
from meowscript.lexer import Lexer
from meowscript.library import SOURCE_SUFFIX
from meowscript.parser import Parser
from meowscript.stdlib import is_builtin_name

logger = logging.getLogger(__name__)


@dataclass
class MeowSymbol:
    """A top-level binding: where it lives and, for functions, its parameters."""

    name: str
    uri: str
    line: int
    column: int
    params: Optional[Tuple[str, ...]] = None

    @property
    def kind(self) -> SymbolKind:
        return SymbolKind.Function if self.params is not None else SymbolKind.Variable

    @property
    def detail(self) -> str:
        if self.params is None:
            return f"set {self.name}"
        return f"function {self.name}({', '.join(self.params)})"

    @property
    def range(self) -> Range:
        start = Position(line=self.line, character=self.column)
        end = Position(line=self.line, character=self.column + len(self.name))
        return Range(start=start, end=end)


def uri_to_path(uri: str) -> Path:
    return Path(unquote(urlparse(uri).path))


def _name_column(lines: List[str], line: int, name: str) -> int:
    # Line numbers from the parser are 1-based.
    if 0 < line <= len(lines):
        match = re.search(rf"\b{re.escape(name)}\b", lines[line - 1])
        if match:
            return match.start()
    return 0


class SymbolIndex:
    """
    Top-level bindings per document, with a by-name view across documents.
    """

    def __init__(self) -> None:
        self.by_uri: Dict[str, List[MeowSymbol]] = {}
        self.by_name: Dict[str, List[MeowSymbol]] = {}

    def __contains__(self, uri: str) -> bool:
        return uri in self.by_uri

    def update(self, uri: str, text: str) -> None:
        """
        Re-index ``text`` as the contents of ``uri``, following its includes.
        """
        # Claimed before parsing so that mutual includes terminate.
        self.by_uri.setdefault(uri, [])
        symbols, includes = self._scan(uri, text)
        self.by_uri[uri] = symbols
        for name in includes:
            self._follow_include(uri, name)
        self._rebuild()

    def symbols(self, uri: str) -> List[MeowSymbol]:
        return self.by_uri.get(uri, [])

    def lookup(self, name: str) -> Optional[MeowSymbol]:
        matches = self.by_name.get(name)
        return matches[0] if matches else None

    def clear(self) -> None:
        self.by_uri.clear()
        self.by_name.clear()

    def _scan(self, uri: str, text: str) -> Tuple[List[MeowSymbol], List[str]]:
        """
        Collect bindings and include names from the statements the parser
        recovered; syntax errors elsewhere in the document are ignored.
        """
        parser = Parser(Lexer(text), uri)
        try:
            program = parser.parse_program()
        except MalformedNumberException as e:
            logger.info("Keeping previous symbols for %s: %s", uri, e)
            return self.by_uri.get(uri, []), []

        lines = text.splitlines()
        symbols: List[MeowSymbol] = []
        includes: List[str] = []
        for stmt in program:
            if stmt[0] == "set":
                _, name, value, line = stmt
                params = tuple(value[1]) if value[0] == "function" else None
                column = _name_column(lines, line, name)
                symbols.append(MeowSymbol(name, uri, line - 1, column, params))
            elif stmt[0] == "include" and not is_builtin_name(stmt[1]):
                includes.append(stmt[1])
        return symbols, includes

    def _follow_include(self, from_uri: str, name: str) -> None:
        base = uri_to_path(from_uri).resolve().parent
        path = (base / f"{name}{SOURCE_SUFFIX}").resolve(strict=False)
        uri = path.as_uri()
        if uri in self:
            return
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.warning("Cannot index include %r from %s: %s", name, from_uri, e)
            return
        self.update(uri, text)

    def _rebuild(self) -> None:
        self.by_name.clear()
        for symbols in self.by_uri.values():
            for sym in symbols:
                self.by_name.setdefault(sym.name, []).append(sym)


def _workspace_sources(root: str) -> Iterator[Tuple[str, str]]:
    for path in Path(root).rglob(f"*{SOURCE_SUFFIX}"):
        try:
            yield path.as_uri(), path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Skipping %s: %s", path, e)


class MeowLanguageServer(LanguageServer):
    """pygls server answering MeowScript requests from a `SymbolIndex`."""

    def __init__(self) -> None:
        super().__init__("meow-ls", "v0.1.0")
        self.index = SymbolIndex()
        self.workspace_scanned = False

    def ensure_workspace_indexed(self) -> None:
        """Index every `.meow` file under the workspace root, once."""
        if self.workspace_scanned:
            return
        self.workspace_scanned = True
        root = self.workspace.root_path
        if root:
            for uri, text in _workspace_sources(root):
                self.index.update(uri, text)

    def symbol_at(self, uri: str, position: Position) -> Optional[MeowSymbol]:
        word = self.workspace.get_text_document(uri).word_at_position(position)
        if not word:
            return None
        self.ensure_workspace_indexed()
        return self.index.lookup(word)


server = MeowLanguageServer()


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MeowLanguageServer, params: DidOpenTextDocumentParams) -> None:
    ls.index.update(params.text_document.uri, params.text_document.text)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MeowLanguageServer, params: DidChangeTextDocumentParams) -> None:
    # pygls has already applied the edits to its workspace copy.
    uri = params.text_document.uri
    ls.index.update(uri, ls.workspace.get_text_document(uri).source)


@server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: MeowLanguageServer, params: DefinitionParams) -> Optional[Location]:
    sym = ls.symbol_at(params.text_document.uri, params.position)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.range)


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: MeowLanguageServer, params: HoverParams) -> Optional[Hover]:
    sym = ls.symbol_at(params.text_document.uri, params.position)
    if sym is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=sym.detail))


@server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: MeowLanguageServer, params: DocumentSymbolParams) -> List[DocumentSymbol]:
    return [
        DocumentSymbol(
            name=sym.name,
            kind=sym.kind,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in ls.index.symbols(params.text_document.uri)
    ]


def main() -> None:
    """Serve over stdin/stdout."""
    server.start_io()


if __name__ == "__main__":
    main()
