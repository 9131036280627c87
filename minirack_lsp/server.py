from __future__ import annotations

"""
A minimal pygls-based Language Server for minirack.

Features:
- Text synchronization and document store
- Diagnostics: reader syntax errors, unmatched brackets
- Hover: primitive and special form signatures, locally defined symbols
- Completion: primitives, special forms and locally defined symbols
- Signature Help: for primitives and special forms
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SIGNATURE_HELP,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    ParameterInformation,
    Position,
    Range,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureInformation,
    SymbolKind,
    TextDocumentSyncKind,
)

from minirack_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    DocumentIndex,
    build_index,
    extract_callee_name,
    extract_word_at,
    get_line_prefix,
)

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class MinirackLanguageServer(LanguageServer):
    CMD_NAME = "minirack-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1", text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = MinirackLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    text = params.text_document.text or ""
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents.get(uri, DocumentState("", build_index(""))).text
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def _publish_diagnostics(uri: str):
    idx = ls.documents[uri].index
    diags: List[Diagnostic] = []

    for line, col in idx.unmatched:
        diags.append(
            Diagnostic(
                range=_mk_range(line, col),
                message="Unmatched bracket",
                severity=DiagnosticSeverity.Error,
                source=MinirackLanguageServer.CMD_NAME,
            )
        )

    # Reader errors not already explained by a stray bracket
    if idx.syntax_error and not idx.unmatched:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message=idx.syntax_error,
                severity=DiagnosticSeverity.Error,
                source=MinirackLanguageServer.CMD_NAME,
            )
        )

    logger.debug("publishing %d diagnostics for %s", len(diags), uri)
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word, _ = extract_word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None

    if word in SPECIAL_FORM_SIGNATURES:
        contents = f"{SPECIAL_FORM_SIGNATURES[word]} (special form)"
    elif word in state.index.symbols:
        # Local definitions shadow primitives of the same name
        sdef = state.index.symbols[word]
        contents = f"{word} - {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    elif word in BUILTIN_SIGNATURES:
        contents = BUILTIN_SIGNATURES[word]
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", "["]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []

    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))

    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    prefix = get_line_prefix(state.text, params.position.line, params.position.character)
    callee = extract_callee_name(prefix)
    if not callee:
        return None

    label = SPECIAL_FORM_SIGNATURES.get(callee) or BUILTIN_SIGNATURES.get(callee)
    if not label:
        return None

    # Parameters are the words after the name inside the outer parentheses
    params_list = label[1:-1].split()[1:]
    parameters = [ParameterInformation(label=p) for p in params_list]

    return SignatureHelp(
        signatures=[SignatureInformation(label=label, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []

    for name, sdef in state.index.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
