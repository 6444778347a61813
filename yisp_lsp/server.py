from __future__ import annotations

"""
A minimal pygls-based Language Server for Yisp.

Features:
- Text synchronization and document store
- Diagnostics: unbalanced parens, unterminated strings, numbers glued to symbols
- Hover: builtin and special-form signatures, locally defined symbols
- Completion: builtins, special forms, locals
- Signature Help: for builtins and special forms
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
)

from yisp_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    DocumentIndex,
    build_index,
    extract_callee_name,
    extract_word_at,
    get_line_prefix,
    hover_text,
    signature_for,
)

logger = logging.getLogger(__name__)

SOURCE = "yisp-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class YispLanguageServer(LanguageServer):
    CMD_NAME = "yisp-ls"
    VERSION = "v0.1"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}


ls = YispLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update_document(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        # Full sync: the last change carries the whole text
        text = params.content_changes[-1].text
    else:
        state = ls.documents.get(uri)
        text = state.text if state else ""
    _update_document(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update_document(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("indexed %s: %d definitions", uri, len(idx.symbols))
    ls.publish_diagnostics(uri, collect_diagnostics(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def collect_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    if idx.stray_close is not None:
        diags.append(
            Diagnostic(
                range=_mk_range(*idx.stray_close),
                message="Unmatched ')' (read as an empty symbol at top level)",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    elif idx.paren_balance > 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message=f"{idx.paren_balance} unclosed '(' (closed implicitly at end of input)",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    if idx.unterminated_string is not None:
        diags.append(
            Diagnostic(
                range=_mk_range(*idx.unterminated_string),
                message="Unterminated string (closed implicitly at end of input)",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    for glued in idx.glued_numbers:
        diags.append(
            Diagnostic(
                range=_mk_range(glued.line, glued.col, len(glued.token)),
                message=f"'{glued.token}' reads as the number {glued.number} followed by '{glued.token[len(glued.number):]}'",
                severity=DiagnosticSeverity.Information,
                source=SOURCE,
            )
        )

    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None

    contents = hover_text(state.index, word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []

    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == 'function' else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))

    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    line_text = get_line_prefix(state.text, params.position.line, params.position.character)
    callee = extract_callee_name(line_text)
    if not callee:
        return None

    sig = signature_for(callee)
    if not sig:
        return None

    # "(name p1 p2)" -> parameters p1, p2
    params_list = sig.strip("()").split(" ")[1:]
    parameters = [ParameterInformation(label=p) for p in params_list]

    return SignatureHelp(
        signatures=[SignatureInformation(label=sig, parameters=parameters)],
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
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == 'function' else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
