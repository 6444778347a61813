from __future__ import annotations

"""
Lightweight indexer for Yisp files without evaluating code.

We scan for top-level forms and build an index for:
- definitions: (define name ...), (define (name args...) ...), (set name ...)
- paren balance and unterminated strings
- numeric prefixes glued to symbol text (`1a` reads as 1 followed by a)

The scanner is tolerant: it never fails on partial/incomplete buffers. We only
extract enough structure to power LSP features (document symbols, hover,
completion, diagnostics).
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import re

from yisp.reader.parser import NUMBER_RE

# Same token boundaries as the reader; a string runs to the next quote or EOF
TOKEN_REGEX = re.compile(r"""\(|\)|'|"[^"]*"?|[^\s()']+""")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class GluedNumber:
    token: str
    number: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    glued_numbers: List[GluedNumber] = field(default_factory=list)
    paren_balance: int = 0
    stray_close: Optional[Tuple[int, int]] = None
    unterminated_string: Optional[Tuple[int, int]] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        yield m.group(0), m.start(), m.end()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _is_name(tok: str) -> bool:
    return tok not in ("(", ")", "'") and not tok.startswith('"')


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    def define(name_pos: int, kind: str) -> None:
        name, start, _ = tokens[name_pos]
        line, col = position_from_offset(text, start)
        idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)

    def tok_at(j: int) -> Optional[str]:
        return tokens[j][0] if j < len(tokens) else None

    for i, (tok, start, end) in enumerate(tokens):
        if tok == "(":
            idx.paren_balance += 1
            head = tok_at(i + 1)
            if head in ("define", "set"):
                target = tok_at(i + 2)
                if target is None:
                    continue
                if target == "(" and head == "define":
                    # (define (name args...) body)
                    if tok_at(i + 3) is not None and _is_name(tok_at(i + 3)):
                        define(i + 3, "function")
                elif _is_name(target):
                    # (define name (lambda ...)) is a function too
                    is_fn = tok_at(i + 3) == "(" and tok_at(i + 4) == "lambda"
                    define(i + 2, "function" if is_fn else "var")
        elif tok == ")":
            idx.paren_balance -= 1
            if idx.paren_balance < 0 and idx.stray_close is None:
                idx.stray_close = position_from_offset(text, start)
        elif tok.startswith('"'):
            if len(tok) == 1 or not tok.endswith('"'):
                idx.unterminated_string = position_from_offset(text, start)
        elif tok[0].isdigit() or tok[0] in "+-":
            m = NUMBER_RE.match(tok)
            if m and m.end() < len(tok):
                line, col = position_from_offset(text, start)
                idx.glued_numbers.append(GluedNumber(token=tok, number=m.group(0), line=line, col=col))

    return idx


# --- Text helpers (0-based line/character positions) ---

def get_line_prefix(text: str, line: int, character: int) -> str:
    # Return the text from start of line up to the position
    lines = text.splitlines(True)
    if line >= len(lines):
        return ""
    return lines[line][:character]


def extract_word_at(text: str, line: int, character: int) -> Optional[str]:
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    line_text = lines[line]
    stop = " \t()'\"\n\r"
    start = character
    while start > 0 and line_text[start - 1] not in stop:
        start -= 1
    end = character
    while end < len(line_text) and line_text[end] not in stop:
        end += 1
    word = line_text[start:end]
    return word or None


def extract_callee_name(prefix: str) -> Optional[str]:
    # find last '(' and take following token
    lp = prefix.rfind('(')
    if lp == -1:
        return None
    tail = prefix[lp + 1:].lstrip()
    m = TOKEN_REGEX.match(tail)
    if not m or not _is_name(m.group(0)):
        return None
    return m.group(0)


# Builtin signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "add": "(add a b)",
    "+": "(+ a b)",
    "sub": "(sub a b)",
    "-": "(- a b)",
    "mul": "(mul a b)",
    "*": "(* a b)",
    "div": "(div a b)",
    "/": "(/ a b)",
    "mod": "(mod a b)",
    "%": "(% a b)",
    "lt": "(lt a b)",
    "gt": "(gt a b)",
    "lte": "(lte a b)",
    "gte": "(gte a b)",
    "eq": "(eq a b)",
    "=": "(= a b)",
    "not": "(not n)",
    "cons": "(cons x y)",
    "car": "(car pair)",
    "cdr": "(cdr pair)",
    "nil?": "(nil? x)",
    "number?": "(number? x)",
    "symbol?": "(symbol? x)",
    "string?": "(string? x)",
    "list?": "(list? x)",
    "sexpr?": "(sexpr? x)",
    "sexp_to_bool": "(sexp_to_bool x)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote x)",
    "set": "(set name value)",
    "define": "(define name value)",
    "lambda": "(lambda (args) body)",
    "and": "(and a b)",
    "or": "(or a b)",
    "if": "(if test then else)",
    "cond": "(cond (test result) (else result))",
}


def signature_for(name: str) -> Optional[str]:
    return BUILTIN_SIGNATURES.get(name) or SPECIAL_FORM_SIGNATURES.get(name)


def hover_text(index: DocumentIndex, word: str) -> Optional[str]:
    if word in SPECIAL_FORM_SIGNATURES:
        return f"{SPECIAL_FORM_SIGNATURES[word]} (special form)"
    if word in BUILTIN_SIGNATURES:
        return f"{BUILTIN_SIGNATURES[word]} (builtin)"
    sdef = index.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"
    return None
