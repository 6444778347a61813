from lsprotocol.types import DiagnosticSeverity

from yisp_lsp.indexer import build_index
from yisp_lsp.server import SOURCE, collect_diagnostics


def messages(text):
    return [d.message for d in collect_diagnostics(build_index(text))]


def test_clean_buffer():
    assert collect_diagnostics(build_index("(define (f x) (add x 1))")) == []


def test_unclosed_paren():
    (diag,) = collect_diagnostics(build_index("(define (f x) (add x 1)"))
    assert diag.message == "1 unclosed '(' (closed implicitly at end of input)"
    assert diag.severity == DiagnosticSeverity.Warning
    assert diag.source == SOURCE


def test_stray_close_wins_over_balance():
    (diag,) = collect_diagnostics(build_index("(a))"))
    assert diag.message.startswith("Unmatched ')'")
    assert (diag.range.start.line, diag.range.start.character) == (0, 3)


def test_unterminated_string():
    assert "Unterminated string (closed implicitly at end of input)" in messages('(set s "abc)')


def test_glued_number():
    (diag,) = collect_diagnostics(build_index("(add 12abc 1)"))
    assert diag.message == "'12abc' reads as the number 12 followed by 'abc'"
    assert diag.severity == DiagnosticSeverity.Information
    assert (diag.range.start.character, diag.range.end.character) == (5, 10)
