from minirack_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    build_index,
    extract_callee_name,
    extract_word_at,
    get_line_prefix,
    position_from_offset,
)


SOURCE = """\
; helpers
(define limit 10)
(define square
  (lambda (x) (* x x)))
"""


def test_index_records_defines_with_kind_and_position():
    idx = build_index(SOURCE)
    assert set(idx.symbols) == {"limit", "square"}
    assert idx.symbols["limit"].kind == "var"
    assert (idx.symbols["limit"].line, idx.symbols["limit"].col) == (1, 8)
    assert idx.symbols["square"].kind == "function"
    assert idx.paren_balance == 0
    assert idx.unmatched == []
    assert idx.syntax_error is None


def test_unbalanced_buffer_is_still_indexed():
    idx = build_index("(define partial (lambda (x)\n")
    assert "partial" in idx.symbols
    assert idx.paren_balance == 2
    assert idx.unmatched == [(0, 0), (0, 16)]
    assert idx.syntax_error is not None


def test_stray_closer_position():
    idx = build_index("(+ 1 2))")
    assert idx.unmatched == [(0, 7)]
    assert idx.paren_balance == -1


def test_reader_errors_without_bracket_problems():
    idx = build_index("(foo #nope)")
    assert idx.unmatched == []
    assert "Unknown literal" in idx.syntax_error


def test_quoted_define_target_is_ignored():
    assert build_index("(define 'x 1)").symbols == {}


def test_signature_tables():
    assert BUILTIN_SIGNATURES["car"] == "(car lst)"
    assert "define" in SPECIAL_FORM_SIGNATURES
    assert "lambda" not in BUILTIN_SIGNATURES


def test_text_helpers():
    text = "(define x\n  (cons 1 lst))"
    assert position_from_offset(text, 12) == (1, 2)
    assert get_line_prefix(text, 1, 8) == "  (cons "
    assert get_line_prefix(text, 5, 0) == ""
    assert extract_word_at(text, 1, 4) == ("cons", 3)
    assert extract_word_at(text, 9, 0) == (None, 0)
    assert extract_callee_name("  (cons 1 ") == "cons"
    assert extract_callee_name("(map (lambda ") == "lambda"
    assert extract_callee_name("no call") is None
