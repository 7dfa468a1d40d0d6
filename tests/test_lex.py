import math

import pytest

from zglsl.errors import LexError
from zglsl.lex import TokenKind, tokenize


def kinds(src):
    return [t.kind for t in tokenize(src)]


def test_operators_and_eof():
    assert kinds("+-*/^()!") == [
        TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH,
        TokenKind.CARET, TokenKind.LPAREN, TokenKind.RPAREN, TokenKind.BANG,
        TokenKind.EOF,
    ]


def test_empty_input_is_just_eof():
    toks = tokenize("   ")
    assert len(toks) == 1
    assert toks[0].kind == TokenKind.EOF
    assert toks[0].pos == 3


def test_variable_is_case_insensitive():
    toks = tokenize("z Z")
    assert [t.kind for t in toks[:2]] == [TokenKind.VARIABLE, TokenKind.VARIABLE]
    assert toks[1].text == "z"
    assert toks[1].pos == 2


@pytest.mark.parametrize("src", ["(z)(z)", "(z) (z)"])
def test_implicit_multiplication(src):
    assert kinds(src) == [
        TokenKind.LPAREN, TokenKind.VARIABLE, TokenKind.RPAREN,
        TokenKind.STAR,
        TokenKind.LPAREN, TokenKind.VARIABLE, TokenKind.RPAREN,
        TokenKind.EOF,
    ]


def test_no_implicit_multiplication_after_other_tokens():
    assert TokenKind.STAR not in kinds("z(z)")


@pytest.mark.parametrize("src, text, imag", [
    ("42", "42", False),
    ("3.14", "3.14", False),
    (".5", "0.5", False),
    ("5.", "5.0", False),
    ("2.5i", "2.5", True),
    ("2I", "2", True),
    ("i", "1", True),
])
def test_numbers(src, text, imag):
    tok = tokenize(src)[0]
    assert tok.kind == TokenKind.NUMBER
    assert tok.text == text
    assert tok.imaginary is imag


def test_consecutive_imaginary_units():
    toks = tokenize("ii")
    assert [t.text for t in toks[:2]] == ["1", "1"]
    assert all(t.imaginary for t in toks[:2])


@pytest.mark.parametrize("src, value", [("pi", math.pi), ("PI", math.pi), ("e", math.e)])
def test_constants_become_real_numbers(src, value):
    tok = tokenize(src)[0]
    assert tok.kind == TokenKind.NUMBER
    assert float(tok.text) == value
    assert not tok.imaginary


@pytest.mark.parametrize("src, name", [("ln", "ln"), ("SIN", "sin"), ("Cos", "cos"), ("tan", "tan")])
def test_function_names(src, name):
    tok = tokenize(src)[0]
    assert tok.kind == TokenKind.IDENT
    assert tok.text == name


@pytest.mark.parametrize("src, pos", [
    ("3..5", 0),
    ("1+1.2.3", 2),
    (".", 0),
    (".i", 0),
    ("w", 0),
    ("z+sinh(z)", 2),
    ("sinz", 0),
    ("z % 2", 2),
    ("z²", 1),
    ("9" * 400, 0),
])
def test_lex_errors(src, pos):
    with pytest.raises(LexError) as ei:
        tokenize(src)
    assert ei.value.pos == pos
    assert ei.value.source == src


def test_lex_error_details():
    with pytest.raises(LexError) as ei:
        tokenize("z + foo")
    err = ei.value
    assert err.lexeme == "foo"
    assert str(err).startswith("LexError:")
    assert err.caret() == "z + foo\n    ^"
    assert isinstance(err, SyntaxError)
