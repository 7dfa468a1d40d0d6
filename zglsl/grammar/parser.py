# zglsl/grammar/parser.py
"""zglsl 식 파서 (1-토큰 lookahead 재귀 하강, 백트래킹 없음)

문법(낮은 우선순위 → 높은 우선순위):

    Expression := Term (('+' | '-') Term)*          # 좌결합
    Term       := Factor (('*' | '/') Factor)*      # 좌결합
    Factor     := '-' Factor
                | Base ('^' Factor)?                # 지수는 우결합
    Base       := Identifier '(' Expression ')' ['!']
                | '(' Expression ')' ['!']
                | Number
                | Variable

- `-z^2` 는 `Neg(z^2)` (단항 마이너스가 거듭제곱 전체를 감싼다)
- `2^3^2` 는 `2^(3^2)`
- `!` 는 괄호 그룹(또는 함수 호출) 바로 뒤에서만 인식
- 식 전체를 읽은 뒤 EndOfInput 이 아니면 ParseError
"""

from __future__ import annotations
from typing import List, Optional

from ..errors import ParseError
from ..lex import Token, TokenKind, tokenize
from .ast import BinOp, BinOpKind, Call, Neg, Node, Number, Var

_ADDITIVE = {
    TokenKind.PLUS: BinOpKind.ADD,
    TokenKind.MINUS: BinOpKind.SUB,
}

_MULTIPLICATIVE = {
    TokenKind.STAR: BinOpKind.MUL,
    TokenKind.SLASH: BinOpKind.DIV,
}


# --- 토큰 스트림(커서) ---
# 트리 깊이 상한 (괄호, 단항 마이너스, 지수, 이항 연산 연쇄)
MAX_NESTING = 100


class _TS:
    def __init__(self, toks: List[Token], src: str):
        self.toks = toks
        self.i = 0
        self.src = src
        self.depth = 0

    def la(self) -> Token:
        return self.toks[self.i]

    def error(self, expected: str, t: Optional[Token] = None) -> ParseError:
        t = t or self.la()
        got = str(t) if t.text else t.kind
        return ParseError(
            f"Expected {expected}, got {got}",
            expected=expected, actual=t.kind,
            source=self.src, pos=t.pos, lexeme=t.text,
        )

    def eat(self, kind: str) -> Token:
        t = self.la()
        if t.kind != kind:
            raise self.error(kind, t)
        if kind != TokenKind.EOF:
            self.i += 1
        return t

    def match(self, kind: str) -> Optional[Token]:
        if self.la().kind == kind:
            return self.eat(kind)
        return None

    def enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING:
            t = self.la()
            raise ParseError(
                f"expression nested too deeply (limit {MAX_NESTING})",
                actual=t.kind, source=self.src, pos=t.pos, lexeme=t.text,
            )

    def leave(self, n: int = 1) -> None:
        self.depth -= n


def _parse_expression(ts: _TS) -> Node:
    left = _parse_term(ts)
    chained = 0
    try:
        while ts.la().kind in _ADDITIVE:
            # 좌결합 연쇄도 트리 높이를 늘리므로 깊이로 센다
            ts.enter(); chained += 1
            op = _ADDITIVE[ts.eat(ts.la().kind).kind]
            left = BinOp(op, left, _parse_term(ts))
    finally:
        ts.leave(chained)
    return left


def _parse_term(ts: _TS) -> Node:
    left = _parse_factor(ts)
    chained = 0
    try:
        while ts.la().kind in _MULTIPLICATIVE:
            ts.enter(); chained += 1
            op = _MULTIPLICATIVE[ts.eat(ts.la().kind).kind]
            left = BinOp(op, left, _parse_factor(ts))
    finally:
        ts.leave(chained)
    return left


def _parse_factor(ts: _TS) -> Node:
    # 모든 재귀 경로(괄호/단항 마이너스/지수)가 여기를 지난다
    ts.enter()
    try:
        if ts.match(TokenKind.MINUS):
            return Neg(_parse_factor(ts))
        base = _parse_base(ts)
        if ts.match(TokenKind.CARET):
            # 오른쪽 피연산자를 다시 Factor 로 읽어 우결합
            return BinOp(BinOpKind.POW, base, _parse_factor(ts))
        return base
    finally:
        ts.leave()


def _parse_group(ts: _TS) -> Node:
    """'(' Expression ')'"""
    ts.eat(TokenKind.LPAREN)
    inner = _parse_expression(ts)
    ts.eat(TokenKind.RPAREN)
    return inner


def _maybe_factorial(ts: _TS, node: Node) -> Node:
    if ts.match(TokenKind.BANG):
        return Call("factorial", node)
    return node


def _parse_base(ts: _TS) -> Node:
    t = ts.la()
    if t.kind == TokenKind.IDENT:
        name = ts.eat(TokenKind.IDENT).text
        return _maybe_factorial(ts, Call(name, _parse_group(ts)))
    if t.kind == TokenKind.LPAREN:
        return _maybe_factorial(ts, _parse_group(ts))
    if t.kind == TokenKind.NUMBER:
        ts.eat(TokenKind.NUMBER)
        return Number(float(t.text), t.imaginary)
    if t.kind == TokenKind.VARIABLE:
        ts.eat(TokenKind.VARIABLE)
        return Var()
    raise ts.error("Base", t)


def parse_tokens(toks: List[Token], src: str = "") -> Node:
    """토큰 열 전체를 하나의 Expression 으로 파싱한다(남는 토큰은 오류)."""
    ts = _TS(toks, src)
    node = _parse_expression(ts)
    ts.eat(TokenKind.EOF)
    return node


def parse_expression(src: str) -> Node:
    return parse_tokens(tokenize(src), src)
