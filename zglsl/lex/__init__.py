# zglsl/lex/__init__.py
"""zglsl 토크나이저 — 한 줄짜리 복소수 식을 토큰 열로 변환한다.

특징
----
- 공백은 스킵
- `+ - * / ^ ( )` 는 1글자 연산자 토큰
- `)` 바로 뒤에 `(` 가 오면(사이 공백 허용) **암시적 곱셈** Star 토큰을 끼워 넣는다
  예: `(z)(z)` → `( z ) * ( z )`
- `!` 는 팩토리얼 표시(파서가 gamma 호출로 만든다)
- `z`/`Z` 는 항상 유일한 변수 토큰
- 숫자/허수: 숫자, `.`, `i` 로 시작
  * `i` 단독 → 허수 1
  * 숫자와 소수점(최대 1개), 뒤에 `i` 가 붙으면 허수
  * `.5` → `0.5`, `5.` → `5.0` 로 정규화
- 문자열(letters)은 대소문자 무시로 키워드와 비교
  * `ln sin cos tan` → 함수 이름(Identifier)
  * `e pi` → 즉시 숫자 토큰으로 치환
  * 그 외 → LexError

API
---
- `Token(kind, text, pos, imaginary=False)`
- `TokenKind` — 토큰 종류 상수
- `tokenize(src) -> List[Token]` — 항상 EndOfInput 으로 끝난다
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

import regex as re

from ..errors import LexError


class TokenKind:
    NUMBER = "Number"
    VARIABLE = "Variable"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    CARET = "Caret"
    LPAREN = "LParen"
    RPAREN = "RParen"
    IDENT = "Identifier"
    BANG = "FactorialMark"
    EOF = "EndOfInput"


@dataclass(frozen=True)
class Token:
    kind: str
    text: str       # 정규화된 lexeme (implicit '*' 는 "*")
    pos: int        # 0-based 문자 오프셋
    imaginary: bool = False  # Number 에만 의미 있음

    def __str__(self) -> str:
        return f"{self.kind}({self.text!r})"


_SINGLE = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "!": TokenKind.BANG,
}

FUNCTION_KEYWORDS = ("ln", "sin", "cos", "tan")

CONSTANTS = {
    "e": math.e,
    "pi": math.pi,
}

# 숫자 본체(숫자/점 반복) + 선택적 허수 접미사
_NUMBER_RE = re.compile(r"(?P<body>[0-9.]*)(?P<imag>[iI]?)")
_WORD_RE = re.compile(r"[A-Za-z]+")


def _scan_number(src: str, i: int) -> tuple[Token, int]:
    m = _NUMBER_RE.match(src, i)
    body, imag = m.group("body"), bool(m.group("imag"))
    end = m.end()
    lexeme = src[i:end]

    if not body:
        if imag:
            return Token(TokenKind.NUMBER, "1", i, imaginary=True), end
        raise LexError(f"malformed numeric literal {lexeme!r}", source=src, pos=i, lexeme=lexeme)

    if body.count(".") > 1:
        raise LexError(f"malformed numeric literal {lexeme!r} (more than one '.')",
                       source=src, pos=i, lexeme=lexeme)
    if body.strip(".") == "":
        raise LexError(f"malformed numeric literal {lexeme!r} (no digits)",
                       source=src, pos=i, lexeme=lexeme)

    if body.startswith("."):
        body = "0" + body
    if body.endswith("."):
        body = body + "0"
    if not math.isfinite(float(body)):
        raise LexError(f"numeric literal {lexeme!r} out of range", source=src, pos=i, lexeme=lexeme)
    return Token(TokenKind.NUMBER, body, i, imaginary=imag), end


def _scan_word(src: str, i: int) -> tuple[Token, int]:
    m = _WORD_RE.match(src, i)
    word = m.group(0)
    key = word.lower()
    if key in FUNCTION_KEYWORDS:
        return Token(TokenKind.IDENT, key, i), m.end()
    if key in CONSTANTS:
        return Token(TokenKind.NUMBER, repr(CONSTANTS[key]), i), m.end()
    raise LexError(f"unknown identifier {word!r}", source=src, pos=i, lexeme=word)


def tokenize(src: str) -> List[Token]:
    """src 전체를 소비해 EndOfInput 으로 끝나는 토큰 리스트를 만든다."""
    toks: List[Token] = []
    i = 0
    n = len(src)
    while i < n:
        ch = src[i]
        if ch.isspace():
            i += 1
            continue

        kind = _SINGLE.get(ch)
        if kind is not None:
            # ")(" → ") * (" (암시적 곱셈)
            if kind == TokenKind.LPAREN and toks and toks[-1].kind == TokenKind.RPAREN:
                toks.append(Token(TokenKind.STAR, "*", i))
            toks.append(Token(kind, ch, i))
            i += 1
            continue

        if ch in "zZ":
            toks.append(Token(TokenKind.VARIABLE, "z", i))
            i += 1
            continue

        if ch.isascii() and (ch.isdigit() or ch in ".iI"):
            tok, i = _scan_number(src, i)
            toks.append(tok)
            continue

        if ch.isascii() and ch.isalpha():
            tok, i = _scan_word(src, i)
            toks.append(tok)
            continue

        raise LexError(f"unexpected character {ch!r}", source=src, pos=i, lexeme=ch)

    toks.append(Token(TokenKind.EOF, "", n))
    return toks
