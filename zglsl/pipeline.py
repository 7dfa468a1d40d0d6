# zglsl/pipeline.py
"""translate: 텍스트 → 토큰 → AST → GLSL 문자열.

호출 간 상태가 없으므로 여러 호출자가 동시에 불러도 안전하다.
캐싱/디바운싱은 호출자(예: live.LiveRecompiler)의 몫이다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .codegen.emit_glsl import emit_glsl_to_string
from .codegen.target import DEFAULT, GlslTarget
from .errors import TranslateError
from .grammar.parser import parse_tokens
from .lex import tokenize


@dataclass(frozen=True)
class TranslateResult:
    ok: bool
    code: Optional[str] = None
    error: Optional[TranslateError] = None


def translate(expression: str, target: GlslTarget = DEFAULT) -> str:
    """식 하나를 GLSL 스니펫으로 변환한다. 실패 시 LexError/ParseError."""
    toks = tokenize(expression)
    ast = parse_tokens(toks, expression)
    return emit_glsl_to_string(ast, target)


def try_translate(expression: str, target: GlslTarget = DEFAULT) -> TranslateResult:
    """translate 의 태그된 결과 버전. 부분 결과는 절대 돌려주지 않는다."""
    try:
        return TranslateResult(ok=True, code=translate(expression, target))
    except TranslateError as e:
        return TranslateResult(ok=False, error=e)
