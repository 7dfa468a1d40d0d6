# zglsl/errors.py
"""zglsl 오류 타입.

- LexError   : 알 수 없는 문자 / 잘못된 숫자(허수) 리터럴 / 알 수 없는 식별자
- ParseError : 현재 토큰이 문법 생성규칙과 맞지 않음(입력 조기 종료, 남는 토큰 포함)

두 오류 모두 SyntaxError 계열이다. 코어는 오류를 출력하지 않으며
캐럿 렌더링(`caret()`)은 호출자가 필요할 때 사용한다.
"""

from __future__ import annotations
from typing import Optional


def _caret_at(src: str, pos: int) -> str:
    """입력 한 줄과 pos 위치의 캐럿."""
    pos = max(0, min(pos, len(src)))
    start = src.rfind("\n", 0, pos) + 1
    end = src.find("\n", pos)
    if end == -1:
        end = len(src)
    return f"{src[start:end]}\n{' ' * (pos - start)}^"


class TranslateError(SyntaxError):
    """Base class for every failure of the expression translator."""

    kind = "TranslateError"

    def __init__(self, detail: str, *, source: str = "", pos: int = 0, lexeme: str = ""):
        self.detail = detail
        self.source = source
        self.pos = pos
        self.lexeme = lexeme
        super().__init__(f"{self.kind}: {detail} at {pos}")

    def caret(self) -> str:
        return _caret_at(self.source, self.pos)


class LexError(TranslateError):
    kind = "LexError"


class ParseError(TranslateError):
    kind = "ParseError"

    def __init__(self, detail: str, *, expected: Optional[str] = None, actual: Optional[str] = None,
                 source: str = "", pos: int = 0, lexeme: str = ""):
        self.expected = expected
        self.actual = actual
        super().__init__(detail, source=source, pos=pos, lexeme=lexeme)
