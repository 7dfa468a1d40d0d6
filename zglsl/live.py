# zglsl/live.py
"""셰이더 템플릿 치환과 라이브 재컴파일.

에디터 텍스트가 마지막 폴링 값과 다를 때만 다시 변환하고,
변환에 실패하면 직전 프로그램을 그대로 유지한다.
"""

from __future__ import annotations
from typing import Callable, Optional

from .codegen.target import DEFAULT, GlslTarget
from .errors import TranslateError
from .pipeline import translate

DEFAULT_PLACEHOLDER = "vec2(0.00)"


def splice(template: str, snippet: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """template 안의 placeholder 를 모두 snippet 으로 바꾼다."""
    if not placeholder:
        raise ValueError("placeholder must not be empty")
    if placeholder not in template:
        raise ValueError(f"placeholder {placeholder!r} not found in shader template")
    return template.replace(placeholder, snippet)


class LiveRecompiler:
    """
    LiveRecompiler
    ==============
    프레임마다 `poll(text)` 를 호출하는 것을 전제로 한다.

    - text 가 직전 폴링 값과 같으면 아무것도 하지 않음
    - 변환 성공: 새 셰이더 소스를 `program` 에 저장하고 True
    - 변환 실패: `program` 유지, `last_error` 기록, on_error 호출, False
    """

    def __init__(self, template: str, *, placeholder: str = DEFAULT_PLACEHOLDER,
                 target: GlslTarget = DEFAULT,
                 on_error: Optional[Callable[[TranslateError], None]] = None):
        if placeholder not in template:
            raise ValueError(f"placeholder {placeholder!r} not found in shader template")
        self.template = template
        self.placeholder = placeholder
        self.target = target
        self.on_error = on_error
        self.program = template
        self.snippet: Optional[str] = None
        self.last_text: Optional[str] = None
        self.last_error: Optional[TranslateError] = None
        self.generation = 0

    def poll(self, text: str) -> bool:
        if text == self.last_text:
            return False
        self.last_text = text
        try:
            snippet = translate(text, self.target)
        except TranslateError as e:
            self.last_error = e
            if self.on_error is not None:
                self.on_error(e)
            return False
        self.last_error = None
        self.snippet = snippet
        self.program = splice(self.template, snippet, self.placeholder)
        self.generation += 1
        return True
