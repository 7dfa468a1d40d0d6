# zglsl/__init__.py
"""zglsl — 복소수 식을 GLSL 스니펫으로 옮기는 작은 컴파일러.

    >>> from zglsl import translate
    >>> translate("z^2 + 1")
    'add(pow(z, vec2(2, 0)), vec2(1, 0))'
"""

from .errors import TranslateError, LexError, ParseError
from .codegen.target import GlslTarget, DEFAULT, LEGACY
from .pipeline import translate, try_translate, TranslateResult
from .live import splice, LiveRecompiler, DEFAULT_PLACEHOLDER
