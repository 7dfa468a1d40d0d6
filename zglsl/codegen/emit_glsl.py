# zglsl/codegen/emit_glsl.py
"""GLSL 식 방출 (AST → 한 줄 문자열).

노드별 규칙
-----------
- Number(v)       → vec2(v, 0)
- Number(v, imag) → vec2(0, v)
- Var             → z
- Neg(x)          → mul(x, vec2(-1, 0))
- BinOp(op, l, r) → add/sub/mul/div/pow(l, r)
- Call(f, a)      → ln/sin/cos/tan(a), factorial 은 gamma(a)

최적화 없이 트리를 그대로 옮긴다. 숫자는 로케일과 무관한 왕복 가능 표기
(`repr`)를 쓰고, 정수값은 `.0` 없이 출력한다.
"""

from __future__ import annotations

from ..grammar.ast import BinOp, Call, Neg, Node, Number, Var
from .target import DEFAULT, GlslTarget


def format_number(v: float) -> str:
    """왕복 가능한 10진 표기. 그룹 구분자 없음, 소수점은 항상 '.'."""
    s = repr(float(v))
    if s.endswith(".0"):
        s = s[:-2]
    return s


def _pair(re_part: str, im_part: str, target: GlslTarget) -> str:
    return f"{target.pair_ctor}({re_part}, {im_part})"


def _emit(node: Node, target: GlslTarget) -> str:
    if isinstance(node, Number):
        v = format_number(node.value)
        if node.imaginary:
            return _pair(target.zero, v, target)
        return _pair(v, target.zero, target)

    if isinstance(node, Var):
        return target.variable

    if isinstance(node, Neg):
        minus_one = _pair(format_number(-1.0), target.zero, target)
        return f"{target.fn('mul')}({_emit(node.operand, target)}, {minus_one})"

    if isinstance(node, BinOp):
        left = _emit(node.left, target)
        right = _emit(node.right, target)
        return f"{target.fn(node.op)}({left}, {right})"

    if isinstance(node, Call):
        fn = "gamma" if node.name == "factorial" else node.name
        return f"{target.fn(fn)}({_emit(node.arg, target)})"

    raise TypeError(f"emit_glsl: unexpected node {node!r}")


def emit_glsl_to_string(node: Node, target: GlslTarget = DEFAULT) -> str:
    """AST 하나를 GLSL 식 문자열로 방출한다."""
    return _emit(node, target)
