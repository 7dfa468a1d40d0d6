# zglsl/codegen/target.py
"""GLSL 방출 대상 설정.

생성 코드는 외부 셰이더가 제공하는 복소수 프리미티브
(add, sub, mul, div, pow, ln, sin, cos, tan, gamma)와 외부에서 바인딩된
변수(기본 `z`)만 참조한다. 셰이더마다 이름이 다를 수 있으므로
이름/생성자/접두사를 이 데이터로 조정한다.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

PRIMITIVES = ("add", "sub", "mul", "div", "pow", "ln", "sin", "cos", "tan", "gamma")


@dataclass(frozen=True)
class GlslTarget:
    """
    pair_ctor : (실수, 허수) 쌍 생성자
    variable  : 자유 변수 식별자
    prefix    : 모든 프리미티브 이름 앞에 붙는 접두사 (예: "c" → cadd, cpow)
    names     : 프리미티브별 이름 재정의 (prefix 보다 우선)
    zero      : 쌍의 0 성분 표기
    """
    pair_ctor: str = "vec2"
    variable: str = "z"
    prefix: str = ""
    names: Dict[str, str] = field(default_factory=dict)
    zero: str = "0"

    def __post_init__(self) -> None:
        unknown = sorted(set(self.names) - set(PRIMITIVES))
        if unknown:
            raise ValueError(f"unknown complex primitive(s): {', '.join(unknown)}")

    def fn(self, primitive: str) -> str:
        if primitive not in PRIMITIVES:
            raise KeyError(f"unknown complex primitive {primitive!r}")
        return self.names.get(primitive, self.prefix + primitive)


DEFAULT = GlslTarget()

# 초기 버전 생성기의 이름 규약
LEGACY = GlslTarget(
    names={
        "add": "complexAdd",
        "sub": "complexSub",
        "mul": "complexMult",
        "div": "complexDivide",
        "pow": "complex_pow_complex",
        "ln": "complexLn",
        "sin": "complexSin",
        "cos": "complexCos",
        "tan": "complexTan",
        "gamma": "complexGamma",
    },
    zero="0.0",
)
