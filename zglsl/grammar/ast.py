# zglsl/grammar/ast.py
"""Expression AST
- Number : 실수/허수 리터럴
- Var    : 유일한 복소수 변수 z
- Neg    : 단항 마이너스
- BinOp  : + - * / ^
- Call   : ln/sin/cos/tan/factorial 호출

노드는 모두 불변(frozen)이며 아래에서 위로 만들어진다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Union


class BinOpKind:
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"


FUNCTION_NAMES = ("ln", "sin", "cos", "tan", "factorial")


@dataclass(frozen=True)
class Number:
    value: float
    imaginary: bool = False


@dataclass(frozen=True)
class Var:
    pass


@dataclass(frozen=True)
class Neg:
    operand: "Node"


@dataclass(frozen=True)
class BinOp:
    op: str  # BinOpKind
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Call:
    name: str  # FUNCTION_NAMES
    arg: "Node"

    def __post_init__(self) -> None:
        if self.name not in FUNCTION_NAMES:
            raise ValueError(f"unknown function {self.name!r}")


Node = Union[Number, Var, Neg, BinOp, Call]


def dump(node: Node, indent: str = "  ") -> str:
    """디버그용 들여쓰기 트리 문자열."""
    out: List[str] = []

    def walk(n: Node, depth: int) -> None:
        pad = indent * depth
        if isinstance(n, Number):
            out.append(f"{pad}Number {n.value!r}{'i' if n.imaginary else ''}")
        elif isinstance(n, Var):
            out.append(f"{pad}Var z")
        elif isinstance(n, Neg):
            out.append(f"{pad}Neg")
            walk(n.operand, depth + 1)
        elif isinstance(n, BinOp):
            out.append(f"{pad}BinOp {n.op}")
            walk(n.left, depth + 1)
            walk(n.right, depth + 1)
        elif isinstance(n, Call):
            out.append(f"{pad}Call {n.name}")
            walk(n.arg, depth + 1)
        else:
            raise TypeError(f"not an AST node: {n!r}")

    walk(node, 0)
    return "\n".join(out)
