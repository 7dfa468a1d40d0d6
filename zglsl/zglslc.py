# zglsl/zglslc.py
"""zglslc – zglsl CLI

사용 예)
    $ zglslc translate "(1/z)^18 + z^3"
    $ zglslc translate --prefix c -D -- "-z^2 + sin(z)!"
    $ zglslc lex "2.5i*(z)(z)"
    $ zglslc ast "2^3^2"
    $ zglslc splice "z^2 + 1" --template shaders/complex.gdshader -o out.gdshader

기능
----
- translate : 식을 GLSL 스니펫으로 변환해 표준출력으로 출력
- lex       : 토큰 열 출력
- ast       : AST 트리 출력
- splice    : 셰이더 템플릿의 자리표시자를 변환 결과로 치환

디버그 모드(-D/--debug)를 켜면 토큰/AST 요약을 표준에러로 출력합니다.
"""

from __future__ import annotations
import argparse
import pathlib
import sys
from typing import Optional

from .codegen.emit_glsl import emit_glsl_to_string
from .codegen.target import DEFAULT, LEGACY, GlslTarget
from .errors import LexError, ParseError
from .grammar.ast import dump
from .grammar.loader import load_source
from .grammar.parser import parse_tokens
from .lex import tokenize
from .live import DEFAULT_PLACEHOLDER, splice

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _expression_of(args) -> str:
    if (args.expr is None) == (args.input is None):
        raise ValueError("give exactly one of EXPR or --input")
    if args.input is not None:
        return load_source(args.input, single_line=True)
    return args.expr


def _target_of(args) -> GlslTarget:
    if args.legacy and args.prefix is not None:
        # LEGACY 는 모든 프리미티브 이름을 재정의하므로 접두사가 적용될 곳이 없다
        raise ValueError("--prefix cannot be combined with --legacy")
    base = LEGACY if args.legacy else DEFAULT
    return GlslTarget(
        pair_ctor=args.pair or base.pair_ctor,
        variable=args.var or base.variable,
        prefix=args.prefix if args.prefix is not None else base.prefix,
        names=dict(base.names),
        zero=base.zero,
    )


def _report(e: Exception) -> int:
    if isinstance(e, LexError):
        _eprint("[LEX ERROR]", str(e))
        _eprint(e.caret())
    elif isinstance(e, ParseError):
        _eprint("[PARSE ERROR]", str(e))
        _eprint(e.caret())
    else:
        _eprint("[ERROR]", type(e).__name__, str(e))
    return 2

# ------------------------------
# 파이프라인
# ------------------------------

def _compile(args):
    """식 → 토큰 → AST → GLSL. 디버그 모드에서 단계별 요약 출력."""
    src = _expression_of(args)
    toks = tokenize(src)
    if args.debug: _eprint("[DEBUG] tokens ready | count=%d" % len(toks))

    ast = parse_tokens(toks, src)
    if args.debug:
        _eprint("[DEBUG] AST ready")
        _eprint(dump(ast))

    code = emit_glsl_to_string(ast, _target_of(args))
    if args.debug: _eprint("[DEBUG] GLSL ready | bytes=%d" % len(code))
    return src, toks, ast, code

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_translate(args) -> int:
    try:
        _src, _toks, _ast, code = _compile(args)
    except (SyntaxError, OSError, ValueError) as e:
        return _report(e)
    print(code)
    return 0


def cmd_lex(args) -> int:
    """토큰 열을 한 줄에 하나씩 출력합니다."""
    try:
        toks = tokenize(_expression_of(args))
    except (SyntaxError, OSError, ValueError) as e:
        return _report(e)
    for i, tok in enumerate(toks):
        flag = "  imag" if tok.imaginary else ""
        print(f"{i:03d}: {tok.kind:<13} {tok.text!r}  @{tok.pos}{flag}")
    return 0


def cmd_ast(args) -> int:
    try:
        src = _expression_of(args)
        ast = parse_tokens(tokenize(src), src)
    except (SyntaxError, OSError, ValueError) as e:
        return _report(e)
    print(dump(ast))
    return 0


def cmd_splice(args) -> int:
    try:
        template = load_source(args.template)
        _src, _toks, _ast, code = _compile(args)
        shader = splice(template, code, args.placeholder)
    except (SyntaxError, OSError, ValueError) as e:
        return _report(e)

    if args.output is None:
        sys.stdout.write(shader)
        return 0
    out_path = pathlib.Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(shader, encoding="utf-8")
    print(f"[EMIT] {args.template} -> {out_path}")
    if args.debug:
        _eprint(f"[DEBUG] bytes={len(shader)}")
    return 0


# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("expr", nargs="?", help="변환할 식 (예: \"z^2 + 1\")")
    p.add_argument("--input", help="식이 들어있는 파일 경로(한 줄, EXPR 대신)")
    p.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")


def _add_target_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--var", help="자유 변수 이름 (기본: z)")
    p.add_argument("--pair", help="복소수 쌍 생성자 (기본: vec2)")
    p.add_argument("--prefix", help="복소수 함수 이름 접두사 (예: c → cadd, cpow)")
    p.add_argument("--legacy", action="store_true", help="complexAdd/complex_pow_complex 이름 규약 사용")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="zglslc", description="complex expression to GLSL translator")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_tr = sub.add_parser("translate", help="식을 GLSL 스니펫으로 변환합니다")
    _add_source_args(p_tr)
    _add_target_args(p_tr)
    p_tr.set_defaults(func=cmd_translate)

    p_lex = sub.add_parser("lex", help="식을 토크나이즈합니다")
    _add_source_args(p_lex)
    p_lex.set_defaults(func=cmd_lex)

    p_ast = sub.add_parser("ast", help="식의 AST를 출력합니다")
    _add_source_args(p_ast)
    p_ast.set_defaults(func=cmd_ast)

    p_sp = sub.add_parser("splice", help="셰이더 템플릿에 변환 결과를 끼워 넣습니다")
    _add_source_args(p_sp)
    _add_target_args(p_sp)
    p_sp.add_argument("--template", required=True, help="셰이더 템플릿 파일")
    p_sp.add_argument("--placeholder", default=DEFAULT_PLACEHOLDER,
                      help=f"치환할 자리표시자 (기본: {DEFAULT_PLACEHOLDER})")
    p_sp.add_argument("-o", "--output", help="출력 파일 경로 (미지정시 표준출력)")
    p_sp.set_defaults(func=cmd_splice)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
