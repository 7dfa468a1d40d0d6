"""식 파일 / 셰이더 템플릿 로더"""

from __future__ import annotations
from pathlib    import Path


def load_source(path: str, *, single_line: bool = False) -> str:
    """
    개행을 '\\n' 으로 통일해 읽는다.
    single_line=True 이면 앞뒤 공백을 떼고 여러 줄이면 ValueError (식 파일용).
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines(keepends=False)
    if not single_line:
        text = "\n".join(lines)
        return text + "\n" if lines else text
    body = [ln for ln in lines if ln.strip()]
    if len(body) > 1:
        raise ValueError(f"{path}: expression must be a single line, got {len(body)}")
    return body[0].strip() if body else ""
