import pytest

from zglsl import LexError, ParseError, TranslateError, translate, try_translate
from zglsl.codegen.target import GlslTarget


@pytest.mark.parametrize("src, code", [
    ("z^2+1", "add(pow(z, vec2(2, 0)), vec2(1, 0))"),
    ("(1/z)^18 + z^3",
     "add(pow(div(vec2(1, 0), z), vec2(18, 0)), pow(z, vec2(3, 0)))"),
    ("-z^2 + sin(z)!",
     "add(mul(pow(z, vec2(2, 0)), vec2(-1, 0)), gamma(sin(z)))"),
    ("(z+1)!", "gamma(add(z, vec2(1, 0)))"),
    ("(z)(z)", "mul(z, z)"),
    ("2^3^2", "pow(vec2(2, 0), pow(vec2(3, 0), vec2(2, 0)))"),
    ("i", "vec2(0, 1)"),
    ("2.5i * Z", "mul(vec2(0, 2.5), z)"),
    ("pi", "vec2(3.141592653589793, 0)"),
    ("e", "vec2(2.718281828459045, 0)"),
    ("ln(z) - cos(z)/tan(z)", "sub(ln(z), div(cos(z), tan(z)))"),
])
def test_translate(src, code):
    assert translate(src) == code


def test_translate_is_deterministic():
    src = "-(z - .5i)^3 * ln(z)!"
    assert len({translate(src) for _ in range(5)}) == 1


def test_translate_with_target():
    assert translate("z*2", GlslTarget(prefix="c")) == "cmul(z, vec2(2, 0))"


def test_try_translate_ok():
    res = try_translate("z+1")
    assert res.ok
    assert res.code == "add(z, vec2(1, 0))"
    assert res.error is None


@pytest.mark.parametrize("src, err_type", [
    ("3..5", LexError),
    ("w", LexError),
    ("(z+1", ParseError),
    ("z)", ParseError),
])
def test_try_translate_errors(src, err_type):
    res = try_translate(src)
    assert not res.ok
    assert res.code is None
    assert isinstance(res.error, err_type)


def test_translate_raises():
    with pytest.raises(TranslateError):
        translate("z +")


@pytest.mark.parametrize("src, pos", [
    ("(" * 250 + "z" + ")" * 250, 100),
    ("-" * 1200 + "z", 100),
    ("z" + "^z" * 1000, 200),
])
def test_deep_nesting_is_a_parse_error(src, pos):
    res = try_translate(src)
    assert not res.ok
    assert isinstance(res.error, ParseError)
    assert "nested too deeply" in str(res.error)
    assert res.error.pos == pos


def test_nesting_at_the_limit_translates():
    src = "(" * 99 + "z" + ")" * 99
    assert translate(src) == "z"


def test_long_operator_chain_is_a_parse_error():
    res = try_translate("z" + "+z" * 150)
    assert isinstance(res.error, ParseError)
    assert res.error.pos == 201
    assert res.error.actual == "Plus"


def test_operator_chain_within_limit_translates():
    code = translate("z" + "*z" * 99)
    assert code.count("mul(") == 99
