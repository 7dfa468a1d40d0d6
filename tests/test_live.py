import pytest

from zglsl import LiveRecompiler, ParseError, splice

TEMPLATE = """shader_type canvas_item;
vec2 f(vec2 z) {
    return vec2(0.00);
}
"""


def test_splice_replaces_placeholder():
    out = splice(TEMPLATE, "mul(z, z)")
    assert "return mul(z, z);" in out
    assert "vec2(0.00)" not in out


def test_splice_custom_placeholder():
    assert splice("x = @F@;", "z", placeholder="@F@") == "x = z;"


def test_splice_missing_placeholder():
    with pytest.raises(ValueError):
        splice("void main() {}", "z")


def test_recompiler_initial_program_is_template():
    rc = LiveRecompiler(TEMPLATE)
    assert rc.program == TEMPLATE
    assert rc.generation == 0


def test_recompiler_rebuilds_on_change():
    rc = LiveRecompiler(TEMPLATE)
    assert rc.poll("z^2")
    assert "return pow(z, vec2(2, 0));" in rc.program
    assert rc.snippet == "pow(z, vec2(2, 0))"
    assert rc.generation == 1


def test_recompiler_skips_unchanged_text():
    rc = LiveRecompiler(TEMPLATE)
    rc.poll("z^2")
    assert not rc.poll("z^2")
    assert rc.generation == 1


def test_recompiler_keeps_previous_program_on_error():
    errors = []
    rc = LiveRecompiler(TEMPLATE, on_error=errors.append)
    rc.poll("z+1")
    good = rc.program

    assert not rc.poll("z+(")
    assert rc.program == good
    assert isinstance(rc.last_error, ParseError)
    assert errors == [rc.last_error]

    # same failing text is not retried
    assert not rc.poll("z+(")
    assert len(errors) == 1

    assert rc.poll("z+2")
    assert rc.last_error is None
    assert rc.generation == 2


def test_recompiler_requires_placeholder():
    with pytest.raises(ValueError):
        LiveRecompiler("void main() {}")


def test_recompiler_survives_deeply_nested_text():
    errors = []
    rc = LiveRecompiler(TEMPLATE, on_error=errors.append)
    rc.poll("z")
    good = rc.program

    assert not rc.poll("-" * 1200 + "z")
    assert rc.program == good
    assert isinstance(rc.last_error, ParseError)
    assert len(errors) == 1
