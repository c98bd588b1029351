import io

import pytest

from numlab.creppl import FnSpec, Param, ParamType, Repl


def _join_values(params):
    return ",".join(str(p.value) for p in params)


def test_param_defaults():
    param = Param("n:")
    assert param.value == -1
    assert param.type is ParamType.INT


def test_run_with_callable_and_params():
    out = io.StringIO()
    repl = Repl(
        _join_values,
        [Param("value of a:"), Param("value of b:")],
        input=io.StringIO("3\n4\nq\n"),
        output=out,
    )
    repl.run()
    assert "3,4\n" in out.getvalue()
    assert repl.terminus is True


def test_quit_word_with_trailing_space_stops_without_result():
    out = io.StringIO()
    repl = Repl(_join_values, input=io.StringIO("Q  \n"), output=out)
    repl.run()
    assert repl.terminus is True
    assert repl.result == ""
    assert out.getvalue() == "\nn: "


def test_invalid_input_uses_error_value():
    out = io.StringIO()
    repl = Repl(_join_values, input=io.StringIO("abc\nq\n"), output=out)
    repl.run()
    text = out.getvalue()
    assert "error: invalid_argument..." in text
    assert repl.result == "1"


def test_end_of_input_stops_loop():
    repl = Repl(_join_values, input=io.StringIO("7\n"), output=io.StringIO())
    repl.run()
    assert repl.terminus is True
    assert repl.result == "7"


def test_eval_does_not_mutate_params_through_fn():
    def clobber(params):
        params[0].value = 999
        return "done"

    repl = Repl(clobber, input=io.StringIO("5\n"), output=io.StringIO())
    repl.read()
    repl.eval()
    assert repl.params[0].value == 5
    assert repl.result == "done"


def test_default_selection_is_first_spec():
    specs = [
        FnSpec(lambda ps: "first", "one", "a"),
        FnSpec(lambda ps: "second", "two", "b"),
    ]
    repl = Repl(specs, input=io.StringIO("1\n"), output=io.StringIO())
    assert repl.current == "a"
    repl.read()
    repl.eval()
    assert repl.result == "first"


def test_selecting_another_spec():
    specs = [
        FnSpec(lambda ps: "first", "one", "a"),
        FnSpec(lambda ps: "second", "two", "b"),
    ]
    repl = Repl(specs, input=io.StringIO("1\n"), output=io.StringIO())
    repl.current = "b"
    repl.read()
    repl.eval()
    assert repl.result == "second"


def test_unknown_function_raises():
    repl = Repl([], input=io.StringIO("1\n"), output=io.StringIO())
    repl.read()
    with pytest.raises(LookupError):
        repl.eval()


def test_print_writes_result_line():
    out = io.StringIO()
    repl = Repl(_join_values, input=io.StringIO("12\n"), output=out)
    repl.read()
    repl.eval()
    repl.print()
    assert out.getvalue().endswith("12\n")