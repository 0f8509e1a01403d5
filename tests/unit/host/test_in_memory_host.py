from __future__ import annotations

import io

from getoptx.host import InMemoryHost, ShellSourceHost, array_assignment, is_identifier


def test_identifier_rules() -> None:
    assert is_identifier("opts")
    assert is_identifier("_x9")
    assert not is_identifier("9x")
    assert not is_identifier("a-b")
    assert not is_identifier("")


def test_array_assignment_is_evaluated_like_a_shell() -> None:
    host = InMemoryHost()

    assert host.eval_array_assignment(array_assignment("opts", "-a -b 'it'\\''s' -- 'x y'"))
    assert host.arrays["opts"] == ["-a", "-b", "it's", "--", "x y"]


def test_empty_array_assignment() -> None:
    host = InMemoryHost()

    assert host.eval_array_assignment(array_assignment("opts", ""))
    assert host.arrays["opts"] == []


def test_malformed_array_expression_fails() -> None:
    host = InMemoryHost()

    assert not host.eval_array_assignment("opts=( 'unterminated )")
    assert not host.eval_array_assignment("1bad=( x )")
    assert host.arrays == {}


def test_scalar_assignment_rejects_bad_names() -> None:
    host = InMemoryHost()

    assert host.assign_scalar("out", "-a --")
    assert not host.assign_scalar("no good", "x")
    assert host.scalars == {"out": "-a --"}


def test_shell_source_host_prints_assignments() -> None:
    out_stream = io.StringIO()
    err_stream = io.StringIO()
    host = ShellSourceHost(out_stream=out_stream, err_stream=err_stream)

    host.assign_scalar("out", "-a 'x'")
    host.eval_array_assignment(array_assignment("arr", "-a --"))
    host.write_diagnostic("getoptx: oops")

    assert out_stream.getvalue() == "out='-a '\\''x'\\'''\narr=( -a -- )\n"
    assert err_stream.getvalue() == "getoptx: oops\n"
    assert host.positional_parameters() == ()
    assert host.script_name() is None
