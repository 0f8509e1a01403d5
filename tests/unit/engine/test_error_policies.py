from __future__ import annotations

import pytest

from getoptx.engine import (
    RESULT_PARSE_ERROR,
    RESULT_USAGE_ERROR,
    ReparseModes,
    ReparseRequest,
    UsageError,
    build_long_option_table,
    reparse,
)


def test_unrecognized_option_leaves_marker_and_fails() -> None:
    result = reparse(ReparseRequest(short_spec="a", tokens=("-a", "-z", "x")))

    assert result.code == RESULT_PARSE_ERROR
    assert result.output == "-a '?' -- 'x'"
    assert result.diagnostics == ("getoptx: invalid option -- 'z'",)


def test_elided_errors_still_fail() -> None:
    result = reparse(
        ReparseRequest(
            short_spec="a", tokens=("-a", "-z", "x"), modes=ReparseModes(elide_errors=True)
        )
    )

    assert result.code == RESULT_PARSE_ERROR
    assert "?" not in result.output
    assert result.output == "-a -- 'x'"


def test_missing_argument_marker() -> None:
    result = reparse(ReparseRequest(short_spec="ab:", tokens=("-a", "-b")))

    assert result.code == RESULT_PARSE_ERROR
    assert result.output == "-a ':' --"
    assert result.diagnostics == ("getoptx: option requires an argument -- 'b'",)


def test_abort_discards_output_and_stops_scanning() -> None:
    result = reparse(
        ReparseRequest(
            short_spec="ab:",
            long_specs=("file:",),
            tokens=("-a", "--file"),
            modes=ReparseModes(abort_on_error=True),
        )
    )

    assert result.code == RESULT_PARSE_ERROR
    assert result.output == ""
    assert result.diagnostics == ("getoptx: option '--file' requires an argument",)


def test_abort_stops_before_later_errors_are_reported() -> None:
    result = reparse(
        ReparseRequest(
            short_spec="a",
            tokens=("-y", "-a", "-z"),
            modes=ReparseModes(abort_on_error=True),
        )
    )

    assert result.output == ""
    assert result.diagnostics == ("getoptx: invalid option -- 'y'",)


def test_abort_without_errors_keeps_output() -> None:
    result = reparse(
        ReparseRequest(short_spec="a", tokens=("-a", "x"), modes=ReparseModes(abort_on_error=True))
    )

    assert result.output == "-a -- 'x'"


def test_quiet_mode_suppresses_diagnostics_not_result_code() -> None:
    flagged = reparse(
        ReparseRequest(short_spec="a", tokens=("-z",), modes=ReparseModes(quiet=True))
    )
    colon = reparse(ReparseRequest(short_spec=":a", tokens=("-z",)))

    assert flagged.code == colon.code == RESULT_PARSE_ERROR
    assert flagged.diagnostics == colon.diagnostics == ()
    assert flagged.output == colon.output == "'?' --"


def test_long_option_diagnostics_follow_getopt_wording() -> None:
    result = reparse(
        ReparseRequest(
            short_spec="",
            long_specs=("verbose version",),
            tokens=("--ver", "--verbose=1", "--nope"),
            display_name="tool",
        )
    )

    assert result.diagnostics == (
        "tool: option '--ver' is ambiguous; possibilities: '--verbose' '--version'",
        "tool: option '--verbose' doesn't allow an argument",
        "tool: unrecognized option '--nope'",
    )
    assert result.output == "'?' '?' '?' --"


def test_malformed_long_spec_rejects_whole_invocation() -> None:
    result = reparse(
        ReparseRequest(short_spec="a", long_specs=("good", "fine ---"), tokens=("-a",))
    )

    assert result.code == RESULT_USAGE_ERROR
    assert result.output == ""
    assert result.diagnostics == ("getoptx: empty or illegal long option spec: fine ---",)


def test_malformed_long_spec_is_silent_when_quiet() -> None:
    result = reparse(ReparseRequest(short_spec=":a", long_specs=("-- x",)))

    assert result.code == RESULT_USAGE_ERROR
    assert result.diagnostics == ()


def test_build_long_option_table_raises_usage_error() -> None:
    with pytest.raises(UsageError) as excinfo:
        build_long_option_table(["ok", "bad:: --"])

    assert excinfo.value.message == "empty or illegal long option spec: bad:: --"
