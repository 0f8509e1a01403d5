from __future__ import annotations

from getoptx.options import (
    NO_ARGUMENT,
    OPTIONAL_ARGUMENT,
    REQUIRED_ARGUMENT,
    tokenize_longopt_spec,
)


def test_splits_on_whitespace_commas_and_pipes() -> None:
    spec = "alpha, beta|gamma\tdelta\r\nepsilon"

    names = [name for name, _ in tokenize_longopt_spec(spec)]

    assert names == ["alpha", "beta", "gamma", "delta", "epsilon"]


def test_strips_leading_double_hyphen_and_arity_markers() -> None:
    pairs = list(tokenize_longopt_spec("--verbose --file: --color::"))

    assert pairs == [
        ("verbose", NO_ARGUMENT),
        ("file", REQUIRED_ARGUMENT),
        ("color", OPTIONAL_ARGUMENT),
    ]


def test_empty_runs_are_skipped() -> None:
    assert list(tokenize_longopt_spec(" ,, || ")) == []
    assert list(tokenize_longopt_spec("")) == []


def test_short_tokens_keep_their_hyphens_and_colons() -> None:
    # Too short to carry a prefix or an optional marker; the table rejects these.
    pairs = list(tokenize_longopt_spec("-- :: ---"))

    assert pairs == [("--", NO_ARGUMENT), (":", REQUIRED_ARGUMENT), ("-", NO_ARGUMENT)]


def test_single_letter_long_options_with_markers() -> None:
    pairs = list(tokenize_longopt_spec("x: y:: --z"))

    assert pairs == [("x", REQUIRED_ARGUMENT), ("y", OPTIONAL_ARGUMENT), ("z", NO_ARGUMENT)]
