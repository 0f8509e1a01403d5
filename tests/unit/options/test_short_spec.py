from __future__ import annotations

from getoptx.options import (
    DIGITS,
    NO_ARGUMENT,
    OPTIONAL_ARGUMENT,
    REQUIRED_ARGUMENT,
    parse_short_spec,
    strip_punctuation,
)


def test_letters_and_arity_markers() -> None:
    spec = parse_short_spec("ab:c::")

    assert spec.letters == {
        "a": NO_ARGUMENT,
        "b": REQUIRED_ARGUMENT,
        "c": OPTIONAL_ARGUMENT,
    }
    assert spec.quiet is False
    assert spec.require_order is False


def test_leading_colon_and_quiet_flag_are_equivalent() -> None:
    from_colon = parse_short_spec(":ab")
    from_flag = parse_short_spec("ab", quiet=True)
    both = parse_short_spec(":ab", quiet=True)

    assert from_colon == from_flag == both
    assert from_colon.letters == {"a": NO_ARGUMENT, "b": NO_ARGUMENT}


def test_prefix_flags_in_either_order() -> None:
    plus_first = parse_short_spec("+:a")
    colon_first = parse_short_spec(":+a")

    assert plus_first.quiet and plus_first.require_order
    assert colon_first.quiet and colon_first.require_order
    assert plus_first.letters == colon_first.letters == {"a": NO_ARGUMENT}


def test_concat_numeric_adds_digits_only_when_none_present() -> None:
    added = parse_short_spec("ab", concat_numeric=True)
    kept = parse_short_spec("a5", concat_numeric=True)

    assert all(added.arity_of(digit) == NO_ARGUMENT for digit in DIGITS)
    assert list(added.letters) == ["a", "b", *DIGITS]
    assert kept.arity_of("5") == NO_ARGUMENT
    assert kept.arity_of("6") is None


def test_first_definition_of_a_letter_wins() -> None:
    spec = parse_short_spec("a:a")

    assert spec.arity_of("a") == REQUIRED_ARGUMENT


def test_strip_punctuation_removes_ascii_punctuation_only() -> None:
    assert strip_punctuation("foo-bar_baz.qux") == "foobarbazqux"
    assert strip_punctuation("plain123") == "plain123"
    assert strip_punctuation("---") == ""
