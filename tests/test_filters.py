from __future__ import annotations

from fakes import make_config
from core.filters import matched_keywords, should_forward


def test_empty_text_never_forwards() -> None:
    assert not should_forward("", make_config())
    assert not should_forward("", make_config(optional_keywords=frozenset({"x"})))


def test_no_constraints_forwards_any_text() -> None:
    assert should_forward("anything", make_config())


def test_shorter_than_min_length_is_dropped() -> None:
    config = make_config(min_message_length=10)
    assert not should_forward("too short", config)
    assert should_forward("long enough", config)


def test_required_keywords_must_all_be_present() -> None:
    config = make_config(required_keywords=frozenset({"a", "b"}))
    assert not should_forward("a is here", config)
    assert should_forward("a and b are here", config)


def test_required_keywords_without_optional_constraint() -> None:
    config = make_config(required_keywords=frozenset({"launch", "btc"}), min_message_length=5)
    assert should_forward("BTC Launch tomorrow", config)


def test_one_optional_keyword_is_enough() -> None:
    config = make_config(optional_keywords=frozenset({"x", "y"}))
    assert should_forward("contains y only", config)
    assert not should_forward("nothing to see", make_config(optional_keywords=frozenset({"q", "z"})))


def test_required_and_optional_combined() -> None:
    config = make_config(
        required_keywords=frozenset({"go"}),
        optional_keywords=frozenset({"fast", "slow"}),
        min_message_length=5,
    )
    assert should_forward("go fast now", config)
    assert not should_forward("go now please", config)
    assert not should_forward("fast and slow", config)


def test_matching_is_case_insensitive_substring() -> None:
    config = make_config(required_keywords=frozenset({"cat"}))
    assert should_forward("CONCATENATE", config)


def test_matched_keywords_reports_hits() -> None:
    config = make_config(
        required_keywords=frozenset({"go"}),
        optional_keywords=frozenset({"fast", "slow"}),
    )
    assert matched_keywords("Go FAST", config) == (["go"], ["fast"])
