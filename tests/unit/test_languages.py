"""Unit tests for language tags and script detection."""

from __future__ import annotations

from homophone_engine.languages import (
    han_chars,
    has_family_script,
    has_latin,
    is_logographic_family,
    primary_subtag,
)


def test_primary_subtag_accepts_either_separator() -> None:
    """Region and script suffixes are dropped regardless of separator."""

    assert primary_subtag("zh-CN") == "zh"
    assert primary_subtag("ZH_tw") == "zh"
    assert primary_subtag(None) == ""
    assert is_logographic_family("ja-JP")
    assert not is_logographic_family("en-US")


def test_han_chars_include_supplementary_ideographs() -> None:
    """Ideographs beyond the basic plane count as single logograms."""

    rare = chr(0x20000)
    assert han_chars(f"{rare}。") == [rare]
    assert han_chars("a好b") == ["好"]
    assert has_family_script(rare, "zh")


def test_math_signs_are_not_latin_letters() -> None:
    """Multiplication and division signs sit inside Latin-1 but are not letters."""

    assert not has_latin("3×4÷2")
    assert has_latin("hǎo")
    assert has_latin("Ærø")
