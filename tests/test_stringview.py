import dataclasses

import pytest

from yoru.stringview import String


def test_length_matches_text():
    s = String("hello world!")
    assert s.length == len("hello world!")
    assert len(s) == s.length


def test_concat():
    first = String("hello world!")
    second = String("goodbye world!")
    joined = first.concat(second)
    assert joined.text == "hello world!" + "goodbye world!"
    assert joined.length == first.length + second.length


def test_concat_leaves_operands_unchanged():
    first = String("a")
    second = String("b")
    first.concat(second)
    assert first.text == "a"
    assert second.text == "b"


def test_plus_operator_matches_concat():
    first = String("x")
    second = String("yz")
    assert first + second == first.concat(second)


def test_concat_with_empty():
    s = String("abc")
    assert s.concat(String("")) == s


def test_concat_rejects_plain_str():
    with pytest.raises(TypeError):
        String("a").concat("b")


def test_is_immutable():
    s = String("fixed")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.text = "changed"
    assert s.text == "fixed"
    assert s.length == 5


def test_str_returns_text():
    assert str(String("view")) == "view"