import pytest

from yoru.stringbuilder import StringBuilder


def test_worked_example():
    sb = StringBuilder()
    sb.appends("Tonight's the night...")
    sb.appendc(" ")
    sb.appendi(69420)
    sb.appendc("!")
    sb.prepends("Dex says: ")
    sb.prependc(">")
    result = sb.to_string()
    assert result == ">Dex says: Tonight's the night... 69420!"
    assert len(sb) == len(result)
    sb.clear()
    assert len(sb) == 0
    assert sb.to_string() == ""


def test_empty_builder():
    sb = StringBuilder()
    assert sb.to_string() == ""
    assert len(sb) == 0


def test_insert_in_middle():
    sb = StringBuilder("held")
    sb.inserts(2, "llo wor")
    assert sb.to_string() == "he" + "llo wor" + "ld"


def test_insert_at_end_allowed():
    sb = StringBuilder("ab")
    sb.insertc(2, "c")
    assert sb.to_string() == "abc"


def test_insert_past_end_raises():
    sb = StringBuilder("ab")
    with pytest.raises(IndexError):
        sb.insertc(3, "c")
    with pytest.raises(IndexError):
        sb.inserts(5, "xyz")
    assert sb.to_string() == "ab"


def test_negative_index_raises():
    sb = StringBuilder("ab")
    with pytest.raises(IndexError):
        sb.insertc(-1, "c")


def test_insertc_requires_one_character():
    sb = StringBuilder()
    with pytest.raises(ValueError):
        sb.appendc("ab")
    with pytest.raises(TypeError):
        sb.appendc(65)


def test_signed_integers():
    sb = StringBuilder()
    sb.appendi(-(2**63))
    assert sb.to_string() == str(-(2**63))
    with pytest.raises(OverflowError):
        sb.appendi(2**63)


def test_unsigned_integers():
    sb = StringBuilder()
    sb.appendu(2**64 - 1)
    assert sb.to_string() == "18446744073709551615"
    with pytest.raises(OverflowError):
        sb.appendu(-1)
    with pytest.raises(OverflowError):
        sb.prependu(2**64)


def test_prepend_order():
    sb = StringBuilder()
    sb.prependi(1)
    sb.prependi(2)
    sb.prependu(3)
    assert sb.to_string() == "321"


def test_float_precision():
    sb = StringBuilder()
    sb.appendf(1.5, 3)
    assert sb.to_string() == "1.500"


def test_float_precision_is_capped():
    sb = StringBuilder()
    sb.appendf(0.5, 30)
    text = sb.to_string()
    integer, _, fraction = text.partition(".")
    assert integer == "0"
    assert len(fraction) == 20


def test_float_zero_precision_has_no_point():
    sb = StringBuilder()
    sb.prependf(7.0, 0)
    assert sb.to_string() == "7"


def test_float_negative_precision_raises():
    sb = StringBuilder()
    with pytest.raises(ValueError):
        sb.appendf(1.0, -1)


def test_format_insertion():
    sb = StringBuilder("[]")
    sb.insertfmt(1, "%s=%d", "x", 5)
    sb.appendfmt("%%")
    sb.prependfmt("%c", "<")
    assert sb.to_string() == "<[x=5]%"


def test_clear_then_reuse():
    sb = StringBuilder("abc")
    sb.clear()
    sb.appends("de")
    assert str(sb) == "de"
    assert len(sb) == 2