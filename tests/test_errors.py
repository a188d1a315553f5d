import pytest

from yoru.errors import PanicError, panic, warn


def test_panic_raises_with_message():
    with pytest.raises(PanicError, match="something broke"):
        panic("something broke")


def test_panic_error_is_catchable_as_runtime_error():
    with pytest.raises(RuntimeError) as info:
        panic("boom")
    assert str(info.value) == "boom"


def test_warn_writes_to_stderr(capsys):
    warn("careful now")
    captured = capsys.readouterr()
    assert "[YORU_WARN]" in captured.err
    assert "careful now" in captured.err
    assert captured.out == ""


def test_warn_returns_without_raising_and_emits_one_line(capsys):
    result = warn("first")
    captured = capsys.readouterr()
    assert result is None
    assert captured.err.count("\n") == 1