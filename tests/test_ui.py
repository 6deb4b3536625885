import io

import pytest

from rustlings.ui import Spinner, emoji_enabled, styled, success, warn


class _Tty(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("CLICOLOR", raising=False)


def test_emoji_enabled_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert emoji_enabled() is True
    monkeypatch.setenv("NO_EMOJI", "1")
    assert emoji_enabled() is False


def test_styled_is_plain_without_terminal(plain):
    assert styled("hello", "red", "bold") == "hello"


def test_styled_forced_colours(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    text = styled("hello", "red")
    assert text.startswith("\x1b[31m")
    assert text.endswith("\x1b[0m")
    assert "hello" in text


def test_styled_without_styles_is_unchanged(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    assert styled(42) == "42"


def test_styled_rejects_unknown_style(plain):
    with pytest.raises(ValueError):
        styled("x", "purple")


def test_warn_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("something broke")
    assert capsys.readouterr().out == "! something broke\n"


def test_success_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("all good")
    assert capsys.readouterr().out == "✓ all good\n"


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("all good")
    assert capsys.readouterr().out.startswith("✅ all good")


def test_spinner_draws_and_clears_on_terminal():
    stream = _Tty()
    with Spinner("Compiling a.rs...", stream=stream, interval=0.01) as spinner:
        spinner.set_message("Running a.rs...")
        assert spinner.message == "Running a.rs..."
    text = stream.getvalue()
    assert "Compiling a.rs..." in text
    assert "Running a.rs..." in text
    assert text.endswith("\r\x1b[2K")


def test_spinner_is_silent_off_terminal():
    stream = io.StringIO()
    with Spinner("Testing b.rs...", stream=stream) as spinner:
        spinner.set_message("Running b.rs...")
    assert stream.getvalue() == ""


def test_finish_is_idempotent():
    stream = _Tty()
    spinner = Spinner("work", stream=stream, interval=0.01)
    with spinner:
        pass
    before = stream.getvalue()
    spinner.finish_and_clear()
    spinner.set_message("late")
    assert stream.getvalue() == before