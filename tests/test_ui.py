import pytest

from rustdrill import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("CLICOLOR", raising=False)


def test_warn_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.warn("Ran ex.rs with errors")
    assert line == "! Ran ex.rs with errors"
    assert capsys.readouterr().out == "! Ran ex.rs with errors\n"


def test_warn_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("broken")
    assert capsys.readouterr().out == "⚠️  broken\n"


def test_success_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran ex.rs")
    assert capsys.readouterr().out == "✓ Successfully ran ex.rs\n"


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = ui.success("done")
    assert line == "✅ done"
    assert capsys.readouterr().out == "✅ done\n"


def test_bold_is_plain_without_terminal(plain):
    assert ui.bold("I AM NOT DONE") == "I AM NOT DONE"


def test_bold_forced_colors(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    assert ui.bold("x") == "\x1b[1mx\x1b[0m"


def test_warn_is_red_when_colors_forced(monkeypatch, capsys):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.warn("oops")
    assert line.startswith("\x1b[31m!")
    assert "oops" in capsys.readouterr().out


def test_clicolor_zero_disables(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("CLICOLOR", "0")
    assert ui.paint("text", "blue", bold=True) == "text"