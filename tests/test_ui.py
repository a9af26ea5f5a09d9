import pytest

from rustlings import ui


def test_red_wraps_text_in_ansi_codes():
    assert ui.red("x") == "\x1b[31mx\x1b[0m"


@pytest.mark.parametrize("styler", [ui.bold, ui.green, ui.blue, ui.red])
def test_styles_keep_text_and_reset(styler):
    styled = styler("hello")
    assert "hello" in styled
    assert styled.endswith(ui.red("").removeprefix("\x1b[31m"))
    assert styled.startswith("\x1b[")


def test_styles_are_distinct():
    outputs = {ui.bold("t"), ui.red("t"), ui.green("t"), ui.blue("t")}
    assert len(outputs) == 4


def test_styles_accept_numbers():
    assert "12" in ui.blue(12)


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_plain_symbol(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.warn("Ran example with errors")
    assert line == f"{ui.red('!')} {ui.red('Ran example with errors')}"
    assert capsys.readouterr().out == line + "\n"


def test_warn_emoji_symbol(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = ui.warn("oops")
    assert "⚠️" in line
    assert ui.red("oops") in capsys.readouterr().out


def test_success_plain_symbol(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.success("Successfully ran example")
    assert line == f"{ui.green('✓')} {ui.green('Successfully ran example')}"
    assert capsys.readouterr().out.strip() == line


def test_success_emoji_symbol(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = ui.success("done")
    assert "✅" in line
    assert "✓" not in line