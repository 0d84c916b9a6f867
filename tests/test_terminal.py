"""终端提示输入测试。"""
import io

import pytest

from finances_app.terminal.backend import ConsoleTerminal, Terminal
from finances_app.terminal.prompt import ask_line, ask_masked_line
from finances_app.terminal.scripted import ScriptedTerminal


def test_ask_line_returns_raw_input() -> None:
    terminal = ScriptedTerminal(lines=["  Alice Smith "])
    assert ask_line(terminal, "Your name:") == "  Alice Smith "
    assert terminal.output == "Your name:\n"


def test_ask_line_reprompts_on_empty_input() -> None:
    terminal = ScriptedTerminal(lines=["", "", "bob"])
    assert ask_line(terminal, "Username:") == "bob"
    assert terminal.output_lines() == ["Username:"] * 3
    assert terminal.cleared_lines == 6


def test_ask_line_allowed_values_case_insensitive() -> None:
    terminal = ScriptedTerminal(lines=["", "remove", "DeLeTe"])
    value = ask_line(terminal, "Type DELETE or EXIT", ["delete", "exit"])
    assert value == "DeLeTe"
    assert value.lower() in {"delete", "exit"}
    assert terminal.output_lines() == ["Type DELETE or EXIT"] * 3


def test_ask_line_raises_when_input_closed() -> None:
    terminal = ScriptedTerminal(lines=["maybe"])
    with pytest.raises(EOFError):
        ask_line(terminal, "Type DELETE or EXIT", ["delete", "exit"])


def test_ask_masked_line_masks_and_handles_backspace() -> None:
    terminal = ScriptedTerminal(keys=["a", "b", "\x7f", "c", "\r"])
    assert ask_masked_line(terminal, "Password:") == "ac"
    assert terminal.output == "Password:\n** *\n"
    assert terminal.cursor_moves == [-1, -1]


def test_ask_masked_line_allows_empty_and_ignores_extra_backspace() -> None:
    terminal = ScriptedTerminal(keys=["\x08", "\n"])
    assert ask_masked_line(terminal, "Password:") == ""
    assert terminal.cursor_moves == []


def test_ask_masked_line_ctrl_c() -> None:
    terminal = ScriptedTerminal(keys=["x", "\x03"])
    with pytest.raises(KeyboardInterrupt):
        ask_masked_line(terminal, "Password:")


def test_ask_masked_line_ignores_arrow_keys() -> None:
    terminal = ScriptedTerminal(keys=["\x1b[A", "b", "\x1b[D", "\r"])
    assert ask_masked_line(terminal, "Password:") == "b"
    assert terminal.output == "Password:\n*\n"


def test_console_terminal_reads_escape_sequence_as_one_key() -> None:
    terminal = ConsoleTerminal(stdin=io.StringIO("\x1b[Ab\r"), stdout=io.StringIO())
    assert ask_masked_line(terminal, "Password:") == "b"


def test_console_terminal_read_key_eof() -> None:
    terminal = ConsoleTerminal(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(EOFError):
        terminal.read_key()


def test_terminal_backend_must_implement_all_capabilities() -> None:
    class WriteOnly(Terminal):
        def write(self, text: str) -> None:
            pass

    with pytest.raises(TypeError):
        WriteOnly()
