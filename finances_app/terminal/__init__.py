"""终端：能力接口、控制台与脚本化实现、提示输入。"""
from finances_app.terminal.backend import ConsoleTerminal, Terminal
from finances_app.terminal.scripted import ScriptedTerminal
from finances_app.terminal.prompt import ask_line, ask_masked_line

__all__ = [
    "Terminal",
    "ConsoleTerminal",
    "ScriptedTerminal",
    "ask_line",
    "ask_masked_line",
]
