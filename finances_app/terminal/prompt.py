"""终端提示输入：必填行输入（可限定取值）与掩码密码输入。"""
from typing import Iterable, Optional

from finances_app.config import PASSWORD_MASK
from finances_app.terminal.backend import ESCAPE, Terminal

ENTER_KEYS = ("\r", "\n")
BACKSPACE_KEYS = ("\x7f", "\x08")
CTRL_C = "\x03"


def _accepts(value: str, allowed: Optional[set]) -> bool:
    if not value:
        return False
    return allowed is None or value.lower() in allowed


def ask_line(terminal: Terminal, prompt: str, allowed_values: Optional[Iterable[str]] = None) -> str:
    """提示并读取一行，空输入或不在 allowed_values（不区分大小写）内时重新提示。

    返回原始输入（不去空白、不转小写），调用方比较前需自行转小写。
    每次失败会清掉上一次的提示行与输入行再重新提示。
    """
    allowed = {v.lower() for v in allowed_values} if allowed_values is not None else None
    terminal.write_line(prompt)
    value = terminal.read_line()
    while not _accepts(value, allowed):
        terminal.clear_lines(2)
        terminal.write_line(prompt)
        value = terminal.read_line()
    terminal.clear_lines(2)
    return value


def ask_masked_line(terminal: Terminal, prompt: str) -> str:
    """提示并逐键读取密码，每个字符回显为掩码；回车结束，允许为空。"""
    terminal.write_line(prompt)
    buffer = []
    while True:
        key = terminal.read_key()
        if key in ENTER_KEYS:
            break
        if key == CTRL_C:
            raise KeyboardInterrupt
        if key in BACKSPACE_KEYS:
            if buffer:
                buffer.pop()
                terminal.move_cursor(-1)
                terminal.write(" ")
                terminal.move_cursor(-1)
            continue
        if not key or key.startswith(ESCAPE) or not key.isprintable():
            continue
        buffer.append(key)
        terminal.write(PASSWORD_MASK)
    terminal.write_line()
    return "".join(buffer)
