"""终端能力接口与真实控制台实现（按键读取、光标移动、原样输出）。"""
import os
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class Terminal(ABC):
    """提示输入所需的终端能力。"""

    @abstractmethod
    def read_key(self) -> str:
        """读取单个按键，不回显。"""
        raise NotImplementedError

    @abstractmethod
    def read_line(self) -> str:
        """读取一行（不含换行符）；输入结束时抛出 EOFError。"""
        raise NotImplementedError

    @abstractmethod
    def write(self, text: str) -> None:
        raise NotImplementedError

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    @abstractmethod
    def move_cursor(self, columns: int) -> None:
        """在当前行内左右移动光标，负数向左。"""
        raise NotImplementedError

    @abstractmethod
    def clear_lines(self, count: int) -> None:
        """清除光标上方的 count 行，光标停在被清除的第一行行首。"""
        raise NotImplementedError

    @abstractmethod
    def clear_screen(self) -> None:
        raise NotImplementedError


ESCAPE = "\x1b"


def _read_key_sequence(stream: TextIO) -> str:
    """读取一个按键；方向键等转义序列整体返回（如 "\\x1b[A"）。"""
    ch = stream.read(1)
    if ch != ESCAPE:
        return ch
    ch2 = stream.read(1)
    if ch2 == "[":
        return ESCAPE + "[" + stream.read(1)
    return ch + ch2


def _getch_unix(stream: TextIO) -> str:
    import termios
    import tty
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return _read_key_sequence(stream)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _getch_windows() -> str:
    import msvcrt
    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):  # 功能键：丢弃第二个字节
        msvcrt.getwch()
        return ""
    return ch


class ConsoleTerminal(Terminal):
    """标准输入输出上的终端。非 TTY 时光标控制与清屏为空操作。"""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _interactive(self) -> bool:
        return self.stdout.isatty()

    def read_key(self) -> str:
        self.stdout.flush()
        if not self.stdin.isatty():
            ch = _read_key_sequence(self.stdin)
            if not ch:
                raise EOFError
            return ch
        if os.name == "nt":
            return _getch_windows()
        return _getch_unix(self.stdin)

    def read_line(self) -> str:
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def move_cursor(self, columns: int) -> None:
        if not self._interactive() or columns == 0:
            return
        code = "D" if columns < 0 else "C"
        self.write(f"\x1b[{abs(columns)}{code}")

    def clear_lines(self, count: int) -> None:
        if not self._interactive():
            return
        for _ in range(count):
            self.write("\x1b[1A\x1b[2K")
        self.write("\r")

    def clear_screen(self) -> None:
        if not self._interactive():
            return
        os.system("cls" if os.name == "nt" else "clear")
