"""无界面终端：按脚本回放输入并记录输出。"""
from typing import Iterable, List, Optional

from finances_app.terminal.backend import Terminal

CLEAR_SCREEN = "<clear-screen>"


class ScriptedTerminal(Terminal):
    """脚本化终端：lines 供 read_line，keys 供 read_key；输出按行记录。"""

    def __init__(self, lines: Optional[Iterable[str]] = None, keys: Optional[Iterable[str]] = None):
        self._lines = list(lines or [])
        self._keys = list(keys or [])
        self.raw: List[str] = []
        self.cursor_moves: List[int] = []
        self.cleared_lines = 0

    def read_key(self) -> str:
        if not self._keys:
            raise EOFError
        return self._keys.pop(0)

    def read_line(self) -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.raw.append(text)

    def move_cursor(self, columns: int) -> None:
        self.cursor_moves.append(columns)

    def clear_lines(self, count: int) -> None:
        self.cleared_lines += count

    def clear_screen(self) -> None:
        self.raw.append(CLEAR_SCREEN + "\n")

    @property
    def output(self) -> str:
        return "".join(self.raw)

    def output_lines(self) -> List[str]:
        return self.output.splitlines()
