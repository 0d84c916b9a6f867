"""记账应用入口：首次运行创建账号，之后问候最近用户。"""
import sys

from finances_app.app.session import SessionController
from finances_app.terminal.backend import ConsoleTerminal
from finances_app.userdata.store import UserDataStore


def main() -> None:
    controller = SessionController(UserDataStore(), ConsoleTerminal())
    sys.exit(controller.run())


if __name__ == "__main__":
    main()
