"""启动流程：解析数据文件 → 加载 → 问候最近用户或创建新用户 → 保存 → 欢迎横幅。"""
from finances_app.config import WELCOME_BANNER
from finances_app.terminal.backend import Terminal
from finances_app.terminal.prompt import ask_line, ask_masked_line
from finances_app.userdata.codec import DecodeError
from finances_app.userdata.models import UserDataDocument
from finances_app.userdata.store import StorageError, UserDataStore

EXIT_OK = 0
EXIT_FAILURE = 1


class SessionController:
    """一次进程运行的会话；run() 返回进程退出码。"""

    def __init__(self, store: UserDataStore, terminal: Terminal):
        self.store = store
        self.terminal = terminal

    def run(self) -> int:
        try:
            return self._run()
        except StorageError as e:
            self.terminal.write_line(f"ERROR: {e}")
            return EXIT_FAILURE
        except (EOFError, KeyboardInterrupt):
            self.terminal.write_line()
            self.terminal.write_line("SYSTEM: Input closed. Exiting program.")
            return EXIT_FAILURE

    def _run(self) -> int:
        self.store.resolve_path()
        try:
            doc = self.store.load()
        except DecodeError:
            return self._handle_corrupt_document()

        if doc.last_user is not None:
            self.greet(doc)
        else:
            self.create_user(doc)

        self.terminal.clear_screen()
        self.terminal.write_line(WELCOME_BANNER)
        return EXIT_OK

    def _handle_corrupt_document(self) -> int:
        """文件损坏：只能删除后退出或直接退出，两者都以失败码结束。"""
        self.terminal.write_line("ERROR: Failed to deserialize JSON data.")
        choice = ask_line(
            self.terminal,
            "Type DELETE to delete user data, or EXIT to close the app.",
            ["delete", "exit"],
        ).lower()
        if choice == "delete":
            self.store.delete()
            self.terminal.write_line("SYSTEM: User data deleted. Exiting program.")
        else:
            self.terminal.write_line("SYSTEM: Exiting program.")
        return EXIT_FAILURE

    def greet(self, doc: UserDataDocument) -> None:
        modified = doc.last_modified_date.isoformat() if doc.last_modified_date else ""
        self.terminal.write_line(f"Last User: {doc.last_user.username}")
        self.terminal.write_line(f"Last Modified Date: {modified}")

    def create_user(self, doc: UserDataDocument) -> None:
        """首次运行：录入姓名、用户名、密码，追加为新用户并写回文件。"""
        self.terminal.write_line("CREATE USER ACCOUNT")
        self.terminal.write_line()
        name = ask_line(self.terminal, "Your name:")
        username = ask_line(self.terminal, "Username:")
        password = ask_masked_line(self.terminal, "Password:")
        doc.add_user(name, username, password)
        self.store.save(doc)
