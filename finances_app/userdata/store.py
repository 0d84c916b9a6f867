"""用户数据文件存储（本地 JSON，整份读写）。"""
import sys
from pathlib import Path
from typing import Optional

from finances_app.config import USER_DATA_DIR, USER_DATA_FILE
from finances_app.userdata.codec import decode, encode
from finances_app.userdata.models import UserDataDocument


class StorageError(Exception):
    """目录/文件创建、读取、写入、删除失败。"""

    def __init__(self, action: str, path: Path, cause: OSError):
        super().__init__(f"failed to {action} {path}: {cause.strerror or cause}")
        self.action = action
        self.path = path
        self.cause = cause


class UserDataStore:
    """用户数据文件：路径只解析一次，之后的读写都使用该路径。"""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or USER_DATA_DIR
        self.path = self.base_dir / USER_DATA_FILE

    def resolve_path(self) -> Path:
        """确保数据文件存在；不存在时创建目录并写入空文档。已存在则不写。"""
        if self.path.exists():
            return self.path
        self._ensure_dir()
        self._write(UserDataDocument.empty())
        print(f"[记账-存储] 已创建数据文件 {self.path}", file=sys.stderr, flush=True)
        return self.path

    def load(self) -> UserDataDocument:
        """读取并解码整份文件。内容损坏时抛出 DecodeError。"""
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise StorageError("read", self.path, e)
        return decode(data)

    def save(self, doc: UserDataDocument) -> None:
        """整份写回文件。"""
        self._ensure_dir()
        self._write(doc)

    def delete(self) -> None:
        """删除数据文件。"""
        try:
            self.path.unlink()
        except OSError as e:
            raise StorageError("delete", self.path, e)
        print(f"[记账-存储] 已删除 {self.path}", file=sys.stderr, flush=True)

    def _ensure_dir(self) -> None:
        if self.base_dir.is_dir():
            return
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("create directory", self.base_dir, e)
        print(f"[记账-存储] 已创建目录 {self.base_dir}", file=sys.stderr, flush=True)

    def _write(self, doc: UserDataDocument) -> None:
        try:
            with open(self.path, "wb") as f:
                f.write(encode(doc))
        except OSError as e:
            raise StorageError("write", self.path, e)
