"""用户数据：模型、编解码与文件存储。"""
from finances_app.userdata.models import UserDataDocument, UserRecord
from finances_app.userdata.codec import DecodeError, decode, encode
from finances_app.userdata.store import StorageError, UserDataStore

__all__ = [
    "UserDataDocument",
    "UserRecord",
    "DecodeError",
    "decode",
    "encode",
    "StorageError",
    "UserDataStore",
]
