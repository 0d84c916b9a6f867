"""用户数据文档的 JSON 编解码。"""
from pydantic import ValidationError

from finances_app.userdata.models import UserDataDocument


class DecodeError(Exception):
    """用户数据文件内容无法解析为文档。"""


def encode(doc: UserDataDocument) -> bytes:
    """编码为带缩进的 UTF-8 JSON，字段名 users / lastUser / lastModifiedDate。"""
    return doc.model_dump_json(indent=2, by_alias=True).encode("utf-8")


def decode(data: bytes) -> UserDataDocument:
    """解码文件内容；格式错误抛出 DecodeError，不返回 None。"""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"not valid UTF-8: {e}") from e
    try:
        return UserDataDocument.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError(f"invalid user data document ({e.error_count()} error(s))") from e
