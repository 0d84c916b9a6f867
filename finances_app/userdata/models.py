"""用户与用户数据文档模型。"""
from datetime import datetime, timedelta
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRecord(BaseModel):
    """用户账号（密码明文保存）。"""
    id: int = Field(..., gt=0, description="用户 ID，按创建顺序从 1 递增")
    name: str = Field(..., min_length=1, description="姓名")
    username: str = Field(..., min_length=1, description="用户名，可重复")
    password: str = Field("", description="密码（明文）")

    model_config = ConfigDict(extra="forbid")


class UserDataDocument(BaseModel):
    """整份用户数据文件：用户列表、最近用户、最后修改时间。"""
    users: List[UserRecord] = Field(..., description="用户列表，只追加")
    last_user: Optional[UserRecord] = Field(None, alias="lastUser", description="最近创建的用户（值拷贝）")
    last_modified_date: Optional[datetime] = Field(
        None, alias="lastModifiedDate", description="最后写入时间（本地时间）"
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("last_modified_date")
    @classmethod
    def _to_local_naive(cls, v: Optional[datetime]) -> Optional[datetime]:
        # 带时区的时间统一换算为本地无时区时间
        if v is not None and v.tzinfo is not None:
            return v.astimezone().replace(tzinfo=None)
        return v

    @classmethod
    def empty(cls) -> "UserDataDocument":
        return cls(users=[], last_user=None, last_modified_date=None)

    def next_user_id(self) -> int:
        return len(self.users) + 1

    def touch(self) -> None:
        """更新最后修改时间，保证严格大于上一次的值。"""
        now = datetime.now()
        previous = self.last_modified_date
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        self.last_modified_date = now

    def add_user(self, name: str, username: str, password: str) -> UserRecord:
        """追加新用户并设为最近用户。"""
        user = UserRecord(
            id=self.next_user_id(),
            name=name,
            username=username,
            password=password,
        )
        self.users.append(user)
        self.last_user = user.model_copy()
        self.touch()
        return user
