"""启动会话。"""
from finances_app.app.session import SessionController

__all__ = ["SessionController"]
