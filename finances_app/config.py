"""记账应用全局配置与路径。"""
import os
import sys
from pathlib import Path

# 应用数据子目录与用户数据文件名
APP_DIR_NAME = "FinancesApp"
USER_DATA_FILE = "userdata.json"

# 终端
PASSWORD_MASK = "*"
WELCOME_BANNER = "Welcome to the Finances app."


def app_data_root() -> Path:
    """按平台返回当前用户的应用数据目录。"""
    if os.name == "nt":
        appdata = os.environ.get("APPDATA", "").strip()
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    return Path(xdg) if xdg else Path.home() / ".config"


# 用户数据目录：<应用数据目录>/FinancesApp
USER_DATA_DIR = app_data_root() / APP_DIR_NAME
