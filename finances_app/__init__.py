"""记账应用：本地用户数据与终端引导。"""

__version__ = "0.1.0"
