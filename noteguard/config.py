"""应用配置（通过 .env 覆盖）。"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# 优先加载项目根目录下的 .env
BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / ".env")


def _to_bool(value: str | None, default: bool = False) -> bool:
    """安全解析布尔环境变量。"""

    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "on", "yes"}


APP_NAME = os.getenv("APP_NAME", "NoteGuard")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

PERMISSION_LOG_DENIALS = _to_bool(os.getenv("PERMISSION_LOG_DENIALS"), default=True)
PERMISSION_DENY_MESSAGE = os.getenv("PERMISSION_DENY_MESSAGE", "当前账号没有执行该操作的权限。")
