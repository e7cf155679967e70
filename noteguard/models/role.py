"""角色枚举。"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Role(IntEnum):
    """角色，按权限从低到高排列。

    数值仅作为稳定标识使用，鉴权逻辑不做 ``role >= X`` 比较。
    """

    BASELINE = 0
    EMPLOYEE = 1
    ADMIN = 2

    @classmethod
    def parse(cls, value: Any) -> Role | None:
        """将 Role / 整数 / 数字字符串 / 名称解析为角色，无法识别时返回 None。"""

        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls.parse(int(text))
            return cls.__members__.get(text.upper())
        return None
