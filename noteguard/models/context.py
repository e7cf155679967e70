"""鉴权上下文模型。"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool
from pydantic.alias_generators import to_camel


class CheckContext(BaseModel):
    """动态权限判断所需的调用方与目标资源信息。

    同时接受 snake_case 与前端常用的 camelCase 键（``userId``、``ownerId``）。
    ``user_unit_id``、``unit_id``、``is_private`` 预留给按部门/私有性控制的规则，
    当前没有规则读取它们，因此不做类型校验。``is_admin`` 只接受真正的布尔值。
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    user_id: int | str | None = None
    owner_id: int | str | None = None
    user_unit_id: Any = None
    unit_id: Any = None
    is_admin: StrictBool | None = None
    is_private: Any = None

    def is_owner(self) -> bool:
        """调用方是否为资源所有者（按字符串形式比较标识）。"""

        if not self.user_id or not self.owner_id:
            return False
        return str(self.user_id) == str(self.owner_id)
