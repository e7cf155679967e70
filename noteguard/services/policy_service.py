"""角色策略表。

静态权限：角色可无条件执行的动作（一般对应界面上的一个按钮）。
动态权限：需要结合资源上下文判断的动作（行级权限，例如“只能修改自己的笔记”）。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from noteguard.models import CheckContext, Predicate, Role, RolePolicy, merge_bundles


class Static:
    """静态权限点。"""

    VIEW_NOTE = "ViewNote"
    CREATE_NOTE = "CreateNote"
    CREATE_TASK = "CreateTask"
    SEARCH_NOTE = "SearchNote"
    DELETE_NOTE = "DeleteNote"
    EXPORT_NOTE = "ExportNote"


class DynamicAction:
    """动态权限点。"""

    READ_OWN_NOTE = "ReadOwnNote"
    UPDATE_NOTE = "UpdateNote"
    DELETE_NOTE = "DeleteNote"


def read_own_note(context: CheckContext) -> bool:
    return context.is_owner()


def read_all_note(context: CheckContext) -> bool | None:
    # 管理员可以读取所有笔记；非管理员不表态（视为拒绝）
    if context.is_admin is True:
        return True
    return None


def update_note(context: CheckContext) -> bool:
    if not context.user_id or not context.owner_id:
        return False
    if context.is_owner():
        return True
    return context.is_admin is True


def delete_note(context: CheckContext) -> bool:
    """仅管理员可删除，所有者身份不起作用。"""

    if not context.user_id or not context.owner_id:
        return False
    return context.is_admin is True


# 动态规则包按其主要保护的动作命名。
# 注意 ReadAllNote 包的键同样是 ReadOwnNote。
DYNAMIC: Mapping[str, Mapping[str, Predicate]] = MappingProxyType(
    {
        "ReadOwnNote": MappingProxyType({DynamicAction.READ_OWN_NOTE: read_own_note}),
        "ReadAllNote": MappingProxyType({DynamicAction.READ_OWN_NOTE: read_all_note}),
        "UpdateNote": MappingProxyType({DynamicAction.UPDATE_NOTE: update_note}),
        "DeleteNote": MappingProxyType({DynamicAction.DELETE_NOTE: delete_note}),
    }
)

BASELINE = RolePolicy(
    role=Role.BASELINE,
    static=frozenset(
        {
            Static.CREATE_NOTE,
            Static.VIEW_NOTE,
            Static.CREATE_TASK,
            Static.SEARCH_NOTE,
        }
    ),
    dynamic=merge_bundles(DYNAMIC["DeleteNote"], DYNAMIC["UpdateNote"], DYNAMIC["ReadOwnNote"]),
)

# Baseline 的全部权限 + 导出笔记
EMPLOYEE = BASELINE.extend(Role.EMPLOYEE, static=[Static.EXPORT_NOTE])

# Employee 的全部权限 + 删除笔记。
# ReadAllNote 包以 ReadOwnNote 为键，合并后覆盖了继承来的所有权校验：
# ADMIN 的 ReadOwnNote 只判断 is_admin，与 ReadAllNote 无法区分。
# 这是沿用下来的既有行为，调整前需确认是否应改为独立的 ReadAllNote 动作。
ADMIN = EMPLOYEE.extend(
    Role.ADMIN,
    static=[Static.DELETE_NOTE],
    dynamic=[DYNAMIC["ReadAllNote"]],
)

RULES: Mapping[Role, RolePolicy] = MappingProxyType(
    {
        Role.BASELINE: BASELINE,
        Role.EMPLOYEE: EMPLOYEE,
        Role.ADMIN: ADMIN,
    }
)


def get_policy(role: Role | None) -> RolePolicy | None:
    if role is None:
        return None
    return RULES.get(role)


def known_actions() -> list[str]:
    """策略表中出现过的全部动作名（静态与动态合并去重）。"""

    actions: set[str] = set()
    for policy in RULES.values():
        actions.update(policy.static)
        actions.update(policy.dynamic)
    return sorted(actions)


def describe_table() -> list[dict[str, Any]]:
    """导出策略表的纯数据视图，供命令行展示。"""

    rows: list[dict[str, Any]] = []
    for role, policy in sorted(RULES.items()):
        rows.append(
            {
                "role": role.name,
                "value": int(role),
                "static": sorted(policy.static),
                "dynamic": {
                    action: getattr(predicate, "__name__", repr(predicate))
                    for action, predicate in sorted(policy.dynamic.items())
                },
            }
        )
    return rows
