"""权限判定服务。"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from pydantic import ValidationError

from noteguard.models import CheckContext, Role
from noteguard.services import policy_service

logger = logging.getLogger(__name__)

ContextLike = Union[CheckContext, Mapping[str, Any], None]


def resolve_context(data: ContextLike) -> CheckContext | None:
    """将调用方传入的上下文统一为 CheckContext，无法解析时返回 None。"""

    if data is None:
        return CheckContext()
    if isinstance(data, CheckContext):
        return data
    if not isinstance(data, Mapping):
        return None
    try:
        return CheckContext.model_validate(dict(data))
    except ValidationError as exc:
        logger.debug("鉴权上下文无效，按拒绝处理: %s", exc.errors())
        return None


def check_permission(role: Any, action: str, data: ContextLike = None) -> bool:
    """判断角色能否执行指定动作。

    未知角色、未注册动作、上下文不足或规则不表态时一律返回 False，不抛出异常。
    静态白名单命中后直接放行，不再查询动态规则。
    """

    if role is None or not isinstance(action, str):
        return False

    policy = policy_service.get_policy(Role.parse(role))
    if policy is None:
        return False

    if policy.allows_statically(action):
        return True

    predicate = policy.predicate_for(action)
    if predicate is None:
        return False

    context = resolve_context(data)
    if context is None:
        return False
    return bool(predicate(context))


def build_permission_flags(
    role: Any,
    data: ContextLike = None,
    actions: Iterable[str] | None = None,
) -> dict[str, bool]:
    """批量计算动作开关，供模板与菜单使用。"""

    names = policy_service.known_actions() if actions is None else list(actions)
    return {action: check_permission(role, action, data) for action in names}
