"""鉴权依赖：在路由调用点执行权限判定并记录拒绝。"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from fastapi import HTTPException, Request
from starlette.status import HTTP_403_FORBIDDEN

from noteguard import config
from noteguard.services.permission_service import ContextLike, check_permission

logger = logging.getLogger(__name__)

RoleGetter = Callable[[Request], Any]
ContextGetter = Callable[[Request], Union[ContextLike, Awaitable[ContextLike]]]


def forbidden(message: str | None = None) -> HTTPException:
    """返回统一的 403 异常。"""

    return HTTPException(status_code=HTTP_403_FORBIDDEN, detail=message or config.PERMISSION_DENY_MESSAGE)


def require_permission(
    action: str,
    *,
    role_getter: RoleGetter,
    context_getter: ContextGetter | None = None,
) -> Callable[[Request], Awaitable[None]]:
    """构建 FastAPI 依赖：当前请求无权执行 ``action`` 时返回 403。

    ``role_getter`` 从请求中取出角色（例如 session 或 request.state），
    ``context_getter`` 可选，用于加载目标资源的所有者等信息，允许是协程函数。
    """

    async def dependency(request: Request) -> None:
        role = role_getter(request)
        data: ContextLike = None
        if context_getter is not None:
            data = context_getter(request)
            if inspect.isawaitable(data):
                data = await data

        if check_permission(role, action, data):
            return

        if config.PERMISSION_LOG_DENIALS:
            logger.warning(
                "拒绝访问: role=%r action=%s method=%s path=%s",
                role,
                action,
                request.method,
                request.url.path,
            )
        raise forbidden()

    return dependency
