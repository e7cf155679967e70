"""按权限结果渲染两个分支之一的门控工具。"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from jinja2 import Environment

from noteguard.services.permission_service import ContextLike, check_permission

T = TypeVar("T")

Producer = Callable[[], T]


def _empty() -> None:
    return None


def render_gated(
    with_role: Any,
    perform: str,
    data: ContextLike = None,
    yes: Optional[Producer[Any]] = None,
    no: Optional[Producer[Any]] = None,
) -> Any:
    """有权限时返回 ``yes()`` 的结果，否则返回 ``no()`` 的结果。

    两个分支都是可选的零参数函数，缺省时视为返回空内容。
    """

    allowed = yes or _empty
    denied = no or _empty
    return allowed() if check_permission(with_role, perform, data) else denied()


def register_gate_globals(env: Environment) -> Environment:
    """向 Jinja2 环境注册 ``can_user`` 与 ``check_permission``。

    模板中可以把无参宏作为分支传入::

        {% macro yes() %}<button>删除</button>{% endmacro %}
        {{ can_user(role, "DeleteNote", note_ctx, yes) }}
    """

    env.globals["can_user"] = render_gated
    env.globals["check_permission"] = check_permission
    return env
