"""NoteGuard：笔记应用的角色权限判定。"""

from .apps.gate import render_gated
from .models import CheckContext, Role, RolePolicy
from .services.permission_service import build_permission_flags, check_permission
from .services.policy_service import ADMIN, BASELINE, DYNAMIC, EMPLOYEE, RULES, DynamicAction, Static

__all__ = [
    "ADMIN",
    "BASELINE",
    "DYNAMIC",
    "EMPLOYEE",
    "RULES",
    "CheckContext",
    "DynamicAction",
    "Role",
    "RolePolicy",
    "Static",
    "build_permission_flags",
    "check_permission",
    "render_gated",
]
