"""模型集合。"""

from .context import CheckContext
from .policy import Predicate, RolePolicy, merge_bundles
from .role import Role

__all__ = ["CheckContext", "Predicate", "Role", "RolePolicy", "merge_bundles"]
