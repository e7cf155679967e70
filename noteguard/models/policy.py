"""角色策略模型与组合规则。"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from .context import CheckContext
from .role import Role

Predicate = Callable[[CheckContext], Optional[bool]]


def merge_bundles(*bundles: Mapping[str, Predicate]) -> Mapping[str, Predicate]:
    """按顺序合并动态规则，同名键以后出现者为准。"""

    merged: dict[str, Predicate] = {}
    for bundle in bundles:
        merged.update(bundle)
    return MappingProxyType(merged)


@dataclass(frozen=True, slots=True)
class RolePolicy:
    """单个角色的策略：静态白名单 + 动态规则表。"""

    role: Role
    static: frozenset[str] = frozenset()
    dynamic: Mapping[str, Predicate] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "static", frozenset(self.static))
        if not isinstance(self.dynamic, MappingProxyType):
            object.__setattr__(self, "dynamic", MappingProxyType(dict(self.dynamic)))

    def extend(
        self,
        role: Role,
        *,
        static: Iterable[str] = (),
        dynamic: Iterable[Mapping[str, Predicate]] = (),
    ) -> RolePolicy:
        """在当前策略基础上构建更高一级角色的策略。"""

        return RolePolicy(
            role=role,
            static=self.static | frozenset(static),
            dynamic=merge_bundles(self.dynamic, *dynamic),
        )

    def allows_statically(self, action: str) -> bool:
        return action in self.static

    def predicate_for(self, action: str) -> Predicate | None:
        return self.dynamic.get(action)
