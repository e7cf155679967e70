"""权限检查命令行工具。"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from noteguard import config
from noteguard.models import Role
from noteguard.services import permission_service, policy_service

logger = logging.getLogger(__name__)


def _add_context_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--user-id", default=None, help="当前用户标识")
    parser.add_argument("--owner-id", default=None, help="资源所有者标识")
    parser.add_argument("--user-unit-id", type=int, default=None, help="当前用户所属部门")
    parser.add_argument("--unit-id", type=int, default=None, help="资源所属部门")
    parser.add_argument("--admin", action="store_true", help="调用方具有管理员身份")
    parser.add_argument("--private", action="store_true", help="资源为私有")


def build_parser() -> argparse.ArgumentParser:
    """构建命令参数解析器。"""

    parser = argparse.ArgumentParser(prog="noteguard", description=f"{config.APP_NAME} 权限检查工具")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="日志级别，默认读取 LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="判断角色能否执行某个动作")
    check.add_argument("--role", required=True, help="角色名称或编号，例如 admin / 2")
    check.add_argument("--action", required=True, help="动作名称，例如 UpdateNote")
    _add_context_arguments(check)

    flags = sub.add_parser("flags", help="列出角色对全部已知动作的判定结果")
    flags.add_argument("--role", required=True, help="角色名称或编号")
    flags.add_argument("--json", action="store_true", help="以 JSON 输出")
    _add_context_arguments(flags)

    table = sub.add_parser("table", help="打印策略表")
    table.add_argument("--json", action="store_true", help="以 JSON 输出")
    return parser


def _context_from_args(args: argparse.Namespace) -> dict[str, Any]:
    data: dict[str, Any] = {
        "user_id": args.user_id,
        "owner_id": args.owner_id,
        "user_unit_id": args.user_unit_id,
        "unit_id": args.unit_id,
    }
    if args.admin:
        data["is_admin"] = True
    if args.private:
        data["is_private"] = True
    return {key: value for key, value in data.items() if value is not None}


def _print_table(as_json: bool) -> None:
    rows = policy_service.describe_table()
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return
    for row in rows:
        print(f"{row['role']} ({row['value']})")
        print(f"  static : {', '.join(row['static'])}")
        for action, predicate in row["dynamic"].items():
            print(f"  dynamic: {action} -> {predicate}")


def main(argv: Sequence[str] | None = None) -> int:
    """命令行主流程，返回进程退出码。"""

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "table":
        _print_table(args.json)
        return 0

    role = Role.parse(args.role)
    if role is None:
        logger.warning("未知角色: %s", args.role)
    data = _context_from_args(args)

    if args.command == "flags":
        flags = permission_service.build_permission_flags(role, data)
        if args.json:
            print(json.dumps(flags, ensure_ascii=False, indent=2))
        else:
            for action, allowed in flags.items():
                print(f"{action}: {'allow' if allowed else 'deny'}")
        return 0

    allowed = permission_service.check_permission(role, args.action, data)
    logger.debug("check role=%s action=%s context=%s allowed=%s", args.role, args.action, data, allowed)
    print("allow" if allowed else "deny")
    return 0 if allowed else 1
