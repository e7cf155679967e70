"""项目主启动入口（权限检查命令行）。"""

from __future__ import annotations

from noteguard.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
