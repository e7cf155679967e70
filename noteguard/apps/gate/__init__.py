"""界面权限门控。"""

from .rendering import register_gate_globals, render_gated

__all__ = ["register_gate_globals", "render_gated"]
