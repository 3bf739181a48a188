"""Commands: reporting helpers used by the CLI."""

from .listing import (
    HookInfo,
    create_simple_view,
    create_styled_view,
    list_hooks,
    render_hooks,
    supports_styled_output,
)

__all__ = [
    "HookInfo",
    "create_simple_view",
    "create_styled_view",
    "list_hooks",
    "render_hooks",
    "supports_styled_output",
]
